"""
Support functions for presenting lot-sizing results and comparing strategies.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from src.config import RESULT_DECIMALS
from src.inventory.lot_sizing import LotSizingStrategy, evaluate_strategy

STRATEGY_LABELS = {
    LotSizingStrategy.DYNAMIC_PROGRAMMING: "Programacao Dinamica (otimo)",
    LotSizingStrategy.LOT_FOR_LOT: "Lote a Lote (pedido por periodo)",
    LotSizingStrategy.SINGLE_ORDER: "Pedido Unico (horizonte inteiro)",
}


def format_cost(value: float, decimals: int = RESULT_DECIMALS) -> str:
    return f"{value:.{decimals}f}"


def result_message(value: float) -> str:
    return f"Custo Minimo Total: {format_cost(value)}"


def compare_strategies(
    demand: Sequence[float],
    holding_cost: float,
    order_cost: float,
) -> pd.DataFrame:
    rows = []
    for strategy in LotSizingStrategy:
        rows.append({
            "Estrategia": STRATEGY_LABELS[strategy],
            "Codigo": strategy.value,
            "Custo Total": evaluate_strategy(demand, holding_cost, order_cost, strategy),
        })
    comparison = pd.DataFrame(rows)

    lot_for_lot = comparison.loc[
        comparison["Codigo"] == LotSizingStrategy.LOT_FOR_LOT.value, "Custo Total"
    ].iloc[0]
    if np.isclose(lot_for_lot, 0.0):
        comparison["Economia vs Lote a Lote (%)"] = 0.0
    else:
        comparison["Economia vs Lote a Lote (%)"] = (
            (lot_for_lot - comparison["Custo Total"]) / lot_for_lot * 100
        )

    # Diferencas de arredondamento nao devem tirar a DP do topo em empates
    comparison["_sort_key"] = comparison["Custo Total"].round(9)
    comparison = (
        comparison.sort_values("_sort_key", kind="stable")
        .drop(columns="_sort_key")
        .reset_index(drop=True)
    )
    return comparison
