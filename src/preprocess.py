"""
Conversão das entradas brutas (texto, CSV) em números validados.
Toda a interpretação de texto acontece aqui, antes do cálculo.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from src.config import DEMAND_COLUMN, MAX_HORIZON
from src.exceptions import InvalidInput

logger = logging.getLogger(__name__)

# Vírgula é o separador da lista; ';' e quebras de linha também são aceitos
_DEMAND_SEPARATORS = re.compile(r"[,;\n]")


@dataclass(frozen=True)
class LotSizingRequest:
    """Entradas validadas de um cálculo."""
    demand: Tuple[float, ...]
    holding_cost: float
    order_cost: float

    @property
    def horizon(self) -> int:
        return len(self.demand)


def _parse_number(token: str, label: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise InvalidInput(f"Entrada inválida! '{token}' não é numérico ({label}).") from None
    if not math.isfinite(value):
        raise InvalidInput(f"Entrada inválida! {label} deve ser um número finito.")
    if value < 0:
        raise InvalidInput(f"Entrada inválida! {label} não pode ser negativo ({token}).")
    return value


def _check_horizon(n: int) -> None:
    if n > MAX_HORIZON:
        raise InvalidInput(
            f"Entrada inválida! Horizonte de {n} períodos excede o máximo de {MAX_HORIZON}."
        )


def parse_demand_text(text: str) -> Tuple[float, ...]:
    """
    Demanda por período separada por vírgulas, ex: "10, 20, 0, 35".
    Separadores finais são ignorados ("10,20," -> 10, 20).
    Campo vazio no meio, valor não numérico ou negativo geram InvalidInput.
    """
    if text is None or not text.strip():
        raise InvalidInput("Entrada inválida! Informe a demanda de ao menos um período.")

    tokens = [t.strip() for t in _DEMAND_SEPARATORS.split(text.strip())]
    while tokens and not tokens[-1]:
        tokens.pop()
    if not tokens:
        raise InvalidInput("Entrada inválida! Informe a demanda de ao menos um período.")

    demand = []
    for period, token in enumerate(tokens):
        if not token:
            raise InvalidInput(f"Entrada inválida! Demanda vazia no período {period + 1}.")
        demand.append(_parse_number(token, f"demanda do período {period + 1}"))

    _check_horizon(len(demand))
    return tuple(demand)


def parse_cost(text: str, label: str) -> float:
    """Um único custo não negativo (ex: custo de manutenção, custo de pedido)."""
    if text is None or not str(text).strip():
        raise InvalidInput(f"Entrada inválida! Informe o {label}.")
    return _parse_number(str(text).strip(), label)


def parse_periods(text: Optional[str]) -> Optional[int]:
    """Número de períodos (opcional). Vazio -> None."""
    if text is None or not str(text).strip():
        return None
    token = str(text).strip()
    try:
        periods = int(token)
    except ValueError:
        raise InvalidInput(f"Entrada inválida! Número de períodos '{token}' deve ser inteiro.") from None
    if periods <= 0:
        raise InvalidInput("Entrada inválida! Número de períodos deve ser positivo.")
    return periods


def parse_lot_sizing_request(demand_text: str, holding_text: str, order_text: str,
                             periods_text: Optional[str] = None) -> LotSizingRequest:
    """
    Pipeline de validação dos campos da interface:
    1. Demanda (lista separada por vírgulas)
    2. Custo de manutenção por unidade por período
    3. Custo por pedido
    4. Número de períodos (opcional, deve bater com a lista de demanda)
    """
    return build_request(parse_demand_text(demand_text), holding_text, order_text, periods_text)


def build_request(demand: Tuple[float, ...], holding_text: str, order_text: str,
                  periods_text: Optional[str] = None) -> LotSizingRequest:
    """
    Completa a requisição a partir de uma demanda já convertida (texto ou CSV):
    custos e número de períodos opcional, que deve bater com a demanda.
    """
    holding_cost = parse_cost(holding_text, "custo de manutenção")
    order_cost = parse_cost(order_text, "custo por pedido")

    periods = parse_periods(periods_text)
    if periods is not None and periods != len(demand):
        raise InvalidInput(
            f"Entrada inválida! Número de períodos ({periods}) difere da quantidade "
            f"de valores de demanda ({len(demand)})."
        )

    logger.info("Requisição validada: %d períodos, h=%s, K=%s", len(demand), holding_cost, order_cost)
    return LotSizingRequest(demand=tuple(demand), holding_cost=holding_cost, order_cost=order_cost)


def demand_from_frame(df: pd.DataFrame, column: str = DEMAND_COLUMN) -> Tuple[float, ...]:
    """
    Extrai a série de demanda de uma coluna do DataFrame, na ordem das linhas.
    """
    if column not in df.columns:
        raise InvalidInput(
            f"Entrada inválida! Coluna '{column}' não encontrada. Colunas: {list(df.columns)}"
        )

    values = pd.to_numeric(df[column], errors="coerce")
    bad_rows = values.index[values.isna()].tolist()
    if bad_rows:
        raise InvalidInput(f"Entrada inválida! Demanda não numérica nas linhas {bad_rows[:5]}.")

    values = values.astype(float)
    if (values < 0).any():
        raise InvalidInput("Entrada inválida! A coluna de demanda contém valores negativos.")
    if not np.isfinite(values).all():
        raise InvalidInput("Entrada inválida! A coluna de demanda contém valores não finitos.")

    _check_horizon(len(values))
    return tuple(values.tolist())
