"""Tests for result formatting, strategy comparison and the PDF report."""

import pytest

from src.decision_support import compare_strategies, format_cost, result_message
from src.inventory.lot_sizing import cost_to_go
from src.preprocess import LotSizingRequest
from src.reporting.decision_pdf import build_lot_sizing_pdf


def test_format_cost():
    assert format_cost(90) == "90.00"
    assert format_cost(1234.567) == "1234.57"
    assert format_cost(0.5, decimals=0) == "0"


def test_result_message(worked_example):
    assert result_message(worked_example["expected"]) == "Custo Minimo Total: 90.00"


def test_compare_strategies(worked_example):
    comparison = compare_strategies(
        worked_example["demand"],
        worked_example["holding_cost"],
        worked_example["order_cost"],
    )
    assert list(comparison.columns) == ["Estrategia", "Codigo", "Custo Total", "Economia vs Lote a Lote (%)"]
    assert len(comparison) == 3
    # DP e pedido único empatam em 90; a DP fica em primeiro
    assert comparison.loc[0, "Codigo"] == "dp"
    assert comparison.loc[0, "Custo Total"] == pytest.approx(90.0)
    assert comparison.loc[2, "Codigo"] == "lot_for_lot"
    assert comparison.loc[2, "Economia vs Lote a Lote (%)"] == pytest.approx(0.0)
    assert comparison.loc[0, "Economia vs Lote a Lote (%)"] == pytest.approx(25.0)


def test_compare_strategies_without_demand():
    comparison = compare_strategies([0, 0], 1.0, 50.0)
    assert (comparison["Custo Total"] == 0.0).all()
    assert (comparison["Economia vs Lote a Lote (%)"] == 0.0).all()


def test_build_pdf():
    request = LotSizingRequest(demand=tuple([10.0, 0.0, 35.0] * 6), holding_cost=0.5, order_cost=80.0)
    comparison = compare_strategies(request.demand, request.holding_cost, request.order_cost)
    profile = cost_to_go(request.demand, request.holding_cost, request.order_cost)

    pdf = build_lot_sizing_pdf(request, comparison, profile)

    assert isinstance(pdf, bytes)
    assert pdf.startswith(b"%PDF")
