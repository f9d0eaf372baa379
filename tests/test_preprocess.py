"""Tests for the text/CSV parsing boundary."""

import pandas as pd
import pytest

from src.exceptions import InvalidInput
from src.preprocess import (
    LotSizingRequest,
    build_request,
    demand_from_frame,
    parse_cost,
    parse_demand_text,
    parse_lot_sizing_request,
    parse_periods,
)


class TestParseDemandText:

    def test_comma_separated(self):
        assert parse_demand_text("10, 20,0 , 35.5") == (10.0, 20.0, 0.0, 35.5)

    def test_other_separators(self):
        assert parse_demand_text("10;20\n30") == (10.0, 20.0, 30.0)

    def test_single_value(self):
        assert parse_demand_text("  7 ") == (7.0,)

    def test_trailing_separators_are_ignored(self):
        assert parse_demand_text("10,20,") == (10.0, 20.0)
        assert parse_demand_text("10, 20 , ;") == (10.0, 20.0)

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_blank(self, text):
        with pytest.raises(InvalidInput):
            parse_demand_text(text)

    @pytest.mark.parametrize("text", ["10,,20", ",10", ",,,", "abc", "10, dez", "10,-5", "nan", "10,inf", "1.2.3"])
    def test_malformed(self, text):
        with pytest.raises(InvalidInput):
            parse_demand_text(text)

    def test_message_is_user_facing(self):
        with pytest.raises(InvalidInput) as exc_info:
            parse_demand_text("10, x")
        assert "Entrada inválida" in str(exc_info.value)
        assert "'x'" in str(exc_info.value)

    def test_horizon_limit(self, monkeypatch):
        monkeypatch.setattr("src.preprocess.MAX_HORIZON", 3)
        assert len(parse_demand_text("1,2,3")) == 3
        with pytest.raises(InvalidInput):
            parse_demand_text("1,2,3,4")


class TestParseCost:

    @pytest.mark.parametrize("text, expected", [("1", 1.0), (" 0 ", 0.0), ("2.75", 2.75), ("1e2", 100.0)])
    def test_valid(self, text, expected):
        assert parse_cost(text, "custo por pedido") == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "abc", "-1", "inf", None])
    def test_invalid(self, text):
        with pytest.raises(InvalidInput) as exc_info:
            parse_cost(text, "custo por pedido")
        assert "custo por pedido" in str(exc_info.value)


class TestParsePeriods:

    def test_blank_is_optional(self):
        assert parse_periods("") is None
        assert parse_periods(None) is None

    def test_valid(self):
        assert parse_periods(" 4 ") == 4

    @pytest.mark.parametrize("text", ["0", "-2", "2.5", "quatro"])
    def test_invalid(self, text):
        with pytest.raises(InvalidInput):
            parse_periods(text)


class TestParseLotSizingRequest:

    def test_builds_request(self):
        request = parse_lot_sizing_request("10,10", "1", "50")
        assert request == LotSizingRequest(demand=(10.0, 10.0), holding_cost=1.0, order_cost=50.0)
        assert request.horizon == 2

    def test_periods_must_match(self):
        assert parse_lot_sizing_request("10,10", "1", "50", "2").horizon == 2
        with pytest.raises(InvalidInput) as exc_info:
            parse_lot_sizing_request("10,10", "1", "50", "3")
        assert "3" in str(exc_info.value)

    def test_invalid_cost_field(self):
        with pytest.raises(InvalidInput):
            parse_lot_sizing_request("10,10", "um", "50")

    def test_request_is_immutable(self):
        request = parse_lot_sizing_request("10", "1", "50")
        with pytest.raises(AttributeError):
            request.order_cost = 0.0


class TestBuildRequest:

    def test_from_parsed_demand(self):
        request = build_request((5.0, 0.0, 12.0), "0.5", "40", "3")
        assert request == LotSizingRequest(demand=(5.0, 0.0, 12.0), holding_cost=0.5, order_cost=40.0)

    def test_accepts_list_demand(self):
        assert build_request([1.0, 2.0], "1", "1").demand == (1.0, 2.0)

    def test_periods_mismatch(self):
        with pytest.raises(InvalidInput):
            build_request((5.0, 0.0), "1", "50", "3")

    def test_invalid_cost(self):
        with pytest.raises(InvalidInput):
            build_request((5.0,), "1", "-50")


class TestDemandFromFrame:

    def test_column_in_row_order(self):
        df = pd.DataFrame({"period": [1, 2, 3], "demand": [5, 0, 12.5]})
        assert demand_from_frame(df) == (5.0, 0.0, 12.5)

    def test_custom_column(self):
        df = pd.DataFrame({"qtd": ["3", "4"]})
        assert demand_from_frame(df, "qtd") == (3.0, 4.0)

    def test_missing_column(self):
        with pytest.raises(InvalidInput):
            demand_from_frame(pd.DataFrame({"qtd": [1]}))

    def test_non_numeric(self):
        with pytest.raises(InvalidInput):
            demand_from_frame(pd.DataFrame({"demand": [1, "x", 3]}))

    def test_missing_value(self):
        with pytest.raises(InvalidInput):
            demand_from_frame(pd.DataFrame({"demand": [1.0, None]}))

    def test_negative(self):
        with pytest.raises(InvalidInput):
            demand_from_frame(pd.DataFrame({"demand": [1, -2]}))
