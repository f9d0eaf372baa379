"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def worked_example():
    """Two periods of 10 units, h=1, K=50: one combined order (90) beats two (120)."""
    return {"demand": [10.0, 10.0], "holding_cost": 1.0, "order_cost": 50.0, "expected": 90.0}


@pytest.fixture
def demand_csv(tmp_path):
    """Small demand CSV in the layout of Dados/demanda_exemplo.csv."""
    path = tmp_path / "demanda.csv"
    path.write_text("period,demand\n1,10\n2,10\n3,0\n4,25\n")
    return path
