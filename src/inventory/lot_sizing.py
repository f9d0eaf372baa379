"""
Dimensionamento de Lotes Multi-Período (Programação Dinâmica)
Custo mínimo (pedido + manutenção) para atender a demanda de todos os períodos,
agrupando períodos consecutivos em um único pedido.
"""

import logging
import numbers
from enum import Enum
from typing import Sequence, Union

import numpy as np

from src.exceptions import DomainViolation

logger = logging.getLogger(__name__)


class LotSizingStrategy(Enum):
    """Estratégias de dimensionamento disponíveis (conjunto fechado)."""
    DYNAMIC_PROGRAMMING = "dp"
    LOT_FOR_LOT = "lot_for_lot"     # Um pedido por período
    SINGLE_ORDER = "single_order"   # Um pedido para todo o horizonte

    @classmethod
    def from_name(cls, name: Union[str, "LotSizingStrategy"]) -> "LotSizingStrategy":
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Estratégia desconhecida: {name!r}. Opções: {valid}") from None


def _check_cost(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise DomainViolation(f"{name} deve ser numérico, recebido {type(value).__name__}")
    value = float(value)
    if not np.isfinite(value) or value < 0:
        raise DomainViolation(f"{name} deve ser finito e não negativo, recebido {value}")
    return value


def _validated_inputs(demand: Sequence[float], holding_cost: float, order_cost: float):
    """
    Converte a demanda em cópia float64 e verifica o domínio.
    Texto não é interpretado aqui: a conversão é feita antes, pela interface.
    """
    raw = np.asarray(demand)
    if raw.ndim != 1:
        raise DomainViolation(f"Demanda deve ser uma sequência 1-D, recebido shape {raw.shape}")
    if raw.size and raw.dtype.kind not in "iuf":
        raise DomainViolation(f"Demanda deve ser numérica, recebido dtype {raw.dtype}")

    d = raw.astype(float)
    if not np.all(np.isfinite(d)):
        raise DomainViolation("Demanda contém valores não finitos")
    if np.any(d < 0):
        period = int(np.argmax(d < 0))
        raise DomainViolation(f"Demanda negativa no período {period}: {d[period]}")

    h = _check_cost(holding_cost, "holding_cost")
    K = _check_cost(order_cost, "order_cost")
    return d, h, K


def cost_to_go(demand: Sequence[float], holding_cost: float, order_cost: float) -> np.ndarray:
    """
    Tabela de memoização completa: custo mínimo para cobrir os períodos p..n-1.

    cost(n) = 0
    cost(p) = min_{q >= p} [ K + h × Σ d[p..q] × (q - p + 1) + cost(q + 1) ]

    O pedido feito em p cobre p..q; a quantidade total é mantida durante
    (q - p + 1) períodos (aproximação do custo de manutenção, mantida como está).
    Avaliação de trás para frente (n-1 até 0), sem recursão; cada estado é
    calculado uma única vez. A soma acumulada de d[p..q] usa np.cumsum
    (sequencial), então a ordem de avaliação é fixa.

    Sem demanda restante (Σ d[p:] == 0) nenhum pedido é necessário: cost(p) = 0.

    Args:
        demand: Demanda por período (não negativa)
        holding_cost: Custo de manutenção por unidade por período (h)
        order_cost: Custo fixo por pedido (K)

    Returns:
        np.ndarray de tamanho n + 1, com result[n] == 0 e result[0] = custo mínimo
    """
    d, h, K = _validated_inputs(demand, holding_cost, order_cost)
    n = len(d)

    # Tabela local à chamada
    memo = np.zeros(n + 1)
    if n == 0 or not np.any(d > 0):
        logger.debug("Horizonte n=%d sem demanda; custo mínimo 0", n)
        return memo

    spans = np.arange(1, n + 1, dtype=float)
    remaining_demand = np.cumsum(d[::-1])[::-1]
    for p in range(n - 1, -1, -1):
        if remaining_demand[p] == 0:
            continue
        running_demand = np.cumsum(d[p:])
        candidates = K + h * running_demand * spans[: n - p] + memo[p + 1:]
        memo[p] = candidates.min()

    logger.debug("Horizonte n=%d, h=%s, K=%s: custo mínimo %.6f", n, h, K, memo[0])
    return memo


def compute(demand: Sequence[float], holding_cost: float, order_cost: float) -> float:
    """
    Custo mínimo total (pedido + manutenção) para atender a demanda do período 0
    até o fim do horizonte. Determinístico, O(n²) em tempo e O(n) em memória.
    """
    return float(cost_to_go(demand, holding_cost, order_cost)[0])


def lot_for_lot_cost(demand: Sequence[float], holding_cost: float, order_cost: float) -> float:
    """Um pedido em cada período: Σ (K + h × d[p])."""
    d, h, K = _validated_inputs(demand, holding_cost, order_cost)
    if not np.any(d > 0):
        return 0.0
    return float(np.sum(K + h * d))


def single_order_cost(demand: Sequence[float], holding_cost: float, order_cost: float) -> float:
    """Um único pedido no período 0 cobrindo todo o horizonte: K + h × Σd × n."""
    d, h, K = _validated_inputs(demand, holding_cost, order_cost)
    if not np.any(d > 0):
        return 0.0
    return float(K + h * np.sum(d) * len(d))


_STRATEGY_FUNCTIONS = {
    LotSizingStrategy.DYNAMIC_PROGRAMMING: compute,
    LotSizingStrategy.LOT_FOR_LOT: lot_for_lot_cost,
    LotSizingStrategy.SINGLE_ORDER: single_order_cost,
}


def evaluate_strategy(demand: Sequence[float], holding_cost: float, order_cost: float,
                      strategy: Union[str, LotSizingStrategy] = "dp") -> float:
    """
    Custo total da estratégia escolhida por nome ("dp", "lot_for_lot", "single_order").
    As estratégias de referência são partições viáveis, então nunca custam menos que "dp".
    """
    strategy = LotSizingStrategy.from_name(strategy)
    return _STRATEGY_FUNCTIONS[strategy](demand, holding_cost, order_cost)
