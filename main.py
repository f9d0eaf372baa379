import argparse
import logging
import sys
from pathlib import Path

from src.config import (
    DEFAULT_STRATEGY,
    DEMAND_COLUMN,
    LOG_FORMAT,
    LOG_LEVEL,
    PARAMS_SCENARIO_1,
)
from src.decision_support import compare_strategies, format_cost, result_message
from src.exceptions import InvalidInput
from src.inventory.lot_sizing import LotSizingStrategy, cost_to_go, evaluate_strategy
from src.io_load import load_demand_csv
from src.preprocess import LotSizingRequest, build_request, parse_lot_sizing_request
from src.reporting.decision_pdf import build_lot_sizing_pdf


def build_parser():
    parser = argparse.ArgumentParser(
        description="Dimensionamento de lotes por programação dinâmica (custo mínimo de pedido + manutenção)."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--demand", help='Demanda por período separada por vírgulas, ex: "10,10,20"')
    source.add_argument("--csv", type=Path, help="CSV com uma coluna de demanda por período")
    parser.add_argument("--column", default=DEMAND_COLUMN, help="Coluna de demanda no CSV")
    parser.add_argument("--holding-cost", default=str(PARAMS_SCENARIO_1['h']),
                        help="Custo de manutenção por unidade por período (h)")
    parser.add_argument("--order-cost", default=str(PARAMS_SCENARIO_1['K']),
                        help="Custo fixo por pedido (K)")
    parser.add_argument("--periods", help="Número de períodos (opcional, conferido com a demanda)")
    parser.add_argument("--strategy", default=DEFAULT_STRATEGY,
                        choices=[s.value for s in LotSizingStrategy],
                        help="Estratégia de dimensionamento")
    parser.add_argument("--compare", action="store_true", help="Mostra a comparação entre estratégias")
    parser.add_argument("--pdf", type=Path, help="Salva o relatório de decisão em PDF")
    parser.add_argument("--verbose", action="store_true", help="Logging em nível DEBUG")
    return parser


def _build_request(args) -> LotSizingRequest:
    if args.demand is not None:
        return parse_lot_sizing_request(args.demand, args.holding_cost, args.order_cost, args.periods)
    demand = load_demand_csv(args.csv, args.column)
    return build_request(demand, args.holding_cost, args.order_cost, args.periods)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else LOG_LEVEL, format=LOG_FORMAT)

    print("=== Dimensionamento de Lotes - Programação Dinâmica ===")

    # 1. Ler e validar entradas
    try:
        request = _build_request(args)
    except InvalidInput as e:
        print(str(e), file=sys.stderr)
        return 2

    print(f"Períodos: {request.horizon} | h: {format_cost(request.holding_cost)} | "
          f"K: {format_cost(request.order_cost)}")

    # 2. Calcular
    cost = evaluate_strategy(request.demand, request.holding_cost, request.order_cost, args.strategy)
    print(f"\n[{args.strategy}] {result_message(cost)}")

    # 3. Comparação e relatório (opcionais)
    if args.compare or args.pdf:
        comparison = compare_strategies(request.demand, request.holding_cost, request.order_cost)
        if args.compare:
            print("\nComparação de Estratégias:")
            print(comparison.drop(columns="Codigo").to_string(index=False, float_format=format_cost))

        if args.pdf:
            profile = cost_to_go(request.demand, request.holding_cost, request.order_cost)
            args.pdf.parent.mkdir(parents=True, exist_ok=True)
            args.pdf.write_bytes(build_lot_sizing_pdf(request, comparison, profile))
            print(f"\nRelatório salvo em {args.pdf}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
