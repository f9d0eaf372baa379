from pathlib import Path

# Caminhos
BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "Dados"
RESULTS_DIR = BASE_DIR / "Resultados"

SAMPLE_DEMAND_CSV = DATA_DIR / "demanda_exemplo.csv"
DEMAND_COLUMN = "demand"

# Parâmetros Econômicos (Cenários)
# Cenário 1: Base
PARAMS_SCENARIO_1 = {
    'K': 50.0,  # Custo de pedido (Ordering cost)
    'h': 1.0,   # Custo de manutenção por unidade por período
}

# Limite do horizonte (número de períodos) aceito pelas interfaces.
# O cálculo é O(n²).
MAX_HORIZON = 5000

# Estratégia padrão: "dp", "lot_for_lot" ou "single_order"
DEFAULT_STRATEGY = "dp"

# Apresentação
RESULT_DECIMALS = 2
PROFILE_ROWS_IN_REPORT = 12

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
