import logging
from pathlib import Path
from typing import Tuple, Union

import pandas as pd

from src.config import DEMAND_COLUMN, SAMPLE_DEMAND_CSV
from src.exceptions import InvalidInput
from src.preprocess import demand_from_frame

logger = logging.getLogger(__name__)


def load_demand_csv(path: Union[str, Path] = SAMPLE_DEMAND_CSV,
                    column: str = DEMAND_COLUMN) -> Tuple[float, ...]:
    """
    Carrega a série de demanda por período de um CSV.
    Retorna:
        tuple[float, ...]: Demanda por período, na ordem das linhas
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidInput(f"Entrada inválida! Arquivo de demanda não encontrado: {path}")

    logger.info("Carregando demanda de %s...", path)
    try:
        df = pd.read_csv(path)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise InvalidInput(f"Entrada inválida! CSV ilegível ({path.name}): {e}") from e

    demand = demand_from_frame(df, column)
    logger.info("%d períodos carregados", len(demand))
    return demand
