from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

from country_stats.collection import CountryStatsCollection


logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parents[1]
DATA_DIR = ROOT_DIR / "data"
DEFAULT_DATA_PATH = DATA_DIR / "AllTimeRankingByCountry.csv"


class DatasetError(ValueError):
    """The dataset exists but could not be read or parsed into rows."""


def load_rows(path: str | Path) -> List[Dict[str, str]]:
    """
    Read a delimited file with a header row into raw field maps, in file order.

    Every cell is kept as text (no NA conversion); numeric coercion is left to
    CountryStats.from_row. A missing file raises FileNotFoundError unchanged;
    any other read or parse failure raises DatasetError.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No such dataset: {path}")
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as e:
        raise DatasetError(f"Dataset {path} is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DatasetError(f"Could not parse dataset {path}: {e}") from e
    except FileNotFoundError:
        raise
    except OSError as e:
        raise DatasetError(f"Could not read dataset {path}: {e}") from e

    # Strip column names to avoid invisible trailing spaces
    df.columns = [str(c).strip() for c in df.columns]
    rows = df.to_dict(orient="records")
    logger.info("loaded %d rows from %s", len(rows), path)
    return rows


def read_country_stats(path: str | Path = DEFAULT_DATA_PATH) -> CountryStatsCollection:
    return CountryStatsCollection.from_rows(load_rows(path))
