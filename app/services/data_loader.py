# app/services/data_loader.py

from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from app.core.config import settings
from app.core.exceptions import DataAccessError
from app.core.log import get_logger

logger = get_logger(__name__)

CITY_FILE = "cities.csv"
PLACE_FILE = "places.csv"
HOTEL_FILE = "hotels.csv"


def _records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    # NaN -> None so the normalizer sees missing values, not floats
    return df.astype(object).where(pd.notna(df), None).to_dict(orient="records")


def _contains(series: pd.Series, text: str) -> pd.Series:
    return series.astype(str).str.contains(text, case=False, regex=False, na=False)


def _in_cities(series: pd.Series, city_names: List[str]) -> pd.Series:
    wanted = {name.strip().lower() for name in city_names}
    return series.astype(str).str.strip().str.lower().isin(wanted)


class CsvRepository:
    """
    City, place and hotel reader over three CSV exports of the store tables.
    Files are read once per repository instance.
    """

    def __init__(self, data_dir: Optional[str] = None):
        self.data_dir = Path(data_dir or settings.DATA_DIR)
        self._frames: Dict[str, pd.DataFrame] = {}

    def _load(self, filename: str) -> pd.DataFrame:
        if filename not in self._frames:
            path = self.data_dir / filename
            try:
                self._frames[filename] = pd.read_csv(path)
            except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
                logger.error(f"Error loading dataset {path}: {e}")
                raise DataAccessError(f"Could not read {path}: {e}") from e
        return self._frames[filename]

    def _column(self, df: pd.DataFrame, column: str, filename: str) -> pd.Series:
        if column not in df.columns:
            raise DataAccessError(f"{filename} has no '{column}' column")
        return df[column]

    def find_cities_by_month(self, month: str) -> List[Dict[str, Any]]:
        df = self._load(CITY_FILE)
        months = self._column(df, "best_time_to_visit", CITY_FILE)
        return _records(df[_contains(months, month)])

    def find_places_by_interest_and_cities(self, interest: str, city_names: List[str]) -> List[Dict[str, Any]]:
        df = self._load(PLACE_FILE)
        mask = _contains(self._column(df, "interest", PLACE_FILE), interest) & _in_cities(
            self._column(df, "city", PLACE_FILE), city_names
        )
        return _records(df[mask])

    def find_hotels_by_cities(self, city_names: List[str]) -> List[Dict[str, Any]]:
        df = self._load(HOTEL_FILE)
        return _records(df[_in_cities(self._column(df, "City", HOTEL_FILE), city_names)])
