# app/services/repositories.py

from functools import lru_cache
from typing import Any, Dict, List, Optional

from supabase import Client

from app.core.config import settings
from app.core.exceptions import DataAccessError
from app.core.log import get_logger
from app.db.supabase_client import get_supabase_client
from app.services.data_loader import CsvRepository

logger = get_logger(__name__)


def city_name_variants(city_names: List[str]) -> List[str]:
    """
    The tables disagree on capitalization ("kochi", "Kochi", "New Delhi"),
    so `in` filters are given every spelling we can derive.
    """
    variants = set()
    for name in city_names:
        name = name.strip()
        if not name:
            continue
        variants.update({name, name.lower(), name.title(), name[0].upper() + name[1:]})
    return sorted(variants)


class SupabaseRepository:
    """
    Reads city_info, places and Hotels through the Supabase client.
    Without an explicit client the shared one is created on first read, so a
    missing configuration surfaces as a DataAccessError from that read.
    """

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            try:
                self._client = get_supabase_client()
            except ValueError as e:
                logger.error(f"Supabase client unavailable: {e}")
                raise DataAccessError(str(e)) from e
        return self._client

    def _select(self, label: str, query) -> List[Dict[str, Any]]:
        try:
            response = query.execute()
        except Exception as e:
            logger.error(f"Supabase error fetching {label}: {e}")
            raise DataAccessError(str(e)) from e
        return response.data or []

    def find_cities_by_month(self, month: str) -> List[Dict[str, Any]]:
        query = self.client.table("city_info").select("*").ilike("best_time_to_visit", f"%{month}%")
        return self._select("cities", query)

    def find_places_by_interest_and_cities(self, interest: str, city_names: List[str]) -> List[Dict[str, Any]]:
        query = (
            self.client.table("places")
            .select("*")
            .ilike("interest", f"%{interest}%")
            .in_("city", city_name_variants(city_names))
        )
        return self._select(f"places for {interest}", query)

    def find_hotels_by_cities(self, city_names: List[str]) -> List[Dict[str, Any]]:
        query = self.client.table("Hotels").select("*").in_("City", city_name_variants(city_names))
        return self._select("hotels", query)


@lru_cache(maxsize=1)
def get_repository():
    """Shared reader backend selected by DATA_SOURCE; CSV frames stay loaded across requests."""
    if settings.DATA_SOURCE == "csv":
        return CsvRepository()

    return SupabaseRepository()
