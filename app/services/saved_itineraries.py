# app/services/saved_itineraries.py

import time
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError
from supabase import Client

from app.core.exceptions import DataAccessError
from app.core.log import get_logger
from app.models.itinerary import ItineraryCity
from app.models.schemas import SavedItinerary

logger = get_logger(__name__)


class UserDataStore:
    """
    One `user_data` row per user; `itineraries` is a JSON array of saved entries.
    """

    def __init__(self, client: Client):
        self.client = client

    def load(self, user_id: str) -> Optional[List[Dict[str, Any]]]:
        """Returns the stored array, or None when the user has no row yet."""
        try:
            response = (
                self.client.table("user_data").select("itineraries").eq("user_id", user_id).limit(1).execute()
            )
        except Exception as e:
            logger.error(f"Error fetching user data: {e}")
            raise DataAccessError(str(e)) from e

        if not response.data:
            return None
        itineraries = response.data[0].get("itineraries")
        return itineraries if isinstance(itineraries, list) else []

    def save(self, user_id: str, itineraries: List[Dict[str, Any]]) -> None:
        try:
            self.client.table("user_data").upsert(
                {"user_id": user_id, "itineraries": itineraries}, on_conflict="user_id"
            ).execute()
        except Exception as e:
            logger.error(f"Error updating user data: {e}")
            raise DataAccessError(str(e)) from e


def budget_label(budget: Optional[float]) -> str:
    """Whole budgets print without a decimal point; everything else keeps full precision."""
    if budget is None:
        return "No limit"
    if float(budget).is_integer():
        return str(int(budget))
    return str(budget)


def build_saved_itinerary(
    city: ItineraryCity,
    interests: List[str],
    month: str,
    duration: int,
    budget: Optional[float] = None,
) -> SavedItinerary:
    """Snapshot of a generated city itinerary, costed over the whole trip."""
    return SavedItinerary(
        id=str(int(time.time() * 1000)),
        date=date.today().isoformat(),
        city=city.city,
        interests=interests,
        month=month,
        duration=str(duration),
        budget=budget_label(budget),
        estimated_cost=city.estimated_daily_cost * duration,
        city_data=city,
    )


def save_itinerary(store: UserDataStore, user_id: str, entry: SavedItinerary) -> str:
    """
    Stores `entry` first in the user's list. An entry with the same id is
    replaced; entries with other ids are kept, even for the same city and month.
    """
    current = store.load(user_id) or []
    remaining = [item for item in current if not (isinstance(item, dict) and item.get("id") == entry.id)]
    store.save(user_id, [entry.model_dump(mode="json")] + remaining)
    logger.info(f"Saved itinerary {entry.id} for {entry.city}")
    return "Itinerary saved successfully!"


def fetch_saved_itineraries(store: UserDataStore, user_id: str) -> List[SavedItinerary]:
    valid: List[SavedItinerary] = []
    for item in store.load(user_id) or []:
        try:
            valid.append(SavedItinerary.model_validate(item))
        except PydanticValidationError as e:
            logger.warning(f"Skipping invalid saved itinerary entry: {e.error_count()} errors")
    return valid


def delete_saved_itinerary(store: UserDataStore, user_id: str, itinerary_id: str) -> str:
    current = store.load(user_id)
    if not current:
        return "No saved itineraries found."

    remaining = [item for item in current if not (isinstance(item, dict) and item.get("id") == itinerary_id)]
    store.save(user_id, remaining)
    return "Itinerary deleted successfully!"
