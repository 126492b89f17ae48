# app/logic/filters.py

from typing import Any, Dict, Iterable, List

from app.core.log import get_logger
from app.logic.normalizer import normalize_city, normalize_hotel, normalize_place
from app.models.itinerary import Attraction, City, Hotel

logger = get_logger(__name__)


def city_matches_month(city: City, month: str) -> bool:
    # "contains" over the whole list text, not set membership
    return month.strip().lower() in ", ".join(city.best_time_to_visit).lower()


def filter_cities_by_month(raw_cities: Iterable[Dict[str, Any]], month: str) -> Dict[str, City]:
    """
    Normalize city rows and keep those recommended for `month`.
    Returns {lower-cased city name: City}; the first row wins on duplicate names.
    """
    visitable: Dict[str, City] = {}
    for raw in raw_cities:
        city = normalize_city(raw)
        if city is None or not city_matches_month(city, month):
            continue
        if city.key in visitable:
            logger.debug(f"Duplicate city row for '{city.name}', keeping the first one")
            continue
        visitable[city.key] = city
    return visitable


def group_places_by_city(
    raw_places: Iterable[Dict[str, Any]],
    interest: str,
    city_keys: Iterable[str],
) -> Dict[str, List[Attraction]]:
    """
    Group the places matching `interest` by lower-cased city, restricted to
    `city_keys`. Order of first appearance is kept for cities and places.
    """
    wanted = set(city_keys)
    needle = interest.strip().lower()
    grouped: Dict[str, List[Attraction]] = {}
    for raw in raw_places:
        place = normalize_place(raw, interest)
        if place is None:
            continue
        key = place.city.lower()
        if key not in wanted:
            continue
        # Readers already filter by interest; re-check for backends that don't
        if needle not in ", ".join(place.interest).lower():
            continue
        grouped.setdefault(key, []).append(place)
    return grouped


def group_hotels_by_city(raw_hotels: Iterable[Dict[str, Any]], city_keys: Iterable[str]) -> Dict[str, List[Hotel]]:
    wanted = set(city_keys)
    grouped: Dict[str, List[Hotel]] = {}
    for raw in raw_hotels:
        hotel = normalize_hotel(raw)
        if hotel is None:
            continue
        key = hotel.city.lower()
        if key in wanted:
            grouped.setdefault(key, []).append(hotel)
    return grouped
