# app/logic/scoring.py

import math
from typing import List, Optional

from app.core.config import settings
from app.models.itinerary import Attraction, Hotel, ItineraryCity


def _mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def round_half_up(value: float) -> int:
    # round() would send 2.5 to 2
    return int(math.floor(value + 0.5))


def filter_hotels_by_budget(hotels: List[Hotel], budget: Optional[float]) -> List[Hotel]:
    if budget is None:
        return list(hotels)
    return [h for h in hotels if h.hotel_price <= budget]


def estimate_daily_cost(
    attractions: List[Attraction],
    hotels_in_budget: List[Hotel],
    all_hotels: Optional[List[Hotel]] = None,
    food_allowance: Optional[float] = None,
    attractions_per_day: Optional[int] = None,
) -> int:
    """
    hotel night + `attractions_per_day` average fares + food allowance.
    The hotel average uses the in-budget hotels, falling back to every hotel
    of the city when none fit, and to 0 when the city has no hotel data.
    """
    if food_allowance is None:
        food_allowance = settings.DAILY_FOOD_ALLOWANCE
    if attractions_per_day is None:
        attractions_per_day = settings.ATTRACTIONS_PER_DAY

    avg_attraction_cost = _mean([a.price_fare for a in attractions])
    if hotels_in_budget:
        avg_hotel_cost = _mean([h.hotel_price for h in hotels_in_budget])
    else:
        avg_hotel_cost = _mean([h.hotel_price for h in all_hotels or []])

    return round_half_up(avg_hotel_cost + avg_attraction_cost * attractions_per_day + food_allowance)


def is_within_budget(candidate: ItineraryCity, budget: Optional[float]) -> bool:
    return budget is None or candidate.estimated_daily_cost <= budget


def rank_cities(candidates: List[ItineraryCity], budget: Optional[float] = None) -> List[ItineraryCity]:
    """
    Stable ordering: in-budget cities before over-budget ones, then rating
    descending. Without a budget it is a plain rating sort.
    """
    return sorted(candidates, key=lambda c: (not is_within_budget(c, budget), -c.rating))
