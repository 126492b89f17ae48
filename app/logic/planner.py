# app/logic/planner.py

import math
from typing import List, Optional

from app.core.config import settings
from app.models.itinerary import Activity, Attraction, DayPlan, Hotel, ItineraryCity

# Time-of-day labels for the attraction slots of each kind of day
FIRST_DAY_SLOTS = ["Evening", "Night", "Night"]
LAST_DAY_SLOTS = ["Late Morning", "Afternoon", "Evening"]
REGULAR_DAY_SLOTS = ["Morning", "Afternoon", "Evening"]


def select_best_hotel(hotels: List[Hotel]) -> Optional[Hotel]:
    # max() keeps the first of equally rated hotels
    if not hotels:
        return None
    return max(hotels, key=lambda h: h.hotel_rating)


def effective_duration(requested_days: int, attraction_count: int, per_day: int) -> int:
    """Never drop attractions: stretch the trip when they need more days."""
    return max(requested_days, math.ceil(attraction_count / per_day))


def price_label(price_fare: float, currency_symbol: Optional[str] = None) -> str:
    if price_fare == 0:
        return "Free entry"
    if currency_symbol is None:
        currency_symbol = settings.CURRENCY_SYMBOL
    return f"{currency_symbol}{price_fare:.0f}"


def _slot(slots: List[str], index: int) -> str:
    return slots[min(index, len(slots) - 1)]


def _attraction_activity(dest: Attraction, time: str, currency_symbol: Optional[str]) -> Activity:
    return Activity(
        type="attraction",
        time=time,
        activity=dest.name,
        description=f"Visit this {', '.join(dest.interest)} attraction ({dest.google_rating:.1f}★)",
        price=price_label(dest.price_fare, currency_symbol),
    )


def _arrival(city: str, hotel: Optional[Hotel]) -> List[Activity]:
    if hotel:
        check_in = Activity(
            type="check_in",
            time="Afternoon",
            activity=f"Check-in at {hotel.hotel_name}",
            description=f"Get settled at {hotel.hotel_name} ({hotel.hotel_rating:g}★) located in {hotel.city}.",
        )
    else:
        check_in = Activity(
            type="check_in",
            time="Afternoon",
            activity="Check-in at your hotel",
            description="Get settled at your hotel and prepare for your adventure.",
        )
    return [
        Activity(type="arrival", time="Morning", activity=f"Arrive in {city}", description=f"Welcome to {city}!"),
        check_in,
    ]


def _check_out(hotel: Optional[Hotel]) -> Activity:
    return Activity(
        type="check_out",
        time="Morning",
        activity=f"Check-out from {hotel.hotel_name}" if hotel else "Check-out from your hotel",
        description="Pack your belongings and prepare for your final day.",
    )


def _departure(city: str) -> Activity:
    return Activity(type="departure", time="Night", activity=f"Departure from {city}", description=f"Farewell to {city}!")


def _free_day(city: str) -> Activity:
    return Activity(
        type="free_exploration",
        time="Day",
        activity=f"Explore {city} at your leisure",
        description="Enjoy free time to discover local gems, revisit favorites, or relax.",
    )


def generate_daily_plans(
    city_data: ItineraryCity,
    trip_duration: int,
    attractions_per_day: Optional[int] = None,
    currency_symbol: Optional[str] = None,
) -> List[DayPlan]:
    """
    Spread a city's attractions over the trip, `attractions_per_day` at a time
    in their given order. Day 1 opens with arrival and hotel check-in, the last
    day ends with check-out and departure; a one-day trip gets both. A day left
    without activities gets a free-exploration placeholder.
    """
    if trip_duration < 1:
        raise ValueError("Trip duration must be at least 1 day")
    if attractions_per_day is None:
        attractions_per_day = settings.ATTRACTIONS_PER_DAY

    destinations = city_data.popular_destinations
    hotel = select_best_hotel(city_data.hotels)
    total_days = effective_duration(trip_duration, len(destinations), attractions_per_day)

    days: List[DayPlan] = []
    for day_index in range(total_days):
        day_number = day_index + 1
        start = day_index * attractions_per_day
        todays = destinations[start:start + attractions_per_day]
        is_first = day_number == 1
        is_last = day_number == total_days

        if is_first:
            slots = FIRST_DAY_SLOTS
        elif is_last:
            slots = LAST_DAY_SLOTS
        else:
            slots = REGULAR_DAY_SLOTS

        activities: List[Activity] = []
        if is_first:
            activities.extend(_arrival(city_data.city, hotel))
        if is_last:
            activities.append(_check_out(hotel))
        activities.extend(
            _attraction_activity(dest, _slot(slots, i), currency_symbol) for i, dest in enumerate(todays)
        )
        if is_last:
            activities.append(_departure(city_data.city))

        if not activities:
            activities.append(_free_day(city_data.city))

        days.append(DayPlan(day=day_number, activities=activities))

    return days
