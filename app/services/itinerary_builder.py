# app/services/itinerary_builder.py
from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Dict, List, Optional, TypeVar

from app.core.config import settings
from app.core.exceptions import DataAccessError, ValidationError
from app.core.log import get_logger
from app.logic.filters import filter_cities_by_month, group_hotels_by_city, group_places_by_city
from app.logic.scoring import estimate_daily_cost, filter_hotels_by_budget, rank_cities
from app.models.itinerary import City, Hotel, ItineraryCity, ItineraryResult

logger = get_logger(__name__)

T = TypeVar("T")

NO_CITIES_MESSAGE = "No cities available for your selected travel month."
NO_MATCH_MESSAGE = "No matching destinations found for your interests and travel month."
NO_MATCH_WITH_BUDGET_MESSAGE = (
    "No matching destinations found for your interests, travel month, and budget constraints."
)


def validate_request(interests: List[str], travel_month: str, budget: Optional[float]) -> List[str]:
    """
    Checks the inputs and returns the interests with blanks trimmed and
    duplicates dropped (first occurrence kept).
    Raises ValidationError with every problem joined into one message.
    """
    problems = []
    cleaned: List[str] = []
    for interest in interests or []:
        interest = (interest or "").strip()
        if interest and interest not in cleaned:
            cleaned.append(interest)
    if not cleaned:
        problems.append("Select at least one interest")
    if not (travel_month or "").strip():
        problems.append("Select a travel month")
    # NaN fails every comparison, so test for the valid range
    if budget is not None and not budget >= 0:
        problems.append("Budget must be a positive number")
    if problems:
        raise ValidationError(", ".join(problems))
    return cleaned


def _wait(future: "Future[T]", label: str, timeout: float) -> T:
    try:
        return future.result(timeout=timeout)
    except FutureTimeoutError as e:
        future.cancel()
        raise DataAccessError(f"Timed out fetching {label} after {timeout:g}s") from e
    except DataAccessError:
        raise
    except Exception as e:
        # any reader failure counts as a data-access failure
        raise DataAccessError(str(e) or repr(e)) from e


def build_city_candidates(
    interest: str,
    places_by_city: Dict[str, list],
    visitable_cities: Dict[str, City],
    hotels_by_city: Dict[str, List[Hotel]],
    budget: Optional[float],
    food_allowance: Optional[float] = None,
    attractions_per_day: Optional[int] = None,
) -> List[ItineraryCity]:
    """
    One costed, budget-filtered and ranked candidate per city for `interest`.
    Over-budget cities are dropped.
    """
    candidates: List[ItineraryCity] = []
    for city_key, places in places_by_city.items():
        city = visitable_cities.get(city_key)
        if city is None:
            continue

        city_hotels = hotels_by_city.get(city_key, [])
        hotels_in_budget = filter_hotels_by_budget(city_hotels, budget)
        daily_cost = estimate_daily_cost(
            places,
            hotels_in_budget,
            city_hotels,
            food_allowance=food_allowance,
            attractions_per_day=attractions_per_day,
        )

        if budget is not None and daily_cost > budget:
            logger.info(f"Skipping {city.name} for {interest}: daily cost {daily_cost} exceeds budget {budget:g}")
            continue

        candidates.append(
            ItineraryCity(
                city=city.name,
                state=city.state,
                popular_destinations=places,
                hotels=hotels_in_budget,
                rating=city.rating,
                description=city.description,
                best_time_to_visit=city.best_time_to_visit,
                estimated_daily_cost=daily_cost,
            )
        )

    return rank_cities(candidates, budget)


def _assemble(
    repository,
    interests: List[str],
    travel_month: str,
    budget: Optional[float],
    timeout: float,
    food_allowance: Optional[float],
    attractions_per_day: Optional[int],
) -> ItineraryResult:
    executor = ThreadPoolExecutor(max_workers=len(interests) + 1, thread_name_prefix="itinerary-read")
    try:
        # 1. Cities for the month; a failure here fails the whole request
        raw_cities = _wait(executor.submit(repository.find_cities_by_month, travel_month), "cities", timeout)
        visitable_cities = filter_cities_by_month(raw_cities, travel_month)
        if not visitable_cities:
            return ItineraryResult(success=True, message=NO_CITIES_MESSAGE, itinerary={})

        city_keys = list(visitable_cities)
        city_names = [visitable_cities[key].name for key in city_keys]
        logger.info(
            f"Will search for places in these cities: {', '.join(city_names[:5])}"
            f"{'...' if len(city_names) > 5 else ''}"
        )

        # 2. Hotels and every interest's places are independent reads
        hotel_future = executor.submit(repository.find_hotels_by_cities, city_names)
        place_futures = {
            interest: executor.submit(repository.find_places_by_interest_and_cities, interest, city_names)
            for interest in interests
        }

        hotels_by_city: Dict[str, List[Hotel]] = {}
        try:
            hotels_by_city = group_hotels_by_city(_wait(hotel_future, "hotels", timeout), city_keys)
        except DataAccessError as e:
            logger.error(f"Error fetching hotels, continuing without hotel data: {e}")
        logger.info(f"Hotels found: {sum(len(h) for h in hotels_by_city.values())}")

        # 3. Per interest, in request order
        itinerary: Dict[str, List[ItineraryCity]] = {}
        for interest in interests:
            logger.info(f"Finding places for interest: {interest}")
            try:
                raw_places = _wait(place_futures[interest], f"places for {interest}", timeout)
            except DataAccessError as e:
                logger.error(f"Error fetching places for {interest}: {e}")
                continue

            places_by_city = group_places_by_city(raw_places, interest, city_keys)
            if not places_by_city:
                continue

            ranked = build_city_candidates(
                interest,
                places_by_city,
                visitable_cities,
                hotels_by_city,
                budget,
                food_allowance=food_allowance,
                attractions_per_day=attractions_per_day,
            )
            if ranked:
                itinerary[interest] = ranked

        if not itinerary:
            message = NO_MATCH_WITH_BUDGET_MESSAGE if budget is not None else NO_MATCH_MESSAGE
            return ItineraryResult(success=True, message=message, itinerary={})

        return ItineraryResult(success=True, itinerary=itinerary)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def generate_itinerary(
    repository,
    interests: List[str],
    travel_month: str,
    budget: Optional[float] = None,
    timeout: Optional[float] = None,
    food_allowance: Optional[float] = None,
    attractions_per_day: Optional[int] = None,
) -> ItineraryResult:
    """
    Build the {interest: [ranked cities]} itinerary for a travel month.

    `repository` provides find_cities_by_month, find_places_by_interest_and_cities
    and find_hotels_by_cities. Never raises: validation problems, a failed city
    read and unexpected errors all come back as success=False results. Place and
    hotel read failures only shrink the result.
    """
    logger.info(f"Starting itinerary creation: interests={interests} month={travel_month!r} budget={budget}")
    if timeout is None:
        timeout = settings.READ_TIMEOUT_SECONDS

    try:
        interests = validate_request(interests, travel_month, budget)
        return _assemble(
            repository,
            interests,
            travel_month.strip(),
            budget,
            timeout,
            food_allowance,
            attractions_per_day,
        )
    except ValidationError as e:
        return ItineraryResult(success=False, message=str(e))
    except DataAccessError as e:
        logger.error(f"Error fetching cities by month: {e}")
        return ItineraryResult(success=False, message=f"Failed to fetch cities: {e}")
    except Exception as e:
        logger.exception("Error creating itinerary")
        return ItineraryResult(success=False, message=str(e) or f"Failed to create itinerary: {e!r}")
