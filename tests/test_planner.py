import math

import pytest

from app.logic.planner import generate_daily_plans, price_label, select_best_hotel
from app.models.itinerary import Attraction, Hotel, ItineraryCity


def _city(attraction_count: int, hotels=None) -> ItineraryCity:
    return ItineraryCity(
        city="Kochi",
        popular_destinations=[
            Attraction(name=f"Place {i}", interest=["Beach"], google_rating=4.3, price_fare=i * 50)
            for i in range(attraction_count)
        ],
        hotels=hotels or [],
    )


def _attraction_titles(days):
    return [a.activity for day in days for a in day.activities if a.type == "attraction"]


def test_plan_extends_duration_to_fit_all_attractions():
    days = generate_daily_plans(_city(7), 2)

    assert len(days) == 3
    assert [a.type for a in days[0].activities] == ["arrival", "check_in", "attraction", "attraction", "attraction"]
    assert [a.type for a in days[1].activities] == ["attraction"] * 3
    assert [a.type for a in days[2].activities] == ["check_out", "attraction", "departure"]
    assert days[2].activities[1].activity == "Place 6"


@pytest.mark.parametrize("attraction_count", range(0, 11))
@pytest.mark.parametrize("duration", [1, 2, 3, 5])
def test_plan_keeps_every_attraction_in_order(attraction_count, duration):
    days = generate_daily_plans(_city(attraction_count), duration)

    assert len(days) == max(duration, math.ceil(attraction_count / 3))
    assert _attraction_titles(days) == [f"Place {i}" for i in range(attraction_count)]
    for day in days:
        assert len(day.activities) >= 1
        assert len([a for a in day.activities if a.type == "attraction"]) <= 3


def test_day_k_takes_its_own_slice():
    days = generate_daily_plans(_city(9), 4)
    for k, day in enumerate(days[:3]):
        titles = [a.activity for a in day.activities if a.type == "attraction"]
        assert titles == [f"Place {i}" for i in range(3 * k, 3 * k + 3)]


def test_empty_middle_day_gets_free_exploration():
    days = generate_daily_plans(_city(0), 3)

    assert [a.type for a in days[1].activities] == ["free_exploration"]
    assert days[1].activities[0].activity == "Explore Kochi at your leisure"
    assert [a.type for a in days[2].activities] == ["check_out", "departure"]


def test_single_day_trip_has_arrival_and_departure():
    days = generate_daily_plans(_city(2), 1)

    assert len(days) == 1
    assert [a.type for a in days[0].activities] == [
        "arrival",
        "check_in",
        "check_out",
        "attraction",
        "attraction",
        "departure",
    ]


def test_best_rated_hotel_is_used_for_check_in():
    hotels = [
        Hotel(hotel_name="Homestay", city="Kochi", hotel_rating=4.1, hotel_price=800),
        Hotel(hotel_name="Brunton Boatyard", city="Kochi", hotel_rating=4.6, hotel_price=9000),
        Hotel(hotel_name="Old Harbour", city="Kochi", hotel_rating=4.6, hotel_price=7000),
    ]
    days = generate_daily_plans(_city(1), 2)

    assert days[0].activities[1].activity == "Check-in at your hotel"

    days = generate_daily_plans(_city(1, hotels), 2)
    assert days[0].activities[1].activity == "Check-in at Brunton Boatyard"
    assert days[-1].activities[0].activity == "Check-out from Brunton Boatyard"
    assert select_best_hotel(hotels).hotel_name == "Brunton Boatyard"


def test_attraction_activity_details():
    days = generate_daily_plans(_city(2), 1)
    free, paid = [a for a in days[0].activities if a.type == "attraction"]

    assert free.price == "Free entry"
    assert paid.price == "₹50"
    assert free.description == "Visit this Beach attraction (4.3★)"


def test_price_label():
    assert price_label(0) == "Free entry"
    assert price_label(249.6, currency_symbol="$") == "$250"


def test_custom_attractions_per_day():
    days = generate_daily_plans(_city(4), 1, attractions_per_day=2)
    assert len(days) == 2
    assert _attraction_titles(days) == ["Place 0", "Place 1", "Place 2", "Place 3"]


def test_plan_rejects_zero_duration():
    with pytest.raises(ValueError):
        generate_daily_plans(_city(1), 0)


def test_only_zero_fare_is_free():
    assert price_label(0.0) == "Free entry"
    assert price_label(0.4, currency_symbol="₹") == "₹0"
    assert price_label(-50, currency_symbol="₹") == "₹-50"
