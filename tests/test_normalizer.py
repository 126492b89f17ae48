import math

from app.logic.normalizer import normalize_city, normalize_hotel, normalize_place, parse_string_list, to_number


def test_parse_string_list_keeps_lists():
    assert parse_string_list(["June", "July"]) == ["June", "July"]


def test_parse_string_list_parses_json_arrays():
    assert parse_string_list('["June", "July"]') == ["June", "July"]


def test_parse_string_list_wraps_plain_strings():
    assert parse_string_list("June, July") == ["June, July"]


def test_parse_string_list_wraps_json_scalars_as_raw_text():
    assert parse_string_list('"June"') == ['"June"']


def test_parse_string_list_stringifies_other_types():
    assert parse_string_list(5) == ["5"]


def test_parse_string_list_uses_default_for_missing_values():
    assert parse_string_list(None, default="Beach") == ["Beach"]
    assert parse_string_list("", default="Beach") == ["Beach"]
    assert parse_string_list("[]", default="Beach") == ["Beach"]
    assert parse_string_list(None) == []


def test_parse_string_list_is_idempotent():
    for raw in (["June", "July"], '["Beach", "Nature"]', "History", 7):
        once = parse_string_list(raw)
        assert parse_string_list(once) == once


def test_to_number_defaults_to_zero():
    assert to_number("4.5") == 4.5
    assert to_number(3) == 3.0
    assert to_number(None) == 0
    assert to_number("n/a") == 0
    assert to_number(math.nan) == 0


def test_normalize_city():
    city = normalize_city(
        {"city": "Kochi", "state": "Kerala", "best_time_to_visit": '["June"]', "rating": "4.3"}
    )
    assert city.name == "Kochi"
    assert city.key == "kochi"
    assert city.best_time_to_visit == ["June"]
    assert city.rating == 4.3
    assert city.description == ""


def test_normalize_city_without_name_is_skipped():
    assert normalize_city({"city": None, "best_time_to_visit": "June"}) is None


def test_normalize_place_falls_back_to_query_interest():
    place = normalize_place({"city": "Goa", "name": "Baga Beach", "interest": None, "price_fare": None}, "Beach")
    assert place.interest == ["Beach"]
    assert place.price_fare == 0
    assert place.name == "Baga Beach"


def test_normalize_place_prefers_popular_destination_name():
    place = normalize_place({"city": "Goa", "popular_destination": "Fort Aguada", "name": "x"}, "History")
    assert place.name == "Fort Aguada"

    unnamed = normalize_place({"city": "Goa"}, "History")
    assert unnamed.name == "Unnamed Destination"


def test_normalize_hotel():
    hotel = normalize_hotel({"Hotel_name": None, "City": "Goa", "Hotel_Rating": "bad", "Hotel_price": "900"})
    assert hotel.hotel_name == "Unknown Hotel"
    assert hotel.hotel_rating == 0
    assert hotel.hotel_price == 900
    assert normalize_hotel({"Hotel_name": "No City"}) is None


def test_negative_prices_are_clamped_to_zero():
    place = normalize_place({"city": "Goa", "name": "Baga Beach", "price_fare": -50}, "Beach")
    assert place.price_fare == 0

    hotel = normalize_hotel({"Hotel_name": "Zostel", "City": "Goa", "Hotel_price": "-900"})
    assert hotel.hotel_price == 0
