import json
from typing import Any, Dict, List, Optional


class FakeRepository:
    """
    In-memory readers with the same contract as the Supabase tables:
    "contains" matching for month and interest, city restriction by name.
    """

    def __init__(
        self,
        cities: Optional[List[Dict[str, Any]]] = None,
        places: Optional[List[Dict[str, Any]]] = None,
        hotels: Optional[List[Dict[str, Any]]] = None,
    ):
        self.cities = cities or []
        self.places = places or []
        self.hotels = hotels or []
        self.place_queries: List[str] = []

    @staticmethod
    def _text(value) -> str:
        return value if isinstance(value, str) else json.dumps(value)

    @staticmethod
    def _in(city: str, city_names: List[str]) -> bool:
        return (city or "").lower() in {n.lower() for n in city_names}

    def find_cities_by_month(self, month: str):
        return [c for c in self.cities if month.lower() in self._text(c.get("best_time_to_visit")).lower()]

    def find_places_by_interest_and_cities(self, interest: str, city_names: List[str]):
        self.place_queries.append(interest)
        return [
            p
            for p in self.places
            if interest.lower() in self._text(p.get("interest")).lower() and self._in(p.get("city"), city_names)
        ]

    def find_hotels_by_cities(self, city_names: List[str]):
        return [h for h in self.hotels if self._in(h.get("City"), city_names)]


def city_row(name: str, months, rating: float = 4.0, state: str = "Kerala") -> Dict[str, Any]:
    return {
        "city": name,
        "state": state,
        "best_time_to_visit": months,
        "rating": rating,
        "description": f"{name} description",
    }


def place_row(city: str, name: str, interest, price: float = 0, rating: float = 4.0) -> Dict[str, Any]:
    return {
        "city": city,
        "popular_destination": name,
        "google_rating": rating,
        "interest": interest,
        "price_fare": price,
    }


def hotel_row(city: str, name: str, price: float, rating: float = 4.0) -> Dict[str, Any]:
    return {"Hotel_name": name, "City": city, "Hotel_Rating": rating, "Hotel_price": price}


class InMemoryStore:
    """Stands in for the user_data table: {user_id: [saved entries]}."""

    def __init__(self, rows=None):
        self.rows = rows or {}

    def load(self, user_id):
        return self.rows.get(user_id)

    def save(self, user_id, itineraries):
        self.rows[user_id] = itineraries
