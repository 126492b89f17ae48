# app/logic/normalizer.py

import json
import math
from typing import Any, Dict, List, Optional

from app.models.itinerary import Attraction, City, Hotel


def parse_string_list(value: Any, default: Optional[str] = None) -> List[str]:
    """
    Coerce a "list of strings" column into a real list.
    The store holds these as arrays, JSON text ('["June", "July"]') or a bare string.
    Missing or empty values fall back to [default] (or [] without a default).
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return [default] if default else []

    if isinstance(value, list):
        items = [str(v) for v in value if v is not None]
    elif isinstance(value, str):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            items = [str(v) for v in parsed if v is not None]
        else:
            items = [value]
    else:
        items = [str(value)]

    if not items and default:
        return [default]
    return items


def to_number(value: Any) -> float:
    """Numeric columns: anything unparseable (None, '', 'n/a', NaN) becomes 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def normalize_city(raw: Dict[str, Any]) -> Optional[City]:
    name = _text(raw.get("city"))
    if not name:
        return None
    return City(
        name=name,
        state=_text(raw.get("state")) or None,
        best_time_to_visit=parse_string_list(raw.get("best_time_to_visit")),
        rating=to_number(raw.get("rating")),
        description=_text(raw.get("description")),
    )


def normalize_place(raw: Dict[str, Any], interest: str) -> Optional[Attraction]:
    """
    `interest` is the query interest that retrieved this row; it becomes the
    tag when the row's own interest column is unusable.
    """
    city = _text(raw.get("city"))
    if not city:
        return None
    name = _text(raw.get("popular_destination")) or _text(raw.get("name")) or "Unnamed Destination"
    return Attraction(
        name=name,
        city=city,
        google_rating=to_number(raw.get("google_rating")),
        interest=parse_string_list(raw.get("interest"), default=interest),
        price_fare=max(to_number(raw.get("price_fare")), 0.0),
    )


def normalize_hotel(raw: Dict[str, Any]) -> Optional[Hotel]:
    city = _text(raw.get("City"))
    if not city:
        return None
    return Hotel(
        hotel_name=_text(raw.get("Hotel_name")) or "Unknown Hotel",
        city=city,
        hotel_rating=to_number(raw.get("Hotel_Rating")),
        hotel_price=max(to_number(raw.get("Hotel_price")), 0.0),
    )
