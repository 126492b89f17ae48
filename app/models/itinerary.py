from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class City(BaseModel):
    name: str
    state: Optional[str] = None
    best_time_to_visit: List[str] = Field(default_factory=list)
    rating: float = 0
    description: str = ""

    @property
    def key(self) -> str:
        return self.name.lower()


class Attraction(BaseModel):
    name: str
    city: str = ""
    google_rating: float = 0
    interest: List[str] = Field(default_factory=list)
    price_fare: float = 0


class Hotel(BaseModel):
    # Snapshots saved by older clients use the store's column names
    model_config = ConfigDict(populate_by_name=True)

    hotel_name: str = Field(validation_alias=AliasChoices("hotel_name", "Hotel_name"))
    city: str = Field("", validation_alias=AliasChoices("city", "City"))
    hotel_rating: float = Field(0, validation_alias=AliasChoices("hotel_rating", "Hotel_Rating"))
    hotel_price: float = Field(0, validation_alias=AliasChoices("hotel_price", "Hotel_price"))


class ItineraryCity(BaseModel):
    city: str
    state: Optional[str] = None
    popular_destinations: List[Attraction] = Field(default_factory=list)
    hotels: List[Hotel] = Field(default_factory=list)
    rating: float = 0
    description: str = ""
    best_time_to_visit: List[str] = Field(default_factory=list)
    estimated_daily_cost: int = 0


class ItineraryResult(BaseModel):
    success: bool
    message: Optional[str] = None
    itinerary: Optional[Dict[str, List[ItineraryCity]]] = None


class Activity(BaseModel):
    type: str  # arrival, check_in, attraction, check_out, departure, free_exploration
    time: str
    activity: str
    description: str
    price: Optional[str] = None


class DayPlan(BaseModel):
    day: int
    activities: List[Activity]
