from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.models.itinerary import DayPlan, ItineraryCity

# --- Itinerary generation ---
# Constraints are checked by the itinerary builder so that a bad request still
# gets the structured {success, message} answer instead of a 422.


class ItineraryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    interests: List[str] = Field(default_factory=list)
    travel_month: str = Field("", validation_alias=AliasChoices("travel_month", "travelMonth"))
    budget: Optional[float] = None


class DayPlanRequest(BaseModel):
    city: ItineraryCity
    duration: int = Field(3, ge=1)


class DayPlanResponse(BaseModel):
    city: str
    duration: int
    days: List[DayPlan]


# --- Saved itineraries ---


class SavedItinerary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: str
    city: str
    interests: List[str]
    month: str
    duration: str  # display strings, e.g. "3" and "No limit"
    budget: str
    estimated_cost: float = Field(validation_alias=AliasChoices("estimated_cost", "estimatedCost"))
    city_data: ItineraryCity = Field(validation_alias=AliasChoices("city_data", "cityData"))


class SaveItineraryRequest(BaseModel):
    city: ItineraryCity
    interests: List[str]
    month: str
    duration: int = Field(3, ge=1)
    budget: Optional[float] = Field(None, ge=0, allow_inf_nan=False)


class SavedItineraryResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    data: Optional[List[SavedItinerary]] = None
