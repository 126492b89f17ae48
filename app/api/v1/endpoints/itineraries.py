# File: app/api/v1/endpoints/itineraries.py

from fastapi import APIRouter, Depends, HTTPException

from app.logic.planner import generate_daily_plans
from app.models.itinerary import ItineraryResult
from app.models.schemas import DayPlanRequest, DayPlanResponse, ItineraryRequest
from app.services import itinerary_builder
from app.services.repositories import get_repository

router = APIRouter()


@router.post("/generate", response_model=ItineraryResult)
def generate_itinerary(request: ItineraryRequest, repository=Depends(get_repository)):
    """
    Groups the cities worth visiting in the travel month by interest,
    ranked and costed per day. Failures come back as success=false.
    """
    return itinerary_builder.generate_itinerary(
        repository,
        interests=request.interests,
        travel_month=request.travel_month,
        budget=request.budget,
    )


@router.post("/day-plan", response_model=DayPlanResponse)
def day_plan(request: DayPlanRequest):
    """
    Day-by-day schedule for one city of a generated itinerary.
    """
    try:
        days = generate_daily_plans(request.city, request.duration)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DayPlanResponse(city=request.city.city, duration=len(days), days=days)
