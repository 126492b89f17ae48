# File: app/api/v1/endpoints/saved.py

from fastapi import APIRouter, Depends, HTTPException

from app.auth.supabase_auth import get_current_user_id
from app.core.exceptions import DataAccessError
from app.db.supabase_client import get_supabase_client
from app.models.schemas import SaveItineraryRequest, SavedItineraryResponse
from app.services import saved_itineraries
from app.services.saved_itineraries import UserDataStore

router = APIRouter()


def get_store() -> UserDataStore:
    return UserDataStore(get_supabase_client())


@router.get("", response_model=SavedItineraryResponse)
def list_saved(user_id: str = Depends(get_current_user_id), store: UserDataStore = Depends(get_store)):
    try:
        data = saved_itineraries.fetch_saved_itineraries(store, user_id)
    except DataAccessError as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch saved itineraries: {e}")
    return SavedItineraryResponse(success=True, data=data)


@router.post("", response_model=SavedItineraryResponse)
def save(
    request: SaveItineraryRequest,
    user_id: str = Depends(get_current_user_id),
    store: UserDataStore = Depends(get_store),
):
    entry = saved_itineraries.build_saved_itinerary(
        request.city, request.interests, request.month, request.duration, request.budget
    )
    try:
        message = saved_itineraries.save_itinerary(store, user_id, entry)
    except DataAccessError as e:
        raise HTTPException(status_code=500, detail=f"Failed to save itinerary: {e}")
    return SavedItineraryResponse(success=True, message=message, data=[entry])


@router.delete("/{itinerary_id}", response_model=SavedItineraryResponse)
def delete(
    itinerary_id: str,
    user_id: str = Depends(get_current_user_id),
    store: UserDataStore = Depends(get_store),
):
    try:
        message = saved_itineraries.delete_saved_itinerary(store, user_id, itinerary_id)
    except DataAccessError as e:
        raise HTTPException(status_code=500, detail=f"Failed to delete itinerary: {e}")
    return SavedItineraryResponse(success=True, message=message)
