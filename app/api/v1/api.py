from fastapi import APIRouter
from app.api.v1.endpoints import itineraries, saved

api_router = APIRouter()
api_router.include_router(itineraries.router, prefix="/itineraries", tags=["Itineraries"])
api_router.include_router(saved.router, prefix="/saved-itineraries", tags=["Saved Itineraries"])
