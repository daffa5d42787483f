"""API routes for seasonal and holiday labels."""
from datetime import date

from fastapi import APIRouter

from backend.schemas.forecast import SpecialEventResponse
from weather_analysis.services.special_events import special_event

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/{day}", response_model=SpecialEventResponse)
async def get_special_event(day: date) -> SpecialEventResponse:
    """Get the season or holiday label of a date, independent of weather."""
    return SpecialEventResponse(date=day.isoformat(), special_event=special_event(day))
