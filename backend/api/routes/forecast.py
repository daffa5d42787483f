"""API routes for the forecast calendar."""
from fastapi import APIRouter, Depends, Path, HTTPException

from backend.schemas.forecast import ForecastResponse, HourlySeriesResponse
from backend.services.forecast_service import ForecastService
from backend.api.dependencies import get_forecast_service

router = APIRouter(prefix="/forecast", tags=["forecast"])


@router.get("", response_model=ForecastResponse)
def get_forecast(
    forecast_service: ForecastService = Depends(get_forecast_service),
) -> ForecastResponse:
    """
    Get the multi-day forecast with sailing conditions.

    Declared sync so the blocking provider request runs in the threadpool.

    Each day carries its calendar summary, the daily sailing condition,
    and (for provider data) the hourly analysis with intra-day windows.
    """
    return forecast_service.get_forecast()


@router.get("/{day}/hourly", response_model=HourlySeriesResponse)
def get_hourly_values(
    day: str = Path(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Date (YYYY-MM-DD)"),
    forecast_service: ForecastService = Depends(get_forecast_service),
) -> HourlySeriesResponse:
    """Get hourly values of one forecast day for charting."""
    result = forecast_service.get_hourly(day)
    if result is None:
        raise HTTPException(status_code=404, detail="Hourly data not available")
    return result
