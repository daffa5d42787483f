"""Backend configuration."""
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # API settings
    api_title: str = "Charter Weather API"
    api_version: str = "1.0.0"
    cors_origins: list = ["http://localhost:5173", "http://localhost:3000"]

    # Charter base (Agde, Gulf of Lion)
    location_name: str = "Agde"
    latitude: float = 43.3167
    longitude: float = 3.4667
    timezone: str = "Europe/Paris"

    # Forecast provider
    provider_url: str = "https://api.open-meteo.com/v1/forecast"
    forecast_days: int = 7
    request_timeout: float = 10.0

    # Analysis
    include_analysis: bool = True
    include_daylight: bool = True
    fallback_seed: Optional[int] = None

    class Config:
        env_prefix = "CHARTER_"


settings = Settings()
