"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import Annotated, List, Optional
from pydantic_settings import BaseSettings, NoDecode
from pydantic import AliasChoices, Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === CORS ===
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Google Maps Platform ===
    google_maps_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("google_maps_api_key", "google_api_key"),
        description="API key with Routes and Elevation APIs enabled"
    )
    routes_api_url: str = Field(
        default="https://routes.googleapis.com/directions/v2:computeRoutes",
        description="Routes API endpoint"
    )
    elevation_api_url: str = Field(
        default="https://maps.googleapis.com/maps/api/elevation/json",
        description="Elevation API endpoint"
    )
    travel_mode: str = Field(default="DRIVE")
    # Elevation API accepts at most 512 samples per path request
    elevation_samples: int = Field(default=256, ge=2, le=512)
    http_timeout: float = Field(default=10.0, gt=0)

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    @field_validator('travel_mode')
    @classmethod
    def upper_travel_mode(cls, v: str) -> str:
        return v.upper()

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


# Global settings instance
settings = Settings()
