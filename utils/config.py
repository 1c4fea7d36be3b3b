from functools import cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils import constants

# Largest photo size the Places photo endpoint serves
PHOTO_MAX_PX_LIMIT = 1600


class Settings(BaseModel):
    """Process configuration, read once at start and passed to every component"""

    model_config = ConfigDict(frozen=True)

    google_maps_api_key: str = Field(default="", repr=False)
    cors_allow_all: bool = True
    response_schema: Literal["v1", "raw"] = "v1"
    default_radius: int = Field(default=1500, ge=0)
    photo_max_px: int = Field(default=PHOTO_MAX_PX_LIMIT, gt=0)
    upstream_timeout: float | None = None

    @field_validator("photo_max_px")
    @classmethod
    def _clamp_photo_size(cls, value: int) -> int:
        return min(value, PHOTO_MAX_PX_LIMIT)


@cache
def get_settings() -> Settings:
    """Build the settings from the environment"""
    return Settings(
        google_maps_api_key=constants.GOOGLE_MAPS_API_KEY,
        cors_allow_all=constants.CORS_ALLOW_ALL,
        response_schema=constants.RESPONSE_SCHEMA,
        default_radius=constants.DEFAULT_RADIUS,
        photo_max_px=constants.PHOTO_MAX_PX,
        upstream_timeout=constants.UPSTREAM_TIMEOUT,
    )
