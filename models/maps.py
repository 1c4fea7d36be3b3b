from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PLACES_SCHEMA_VERSION = "1"


class PriceLevel(IntEnum):
    """Google Places price levels"""

    FREE = 0
    INEXPENSIVE = 1
    MODERATE = 2
    EXPENSIVE = 3
    VERY_EXPENSIVE = 4


class GooglePlacesModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class PlaceLocation(GooglePlacesModel):
    lat: float
    lng: float


class PlaceViewport(GooglePlacesModel):
    northeast: PlaceLocation
    southwest: PlaceLocation


class PlaceGeometry(GooglePlacesModel):
    location: PlaceLocation
    viewport: PlaceViewport | None = None


class PlacePlusCode(GooglePlacesModel):
    global_code: str | None = None
    compound_code: str | None = None


class PlacePhoto(GooglePlacesModel):
    photo_reference: str
    height: int | None = None
    width: int | None = None
    html_attributions: list[str] | None = None


class PlaceOpeningHours(GooglePlacesModel):
    open_now: bool | None = None


class Place(GooglePlacesModel):
    place_id: str
    name: str
    vicinity: str | None = None
    formatted_address: str | None = None
    plus_code: PlacePlusCode | None = None
    geometry: PlaceGeometry | None = None
    rating: float | None = None
    user_ratings_total: int | None = None
    price_level: PriceLevel | None = None
    business_status: str | None = None
    permanently_closed: bool | None = None
    opening_hours: PlaceOpeningHours | None = None
    photos: list[PlacePhoto] | None = None
    types: list[str] | None = None
    icon: str | None = None


class PlacesPage(GooglePlacesModel):
    """Fields of a nearby search page this service guarantees to return"""

    status: str
    results: list[Place] = Field(default_factory=list)
    html_attributions: list[str] | None = None
    next_page_token: str | None = None

    @classmethod
    def from_google(cls, response: dict[str, Any]) -> "PlacesPage":
        """Project a raw places_nearby response"""
        return cls.model_validate(response)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)
