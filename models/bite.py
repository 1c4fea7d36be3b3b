from enum import Enum
from typing import Any, Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from models.maps import PriceLevel


class Verb(str, Enum):
    CREATE = "create"
    NEXT_PAGE = "nextpage"
    PHOTO = "photo"


class BiteRequest(BaseModel):
    """Request envelope sent by the app, either as a JSON body or a query string"""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    verb: str | None = None
    lat: float | None = Field(default=None, ge=-90, le=90)
    long: float | None = Field(default=None, ge=-180, le=180)
    radius: int | None = Field(default=None, ge=0)
    min_price: int | None = Field(default=None, validation_alias=AliasChoices("minPrice", "min_price"))
    max_price: int | None = Field(default=None, validation_alias=AliasChoices("maxPrice", "max_price"))
    page_token: str | None = Field(
        default=None, validation_alias=AliasChoices("pageToken", "pagetoken", "page_token")
    )
    photo_ref: str | None = Field(
        default=None, validation_alias=AliasChoices("photoRef", "photoref", "photo_ref")
    )

    @field_validator("*", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def resolved_verb(self) -> Verb | None:
        try:
            return Verb(self.verb) if self.verb else None
        except ValueError:
            return None


def _field_names() -> dict[str, str]:
    """Every accepted input key mapped to the field it fills"""
    names: dict[str, str] = {}
    for name, field in BiteRequest.model_fields.items():
        names[name] = name
        if isinstance(field.validation_alias, AliasChoices):
            for choice in field.validation_alias.choices:
                names[choice] = name
    return names


_FIELD_NAMES = _field_names()


def _by_field(source: Mapping[str, Any] | None) -> dict[str, Any]:
    return {_FIELD_NAMES.get(key, key): value for key, value in (source or {}).items()}


def parse_bite_request(payload: Mapping[str, Any] | None, query: Mapping[str, str] | None) -> BiteRequest:
    """Merge query string and body fields into a request envelope, body fields win.

    Raises pydantic.ValidationError when a field has the wrong type.
    """
    fields = _by_field(query)
    fields.update(_by_field(payload))
    return BiteRequest.model_validate(fields)


class SearchCriteria(BaseModel):
    """Arguments of one nearby search call"""

    model_config = ConfigDict(frozen=True)

    location: tuple[float, float] | None = None
    radius: int | None = None
    type: str | None = None
    open_now: bool = False
    min_price: PriceLevel | None = None
    max_price: PriceLevel | None = None
    page_token: str | None = None

    @classmethod
    def for_page(cls, page_token: str) -> "SearchCriteria":
        return cls(page_token=page_token)

    def to_places_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for googlemaps.Client.places_nearby"""
        if self.page_token:
            return {"page_token": self.page_token}

        kwargs: dict[str, Any] = {"location": self.location, "radius": self.radius, "type": self.type}
        if self.open_now:
            kwargs["open_now"] = True
        if self.min_price is not None:
            kwargs["min_price"] = int(self.min_price)
        if self.max_price is not None:
            kwargs["max_price"] = int(self.max_price)
        return {key: value for key, value in kwargs.items() if value is not None}


class ProxyResponse(BaseModel):
    """HTTP response record handed back to the hosting layer"""

    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""
    is_base64_encoded: bool = False
