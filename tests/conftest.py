from typing import Any

import pytest
from fastapi.testclient import TestClient

from app import app
from integrations.google_maps import UpstreamError
from models.bite import SearchCriteria
from routers.bite import get_places_client
from utils.config import Settings, get_settings

TWO_RESULT_PAGE: dict[str, Any] = {
    "html_attributions": [],
    "next_page_token": "NEXT123",
    "results": [
        {
            "business_status": "OPERATIONAL",
            "geometry": {"location": {"lat": 37.7751, "lng": -122.4180}},
            "name": "Tacos El Sol",
            "opening_hours": {"open_now": True},
            "photos": [
                {"height": 800, "html_attributions": ["<a>Ana</a>"], "photo_reference": "ref1", "width": 1200}
            ],
            "place_id": "place-1",
            "price_level": 1,
            "rating": 4.5,
            "types": ["restaurant", "food"],
            "user_ratings_total": 312,
            "vicinity": "12 Market St",
        },
        {
            "geometry": {"location": {"lat": 37.7760, "lng": -122.4200}},
            "name": "Bistro Nine",
            "place_id": "place-2",
            "price_level": 3,
            "rating": 4.1,
            "types": ["restaurant"],
            "vicinity": "9 Mission St",
        },
    ],
    "status": "OK",
}


class FakePlacesClient:
    """Records every call and answers with canned data"""

    def __init__(self, page: dict[str, Any] | None = None, photo: bytes = b"", fail: bool = False):
        self.page = page if page is not None else TWO_RESULT_PAGE
        self.photo_bytes = photo
        self.fail = fail
        self.searches: list[SearchCriteria] = []
        self.photo_refs: list[str] = []

    def nearby_search(self, criteria: SearchCriteria) -> dict[str, Any]:
        self.searches.append(criteria)
        if self.fail:
            raise UpstreamError("REQUEST_DENIED: The provided API key is invalid.")
        return self.page

    def next_page(self, page_token: str) -> dict[str, Any]:
        return self.nearby_search(SearchCriteria.for_page(page_token))

    def photo(self, photo_reference: str) -> tuple[bytes, str]:
        self.photo_refs.append(photo_reference)
        if self.fail:
            raise UpstreamError("Photo request returned HTTP 400")
        return self.photo_bytes, "image/jpeg"


@pytest.fixture
def settings() -> Settings:
    return Settings(google_maps_api_key="AIza-test-key")


@pytest.fixture
def places() -> FakePlacesClient:
    return FakePlacesClient(photo=bytes(range(256)) * 4)


@pytest.fixture
def client(places: FakePlacesClient, settings: Settings):
    app.dependency_overrides[get_places_client] = lambda: places
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
