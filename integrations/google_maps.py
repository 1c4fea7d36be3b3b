from typing import Any

import googlemaps
import requests
from googlemaps.exceptions import ApiError, HTTPError, Timeout, TransportError

from models.bite import SearchCriteria
from utils.config import Settings
from utils.constants import DEFAULT_PHOTO_MEDIA_TYPE, PLACES_PHOTO_URL
from utils.logging import logger

OK_STATUSES = {"OK", "ZERO_RESULTS"}


class UpstreamError(Exception):
    """The Google Places call failed"""


class SingleAttemptClient(googlemaps.Client):
    """googlemaps client that gives up instead of retrying a request"""

    def _request(self, url, params, first_request_time=None, retry_counter=0, *args, **kwargs):
        if retry_counter > 0:
            raise TransportError("Google Maps asked for a retry")
        return super()._request(url, params, first_request_time, retry_counter, *args, **kwargs)


class PlacesClient:
    """Thin adapter over the Google Places nearby search and photo endpoints"""

    def __init__(self, settings: Settings):
        self._settings = settings
        self._client: googlemaps.Client | None = None

    @property
    def client(self) -> googlemaps.Client:
        if self._client is None:
            try:
                self._client = SingleAttemptClient(
                    key=self._settings.google_maps_api_key,
                    timeout=self._settings.upstream_timeout,
                    retry_over_query_limit=False,
                )
            except ValueError as e:
                raise UpstreamError(f"Could not create Google Maps client: {e}") from e
        return self._client

    def nearby_search(self, criteria: SearchCriteria) -> dict[str, Any]:
        """Search restaurants around a location, or continue a previous search by page token"""
        kwargs = criteria.to_places_kwargs()
        logger.info(f"Querying places nearby with: {kwargs}")
        try:
            response = self.client.places_nearby(**kwargs)
        except (ApiError, ValueError) as e:
            raise UpstreamError(f"Nearby search failed: {e!r}") from e
        except (HTTPError, Timeout, TransportError) as e:
            # transport errors may carry the request URL, which holds the key
            raise UpstreamError(f"Nearby search failed: {type(e).__name__}") from e

        status = response.get("status", "OK")
        if status not in OK_STATUSES:
            raise UpstreamError(f"Nearby search returned status {status}")
        return response

    def next_page(self, page_token: str) -> dict[str, Any]:
        """Fetch the page following a previous nearby search"""
        return self.nearby_search(SearchCriteria.for_page(page_token))

    def photo(self, photo_reference: str) -> tuple[bytes, str]:
        """Download a place photo, returns its bytes and media type"""
        logger.info(f"Retrieving photo for reference: {photo_reference}")
        max_px = self._settings.photo_max_px
        params = {
            "photoreference": photo_reference,
            "maxwidth": max_px,
            "maxheight": max_px,
            "key": self._settings.google_maps_api_key,
        }
        try:
            response = requests.get(PLACES_PHOTO_URL, params=params, timeout=self._settings.upstream_timeout)
        except requests.RequestException as e:
            raise UpstreamError(f"Photo request failed: {type(e).__name__}") from e

        if response.status_code != 200:
            raise UpstreamError(f"Photo request returned HTTP {response.status_code}")
        media_type = response.headers.get("Content-Type", DEFAULT_PHOTO_MEDIA_TYPE).split(";")[0]
        return response.content, media_type
