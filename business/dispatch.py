from http import HTTPStatus
from typing import Any, Mapping

from pydantic import ValidationError

from business.price_level import parse_price_levels
from business.responses import client_error, client_success, photo_success, server_error
from integrations.google_maps import PlacesClient, UpstreamError
from models.bite import BiteRequest, ProxyResponse, SearchCriteria, Verb, parse_bite_request
from utils.config import Settings
from utils.logging import logger

RESTAURANT_TYPE = "restaurant"


def dispatch(
    method: str,
    payload: Mapping[str, Any] | None,
    query: Mapping[str, str] | None,
    places: PlacesClient,
    settings: Settings,
) -> ProxyResponse:
    """Route one invocation to the create, next page or photo flow"""
    if method.upper() != "POST":
        logger.info(f"Rejecting {method} request")
        return client_error(HTTPStatus.METHOD_NOT_ALLOWED)

    try:
        request = parse_bite_request(payload, query)
    except ValidationError as e:
        logger.info(f"Invalid request parameters: {e.error_count()} error(s)")
        return client_error(HTTPStatus.BAD_REQUEST)

    verb = request.resolved_verb
    logger.info(f"Verb is {request.verb}")
    try:
        if verb is Verb.CREATE:
            return handle_create(request, places, settings)
        if verb is Verb.NEXT_PAGE:
            return handle_next_page(request, places, settings)
        if verb is Verb.PHOTO:
            return handle_photo(request, places, settings)
    except UpstreamError as e:
        return server_error(e)
    return client_error(HTTPStatus.BAD_REQUEST)


def build_search_criteria(request: BiteRequest, settings: Settings) -> SearchCriteria:
    """Nearby restaurant search around the requested location, open places only"""
    min_price, max_price = parse_price_levels(request.min_price, request.max_price)
    return SearchCriteria(
        location=(request.lat, request.long),
        radius=request.radius if request.radius is not None else settings.default_radius,
        type=RESTAURANT_TYPE,
        open_now=True,
        min_price=min_price,
        max_price=max_price,
    )


def handle_create(request: BiteRequest, places: PlacesClient, settings: Settings) -> ProxyResponse:
    if request.lat is None or request.long is None:
        return client_error(HTTPStatus.BAD_REQUEST)
    response = places.nearby_search(build_search_criteria(request, settings))
    return client_success(response, settings)


def handle_next_page(request: BiteRequest, places: PlacesClient, settings: Settings) -> ProxyResponse:
    if not request.page_token:
        return client_error(HTTPStatus.BAD_REQUEST)
    response = places.next_page(request.page_token)
    return client_success(response, settings)


def handle_photo(request: BiteRequest, places: PlacesClient, settings: Settings) -> ProxyResponse:
    if not request.photo_ref:
        return client_error(HTTPStatus.BAD_REQUEST)
    photo, media_type = places.photo(request.photo_ref)
    return photo_success(photo, media_type, settings)
