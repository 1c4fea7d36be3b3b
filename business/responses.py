import base64
import json
from http import HTTPStatus
from typing import Any

from pydantic import ValidationError

from models.bite import ProxyResponse
from models.maps import PLACES_SCHEMA_VERSION, PlacesPage
from utils.config import Settings
from utils.logging import logger

JSON_MEDIA_TYPE = "application/json"
TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"


def _base_headers(settings: Settings, media_type: str) -> dict[str, str]:
    headers = {"Content-Type": media_type}
    if settings.cors_allow_all:
        headers["Access-Control-Allow-Origin"] = "*"
    return headers


def client_error(status: int) -> ProxyResponse:
    """Error response whose body is the reason phrase of the status"""
    return ProxyResponse(
        status_code=status,
        headers={"Content-Type": TEXT_MEDIA_TYPE},
        body=HTTPStatus(status).phrase,
    )


def server_error(error: Exception) -> ProxyResponse:
    """Log the error and answer with a generic 500"""
    logger.error(f"Internal error: {error!r}")
    return client_error(HTTPStatus.INTERNAL_SERVER_ERROR)


def client_success(places_response: dict[str, Any], settings: Settings) -> ProxyResponse:
    """Serialize a nearby search page as JSON"""
    headers = _base_headers(settings, JSON_MEDIA_TYPE)
    try:
        if settings.response_schema == "raw":
            body = json.dumps(places_response)
        else:
            body = PlacesPage.from_google(places_response).to_json()
            headers["X-Places-Schema"] = PLACES_SCHEMA_VERSION
    except (ValidationError, TypeError, ValueError) as e:
        return server_error(e)
    return ProxyResponse(status_code=HTTPStatus.OK, headers=headers, body=body)


def photo_success(photo: bytes, media_type: str, settings: Settings) -> ProxyResponse:
    """Base64 encode a photo, the transport decodes it before delivery"""
    return ProxyResponse(
        status_code=HTTPStatus.OK,
        headers=_base_headers(settings, media_type),
        body=base64.b64encode(photo).decode("ascii"),
        is_base64_encoded=True,
    )
