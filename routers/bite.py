import base64
import json
from functools import cache
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from business.dispatch import dispatch
from integrations.google_maps import PlacesClient
from models.bite import ProxyResponse
from utils.config import Settings, get_settings

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

router = APIRouter(tags=["bite"])


@cache
def get_places_client() -> PlacesClient:
    """Places client shared by every invocation of this process"""
    return PlacesClient(get_settings())


def _json_payload(body: bytes) -> dict[str, Any] | None:
    """Decode a JSON object body, anything else is ignored"""
    if not body:
        return None
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    return payload if isinstance(payload, dict) else None


def to_http_response(proxy_response: ProxyResponse) -> Response:
    """Decode the response record into the bytes the caller receives"""
    content = (
        base64.b64decode(proxy_response.body) if proxy_response.is_base64_encoded else proxy_response.body
    )
    return Response(content=content, status_code=proxy_response.status_code, headers=proxy_response.headers)


@router.api_route("/{path:path}", methods=ALL_METHODS)
async def bite(
    request: Request,
    places: PlacesClient = Depends(get_places_client),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Single entry point of the API, the verb selects the action"""
    payload = _json_payload(await request.body())
    proxy_response = await run_in_threadpool(
        dispatch, request.method, payload, dict(request.query_params), places, settings
    )
    return to_http_response(proxy_response)
