import base64
import json

import pytest

from app import app
from handler import handler
from routers.bite import get_places_client
from utils.config import get_settings


def api_gateway_event(method: str, body: dict | None = None, query: dict | None = None) -> dict:
    return {
        "resource": "/bite",
        "path": "/bite",
        "httpMethod": method,
        "headers": {"Content-Type": "application/json", "Host": "api.example.com"},
        "multiValueHeaders": {"Content-Type": ["application/json"], "Host": ["api.example.com"]},
        "queryStringParameters": query,
        "multiValueQueryStringParameters": {key: [value] for key, value in query.items()} if query else None,
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": {
            "resourcePath": "/bite",
            "httpMethod": method,
            "path": "/prod/bite",
            "stage": "prod",
            "identity": {"sourceIp": "203.0.113.7"},
        },
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def overrides(places, settings):
    app.dependency_overrides[get_places_client] = lambda: places
    app.dependency_overrides[get_settings] = lambda: settings
    yield
    app.dependency_overrides.clear()


def test_lambda_photo_is_base64_encoded(overrides, places):
    result = handler(api_gateway_event("POST", {"verb": "photo", "photoRef": "ref1"}), None)

    assert result["statusCode"] == 200
    assert result["isBase64Encoded"] is True
    assert base64.b64decode(result["body"]) == places.photo_bytes


def test_lambda_get_is_method_not_allowed(overrides):
    result = handler(api_gateway_event("GET", {"verb": "create"}), None)

    assert result["statusCode"] == 405
    assert result["body"] == "Method Not Allowed"


def test_lambda_next_page_from_query_string(overrides, places):
    result = handler(api_gateway_event("POST", query={"verb": "nextpage", "pagetoken": "ABC123"}), None)

    assert result["statusCode"] == 200
    assert result["isBase64Encoded"] is False
    assert json.loads(result["body"])["next_page_token"] == "NEXT123"
    assert places.searches[0].page_token == "ABC123"
