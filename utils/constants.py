import os

from dotenv import load_dotenv

load_dotenv()


GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY") or os.getenv("API_KEY", "")
CORS_ALLOW_ALL = (os.getenv("CORS_ALLOW_ALL") or "true").lower() == "true"
RESPONSE_SCHEMA = os.getenv("RESPONSE_SCHEMA") or "v1"
DEFAULT_RADIUS = int(os.getenv("DEFAULT_RADIUS") or "1500")
PHOTO_MAX_PX = int(os.getenv("PHOTO_MAX_PX") or "1600")
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT")) if os.getenv("UPSTREAM_TIMEOUT") else None
LOG_LEVEL = os.getenv("LOG_LEVEL") or "INFO"

PLACES_PHOTO_URL = "https://maps.googleapis.com/maps/api/place/photo"
DEFAULT_PHOTO_MEDIA_TYPE = "image/jpeg"
