"""AWS Lambda entry point.

Mangum turns the API Gateway event into an ASGI request for the FastAPI app
and base64 encodes binary bodies (photos) in the proxy response.
"""

from mangum import Mangum

from app import app
from utils.config import get_settings

# lifespan is off under Lambda, so bad configuration has to fail the cold start here
get_settings()

handler = Mangum(app, lifespan="off")
