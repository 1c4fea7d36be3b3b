"""Bite API application.

Run locally:
    uvicorn app:app --reload
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI

from routers import ROUTERS
from utils.config import get_settings
from utils.logging import logger


@asynccontextmanager
async def lifespan(_) -> AsyncGenerator[None, Any]:
    """Lifespan event handler"""
    if not get_settings().google_maps_api_key:
        logger.warning("GOOGLE_MAPS_API_KEY is not set, every upstream call will fail.")
    yield
    logger.info("Shutting down the application.")


app = FastAPI(title="Bite API", lifespan=lifespan)
for router in ROUTERS:
    app.include_router(router)
