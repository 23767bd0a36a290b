"""
FastAPI application entrypoint.

Run locally:  uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI

from app.api.routes import router
from app.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(levelname)s | %(name)s | %(message)s",
)

app = FastAPI(
    title="JSON Schema Validation API",
    description=(
        "Paste a JSON Schema and a JSON document, get back whether the "
        "document validates and every constraint it violates."
    ),
    version="1.0.0",
)

app.include_router(router, prefix="/api/v1")
