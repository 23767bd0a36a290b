"""
FastAPI routes – the presentation surface for the validation service.

Demonstrates:
- Dependency injection (validation service via Depends)
- Validation failures returned as data, never as HTTP errors
- Running the batch pipeline via an HTTP trigger
"""

from __future__ import annotations

import logging
from importlib.metadata import version

from fastapi import APIRouter, Depends, HTTPException

from app.batch.pipeline import run_batch
from app.config import settings
from app.schemas.api import (
    BatchResult,
    BatchValidationRequest,
    ExamplePayload,
    HealthResponse,
    StageSummary,
    ValidationOutcome,
    ValidationRequest,
)
from app.schemas.examples import example_texts
from app.services.validation import ValidationService, get_validation_service

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse)
def health_check(service: ValidationService = Depends(get_validation_service)):
    """Basic health endpoint – reports the validation engine in use."""
    return HealthResponse(
        status="healthy",
        environment=settings.ENVIRONMENT,
        engine=f"jsonschema {version('jsonschema')}",
        default_draft=service.default_draft,
    )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

@router.post("/validate", response_model=ValidationOutcome)
def validate_document(
    request: ValidationRequest,
    service: ValidationService = Depends(get_validation_service),
):
    """Validate one document against one schema, both given as raw JSON text."""
    outcome = service.validate(request.schema_text, request.data_text)
    logger.info("Validation: valid=%s, %d errors", outcome.valid, len(outcome.errors))
    return outcome


@router.post("/validate/batch", response_model=BatchResult)
def validate_batch(
    request: BatchValidationRequest,
    service: ValidationService = Depends(get_validation_service),
):
    """
    Validate a batch of documents against a single schema.
    The schema is parsed and compiled once for the whole batch.
    """
    if len(request.documents) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Batch exceeds {settings.MAX_BATCH_SIZE} documents",
        )

    summary, outcomes = run_batch(service, request.schema_text, request.documents)
    valid_count = sum(1 for outcome in outcomes if outcome.valid)

    return BatchResult(
        pipeline=summary["pipeline"],
        status=summary["status"],
        stages={
            name: StageSummary(**info) for name, info in summary["stages"].items()
        },
        outcomes=outcomes,
        valid_count=valid_count,
        invalid_count=len(outcomes) - valid_count,
    )


# ---------------------------------------------------------------------------
# Example pair
# ---------------------------------------------------------------------------

@router.get("/example", response_model=ExamplePayload)
def load_example():
    """Canned schema and document for pre-filling the form."""
    schema_text, data_text = example_texts()
    return ExamplePayload(schema_text=schema_text, data_text=data_text)
