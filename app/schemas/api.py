"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Single validation
# ---------------------------------------------------------------------------

class ValidationOutcome(BaseModel):
    """Result of one validate call – ``errors`` is empty iff ``valid``."""
    valid: bool
    errors: list[str] = []

    @model_validator(mode="after")
    def _errors_match_validity(self) -> ValidationOutcome:
        if self.valid and self.errors:
            raise ValueError("a valid outcome cannot carry errors")
        if not self.valid and not self.errors:
            raise ValueError("an invalid outcome needs at least one error")
        return self

    @classmethod
    def passed(cls) -> ValidationOutcome:
        return cls(valid=True, errors=[])

    @classmethod
    def failed(cls, errors: list[str]) -> ValidationOutcome:
        return cls(valid=False, errors=list(errors))


class ValidationRequest(BaseModel):
    """Raw text of both form fields, exactly as the user typed them."""
    schema_text: str
    data_text: str


class ExamplePayload(BaseModel):
    schema_text: str
    data_text: str


# ---------------------------------------------------------------------------
# Batch validation
# ---------------------------------------------------------------------------

class BatchValidationRequest(BaseModel):
    """One schema, many documents – each document is raw JSON text."""
    schema_text: str
    documents: list[str] = Field(..., min_length=1)


class StageSummary(BaseModel):
    status: str
    duration_ms: float | None = None
    error: str | None = None


class BatchResult(BaseModel):
    pipeline: str
    status: str
    stages: dict[str, StageSummary]
    outcomes: list[ValidationOutcome]
    valid_count: int = 0
    invalid_count: int = 0


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str = "healthy"
    environment: str
    engine: str
    default_draft: str
