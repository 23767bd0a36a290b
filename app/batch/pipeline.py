"""
Batch validation pipeline: one schema, many documents.

Demonstrates:
- Reusing the single-document service step by step inside a staged pipeline
- Schema problems stop the pipeline once instead of once per document
- Per-document failures are collected, never halting the batch
"""

from __future__ import annotations

import logging
from typing import Any

from app.batch.runner import BatchRunner
from app.exceptions import ValidationFailure
from app.schemas.api import ValidationOutcome
from app.services.validation import ValidationService

logger = logging.getLogger(__name__)


def build_batch_pipeline(service: ValidationService) -> BatchRunner:
    """Construct the parse -> compile -> validate pipeline around ``service``."""

    def parse_schema(context: dict[str, Any]) -> dict[str, Any]:
        return {"schema": service.parse_schema(context["schema_text"])}

    def compile_schema(context: dict[str, Any]) -> dict[str, Any]:
        return {"validator": service.compile(context["schema"])}

    def validate_documents(context: dict[str, Any]) -> dict[str, Any]:
        outcomes: list[ValidationOutcome] = []
        for text in context.get("documents", []):
            try:
                data = service.parse_data(text)
                outcomes.append(service.run(context["validator"], data))
            except ValidationFailure as exc:
                outcomes.append(ValidationOutcome.failed([str(exc)]))

        valid_count = sum(1 for outcome in outcomes if outcome.valid)
        logger.info(
            "Validation: %d valid, %d invalid", valid_count, len(outcomes) - valid_count
        )
        return {
            "outcomes": outcomes,
            "valid_count": valid_count,
            "invalid_count": len(outcomes) - valid_count,
        }

    runner = BatchRunner("batch_validation")
    runner.add_stage("parse_schema", parse_schema)
    runner.add_stage("compile_schema", compile_schema)
    runner.add_stage("validate_documents", validate_documents)
    return runner


def run_batch(
    service: ValidationService, schema_text: str, documents: list[str]
) -> tuple[dict[str, Any], list[ValidationOutcome]]:
    """
    Run the pipeline and return its summary with one outcome per document.

    Each outcome matches what ``service.validate`` reports for the same
    schema and document on its own. Data parse errors take precedence over
    schema compile errors, as they do there.
    """
    runner = build_batch_pipeline(service)
    summary = runner.run({"schema_text": schema_text, "documents": documents})

    failed = runner.failed_stage
    if failed is not None:
        outcomes = []
        for text in documents:
            errors = [failed.error or "Schema error: batch validation failed"]
            if failed.name == "compile_schema":
                try:
                    service.parse_data(text)
                except ValidationFailure as exc:
                    errors = [str(exc)]
            outcomes.append(ValidationOutcome.failed(errors))
        return summary, outcomes
    return summary, runner.stages["validate_documents"].result["outcomes"]
