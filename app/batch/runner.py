"""
Ordered stage runner for batch validation.

Stages run in the order they were added. Each one receives the context
accumulated so far and returns a dict that is merged into it. Once a stage
fails, every later stage is skipped; the failure is recorded, never raised.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class StageStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class Stage:
    """One named step of a batch pipeline."""

    name: str
    execute_fn: Callable[[dict[str, Any]], dict[str, Any] | None]
    status: StageStatus = StageStatus.PENDING
    result: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    duration_ms: float = 0.0


class BatchRunner:
    """
    Usage:
        runner = BatchRunner("batch_validation")
        runner.add_stage("parse_schema", parse_schema)
        runner.add_stage("compile_schema", compile_schema)
        summary = runner.run(initial_context={"schema_text": "{}"})
    """

    def __init__(self, name: str):
        self.name = name
        self.stages: dict[str, Stage] = {}

    def add_stage(
        self,
        name: str,
        execute_fn: Callable[[dict[str, Any]], dict[str, Any] | None],
    ) -> BatchRunner:
        if name in self.stages:
            raise ValueError(f"Duplicate stage name: {name}")
        self.stages[name] = Stage(name=name, execute_fn=execute_fn)
        return self

    @property
    def failed_stage(self) -> Stage | None:
        for stage in self.stages.values():
            if stage.status == StageStatus.FAILED:
                return stage
        return None

    def run(self, initial_context: dict[str, Any] | None = None) -> dict[str, Any]:
        context = dict(initial_context or {})
        summary: dict[str, Any] = {"pipeline": self.name, "stages": {}}

        logger.info("Starting pipeline '%s' with %d stages", self.name, len(self.stages))

        for stage in self.stages.values():
            if self.failed_stage is not None:
                stage.status = StageStatus.SKIPPED
                logger.warning("Skipping '%s' – an earlier stage failed", stage.name)
                summary["stages"][stage.name] = {"status": stage.status.value}
                continue

            stage.status = StageStatus.RUNNING
            logger.info("Running stage '%s'", stage.name)
            start = time.perf_counter()
            try:
                stage.result = stage.execute_fn(context) or {}
                stage.status = StageStatus.SUCCESS
                context.update(stage.result)
            except Exception as exc:
                stage.status = StageStatus.FAILED
                stage.error = str(exc)
                logger.error("Stage '%s' failed: %s", stage.name, exc)
            finally:
                stage.duration_ms = (time.perf_counter() - start) * 1000

            summary["stages"][stage.name] = {
                "status": stage.status.value,
                "duration_ms": round(stage.duration_ms, 2),
                "error": stage.error,
            }

        summary["status"] = "failed" if self.failed_stage else "completed"
        logger.info("Pipeline '%s' finished – %s", self.name, summary["status"])
        return summary

