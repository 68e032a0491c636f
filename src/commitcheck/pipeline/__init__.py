"""Ordered commit-check pipeline."""

from __future__ import annotations

from commitcheck.pipeline.models import CheckOutcome, PipelineResult
from commitcheck.pipeline.runner import CheckPipeline
from commitcheck.pipeline.steps import (
    COMMIT_CHECKS,
    PIPELINE_STEPS,
    CheckId,
    PipelineStep,
    StepDefinition,
)

__all__ = [
    "CheckId",
    "PipelineStep",
    "StepDefinition",
    "COMMIT_CHECKS",
    "PIPELINE_STEPS",
    "CheckOutcome",
    "PipelineResult",
    "CheckPipeline",
]
