"""Result models for a pipeline run."""

from __future__ import annotations

from dataclasses import dataclass

from commitcheck.pipeline.steps import PipelineStep

__all__ = ["CheckOutcome", "PipelineResult"]


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of running one pipeline step.

    Attributes:
        step: The step that ran.
        success: True if its command exited with status 0.
        duration_ms: Execution time in milliseconds.
    """

    step: PipelineStep
    success: bool
    duration_ms: int = 0


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Terminal result of a pipeline run.

    Attributes:
        success: True if every step passed.
        outcomes: Outcomes of the steps that ran, in execution order.
        failed_step: The step that stopped the run, or None on success.
        message: Final message for the operator.
        total_duration_ms: Total execution time across all steps.

    Example:
        >>> result = PipelineResult(
        ...     success=False,
        ...     outcomes=(CheckOutcome(PipelineStep.GATE_PRE, False),),
        ...     failed_step=PipelineStep.GATE_PRE,
        ...     message="There are unstaged changes.",
        ... )
        >>> result.steps_run
        1
    """

    success: bool
    outcomes: tuple[CheckOutcome, ...]
    failed_step: PipelineStep | None
    message: str
    total_duration_ms: int = 0

    def __post_init__(self) -> None:
        if self.success and self.failed_step is not None:
            raise ValueError("A successful result cannot have a failed step")
        if not self.success and self.failed_step is None:
            raise ValueError("A failed result must name the failed step")

    @property
    def steps_run(self) -> int:
        """Total number of steps executed."""
        return len(self.outcomes)

    @property
    def steps_passed(self) -> int:
        """Number of steps that passed."""
        return sum(1 for o in self.outcomes if o.success)

    @property
    def exit_code(self) -> int:
        """Process exit status for this result (0 or 1)."""
        return 0 if self.success else 1
