"""Sequential check pipeline."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from commitcheck.cli.console import plain_console
from commitcheck.logging import bind_context, clear_context, get_logger
from commitcheck.pipeline.models import CheckOutcome, PipelineResult
from commitcheck.pipeline.steps import (
    PIPELINE_STEPS,
    START_MESSAGE,
    SUCCESS_MESSAGE,
    StepDefinition,
)

if TYPE_CHECKING:
    from rich.console import Console

    from commitcheck.runners.command import CommandRunner

__all__ = ["CheckPipeline"]

logger = get_logger(__name__)


class CheckPipeline:
    """Run the commit checks in order and stop at the first failure.

    The pipeline never terminates the process. It returns a PipelineResult
    and leaves the exit code to the caller.

    Example:
        ```python
        pipeline = CheckPipeline(CommandRunner(cwd=root))
        result = await pipeline.run()
        raise SystemExit(result.exit_code)
        ```
    """

    def __init__(
        self,
        runner: CommandRunner,
        console: Console | None = None,
    ) -> None:
        self._runner = runner
        self._console = console or plain_console()

    async def run(self) -> PipelineResult:
        """Execute every step until one fails."""
        start_time = time.monotonic()
        outcomes: list[CheckOutcome] = []

        self._console.print(START_MESSAGE)
        self._console.print()

        try:
            for definition in PIPELINE_STEPS:
                outcome = await self._run_step(definition)
                outcomes.append(outcome)

                if not outcome.success:
                    logger.info(
                        "pipeline_aborted",
                        step=definition.step.value,
                        steps_run=len(outcomes),
                    )
                    return PipelineResult(
                        success=False,
                        outcomes=tuple(outcomes),
                        failed_step=definition.step,
                        message=definition.failure_message,
                        total_duration_ms=_elapsed_ms(start_time),
                    )
        finally:
            clear_context()

        logger.info("pipeline_passed", steps_run=len(outcomes))
        return PipelineResult(
            success=True,
            outcomes=tuple(outcomes),
            failed_step=None,
            message=SUCCESS_MESSAGE,
            total_duration_ms=_elapsed_ms(start_time),
        )

    async def _run_step(self, definition: StepDefinition) -> CheckOutcome:
        bind_context(step=definition.step.value)
        step_start = time.monotonic()

        self._console.print(definition.announce)
        success = await self._runner.run(definition.command, mode=definition.mode)

        if success and definition.passed_message:
            self._console.print(definition.passed_message)
            self._console.print()

        logger.debug("step_finished", success=success)
        return CheckOutcome(
            step=definition.step,
            success=success,
            duration_ms=_elapsed_ms(step_start),
        )


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
