"""The fixed check table and the ordered pipeline built on it.

``COMMIT_CHECKS`` binds each command-backed check to its command line.
``PIPELINE_STEPS`` lays out the eight pipeline states in execution order; the
working-tree gate appears twice, before and after the formatter, with its own
messages each time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from commitcheck.runners.models import CommandSpec, OutputMode

__all__ = [
    "CheckId",
    "PipelineStep",
    "StepDefinition",
    "COMMIT_CHECKS",
    "PIPELINE_STEPS",
    "SUCCESS_MESSAGE",
    "START_MESSAGE",
]

START_MESSAGE = "Starting commit validation process..."
SUCCESS_MESSAGE = "All checks passed! Ready to commit."

# Every build-backed check goes through the flake's apps
_FLAKE_RUNNER = "nix"


class CheckId(str, Enum):
    """Command-backed checks."""

    GIT_STATUS = "git_status"
    FMT = "fmt"
    FMT_CHECK = "fmt_check"
    LINT = "lint"
    CHECK = "check"
    TEST = "test"
    BUILD = "build"


class PipelineStep(str, Enum):
    """States of the pipeline, in execution order."""

    GATE_PRE = "gate_pre"
    FORMAT = "format"
    GATE_POST = "gate_post"
    FORMAT_CHECK = "format_check"
    LINT = "lint"
    TYPE_CHECK = "type_check"
    TEST = "test"
    BUILD = "build"


COMMIT_CHECKS: Mapping[CheckId, CommandSpec] = MappingProxyType(
    {
        CheckId.GIT_STATUS: CommandSpec("git", ("diff", "--quiet")),
        CheckId.FMT: CommandSpec(_FLAKE_RUNNER, ("run", ".#fmt")),
        CheckId.FMT_CHECK: CommandSpec(_FLAKE_RUNNER, ("run", ".#fmt-check")),
        CheckId.LINT: CommandSpec(_FLAKE_RUNNER, ("run", ".#lint")),
        CheckId.CHECK: CommandSpec(_FLAKE_RUNNER, ("run", ".#check")),
        CheckId.TEST: CommandSpec(_FLAKE_RUNNER, ("run", ".#test")),
        CheckId.BUILD: CommandSpec(_FLAKE_RUNNER, ("run", ".#build")),
    }
)


@dataclass(frozen=True, slots=True)
class StepDefinition:
    """One state of the pipeline.

    Attributes:
        step: Which pipeline state this is.
        check: The command-backed check it runs.
        mode: Whether the check's output is streamed or captured.
        announce: Progress line printed before the check runs.
        failure_message: Reported when the check fails.
        passed_message: Printed after the check passes, if any.
    """

    step: PipelineStep
    check: CheckId
    mode: OutputMode
    announce: str
    failure_message: str
    passed_message: str | None = None

    @property
    def command(self) -> CommandSpec:
        """Command line bound to this step's check."""
        return COMMIT_CHECKS[self.check]

    @property
    def is_gate(self) -> bool:
        """True for the working-tree cleanliness gates."""
        return self.check is CheckId.GIT_STATUS


PIPELINE_STEPS: tuple[StepDefinition, ...] = (
    StepDefinition(
        step=PipelineStep.GATE_PRE,
        check=CheckId.GIT_STATUS,
        mode=OutputMode.CAPTURE,
        announce="Checking for unstaged changes...",
        failure_message=(
            "There are unstaged changes. "
            "Please commit or stash them before continuing."
        ),
        passed_message="✓ No unstaged changes",
    ),
    StepDefinition(
        step=PipelineStep.FORMAT,
        check=CheckId.FMT,
        mode=OutputMode.STREAM,
        announce="Running formatter...",
        failure_message="Failed to run formatter",
    ),
    StepDefinition(
        step=PipelineStep.GATE_POST,
        check=CheckId.GIT_STATUS,
        mode=OutputMode.CAPTURE,
        announce="Checking for unstaged changes after formatting...",
        failure_message=(
            "There are unstaged changes after formatting. "
            "Please review and commit them."
        ),
        passed_message="✓ No unstaged changes after formatting",
    ),
    StepDefinition(
        step=PipelineStep.FORMAT_CHECK,
        check=CheckId.FMT_CHECK,
        mode=OutputMode.STREAM,
        announce="Running format check...",
        failure_message="Format check failed.",
    ),
    StepDefinition(
        step=PipelineStep.LINT,
        check=CheckId.LINT,
        mode=OutputMode.STREAM,
        announce="Running linter...",
        failure_message="Lint check failed.",
    ),
    StepDefinition(
        step=PipelineStep.TYPE_CHECK,
        check=CheckId.CHECK,
        mode=OutputMode.STREAM,
        announce="Running type check...",
        failure_message="Type check failed.",
    ),
    StepDefinition(
        step=PipelineStep.TEST,
        check=CheckId.TEST,
        mode=OutputMode.STREAM,
        announce="Running tests...",
        failure_message="Tests failed.",
    ),
    StepDefinition(
        step=PipelineStep.BUILD,
        check=CheckId.BUILD,
        mode=OutputMode.STREAM,
        announce="Running build...",
        failure_message="Build failed.",
    ),
)
