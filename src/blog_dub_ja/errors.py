"""Exception hierarchy for the dubbing pipeline."""

import click

from .models import Stage


class PipelineError(Exception):
    """Base exception for all pipeline errors."""


class SpawnError(PipelineError):
    """An external command could not be started (missing binary, no permission)."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"Failed to start process {command}: {reason}")
        self.command = command
        self.reason = reason


class ExitError(PipelineError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: str, exit_code: int) -> None:
        super().__init__(f"{command} exited with code {exit_code}")
        self.command = command
        self.exit_code = exit_code


class ParseError(PipelineError):
    """Extraction output held no recoverable JSON object."""

    def __init__(self, message: str, raw_output: str) -> None:
        super().__init__(f"{message}\nRaw output: {raw_output}")
        self.raw_output = raw_output


class StageError(PipelineError):
    """A pipeline stage failed. Wraps the underlying error."""

    def __init__(self, stage: Stage, cause: PipelineError) -> None:
        super().__init__(f"{stage.value} failed: {cause}")
        self.stage = stage
        self.cause = cause

    @property
    def exit_code(self) -> int | None:
        """Exit code of the failed child process, if it got that far."""
        if isinstance(self.cause, ExitError):
            return self.cause.exit_code
        return None


class UsageError(click.UsageError):
    """Missing or conflicting CLI arguments. Exits with status 1."""

    exit_code = 1
