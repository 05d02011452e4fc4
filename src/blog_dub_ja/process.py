"""Subprocess invocation with piped stdin and captured or streamed stdout."""

import subprocess

from loguru import logger

from .errors import ExitError, SpawnError
from .models import ProcessSpec, StageResult

log = logger.bind(stage="process")


def _format_argv(argv: list[str]) -> str:
    args_str = " ".join(argv)
    if len(args_str) > 200:
        args_str = args_str[:197] + "..."
    return args_str


class ProcessInvoker:
    """Runs one external command per call. No timeout, no retry.

    stderr is always inherited so the child's diagnostics show up live.
    stdout is either piped and returned (``capture_stdout=True``) or
    inherited (``capture_stdout=False``).
    """

    def run(self, spec: ProcessSpec) -> StageResult:
        """Run ``spec`` to completion.

        Raises SpawnError if the command cannot be started and ExitError
        on a non-zero exit status (captured output is discarded).
        """
        log.info(f"Running: {_format_argv(spec.argv)} (input: {spec.input_length} chars)")

        # Whitespace-only bodies are not sent; stdin is closed either way
        body = spec.stdin_body if spec.stdin_body and spec.stdin_body.strip() else None

        try:
            proc = subprocess.Popen(
                spec.argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE if spec.capture_stdout else None,
                stderr=None,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise SpawnError(spec.command, exc.strerror or str(exc)) from exc

        stdout, _ = proc.communicate(input=body)

        if proc.returncode != 0:
            log.debug(f"{spec.command} exited with code {proc.returncode}")
            raise ExitError(spec.command, proc.returncode)

        if spec.capture_stdout:
            return StageResult(exit_code=0, text=(stdout or "").strip())
        return StageResult(exit_code=0, success=True)


def run_command(
    command: str,
    args: list[str],
    stdin_body: str | None = None,
    capture_stdout: bool = True,
) -> str | bool:
    """Shorthand for one-off calls: captured text, or True when streamed."""
    spec = ProcessSpec(
        command=command,
        args=tuple(args),
        stdin_body=stdin_body,
        capture_stdout=capture_stdout,
    )
    result = ProcessInvoker().run(spec)
    if capture_stdout:
        return result.text or ""
    return result.success
