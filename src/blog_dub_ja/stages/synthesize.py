"""Stage 4: Synthesize -- stream narration text into the TTS tool."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from ..models import ProcessSpec

if TYPE_CHECKING:
    from ..config import PipelineConfig
    from ..process import ProcessInvoker

log = logger.bind(stage="synthesize")


def build_spec(
    text: str,
    output_path: Path,
    config: PipelineConfig,
    debug_dir: Path | None = None,
) -> ProcessSpec:
    """Synthesis command for the configured engine.

    ``--model`` is only passed when the engine has a model configured.
    stdout is not captured so the tool's own progress stays visible.
    """
    args = [config.tts_cmd, "-o", str(output_path)]
    if config.tts_model:
        args += ["--model", config.tts_model]
    if debug_dir is not None:
        args += ["--debug-dir", str(debug_dir)]
    return ProcessSpec(
        command=config.launcher,
        args=tuple(args),
        stdin_body=text,
        capture_stdout=False,
    )


def run(
    text: str,
    output_path: Path,
    config: PipelineConfig,
    invoker: ProcessInvoker,
    debug_dir: Path | None = None,
) -> bool:
    """Generate audio at ``output_path``.

    Returns False (without spawning) when there is nothing to narrate.
    A zero exit status is taken as proof the file was written.
    """
    if not text:
        log.warning("No narration text, skipping audio generation")
        return False

    result = invoker.run(build_spec(text, output_path, config, debug_dir))
    log.debug(f"{config.tts_engine} synthesis finished -> {output_path}")
    return result.success
