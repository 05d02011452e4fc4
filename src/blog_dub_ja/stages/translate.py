"""Stages 2 and 3: Translate -- pipe text through the Japanese translation tool."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from ..models import ProcessSpec

if TYPE_CHECKING:
    from ..config import PipelineConfig
    from ..process import ProcessInvoker

log = logger.bind(stage="translate")


def build_spec(text: str, config: PipelineConfig, debug_dir: Path | None = None) -> ProcessSpec:
    args = [config.translate_cmd]
    if debug_dir is not None:
        args += ["--debug-dir", str(debug_dir)]
    return ProcessSpec(
        command=config.launcher,
        args=tuple(args),
        stdin_body=text,
        capture_stdout=True,
    )


def title_prompt(title: str, config: PipelineConfig) -> str:
    """Wrap a bare title in an explicit instruction for the translator."""
    return config.title_prompt.format(title=title)


def strip_banners(output: str, prefix: str) -> str:
    """Drop every line starting with ``prefix`` (env-loader noise), then trim."""
    kept = [line for line in output.split("\n") if not line.startswith(prefix)]
    return "\n".join(kept).strip()


def run(
    text: str,
    config: PipelineConfig,
    invoker: ProcessInvoker,
    debug_dir: Path | None = None,
) -> str:
    """Translate ``text`` to Japanese. Empty input returns '' without spawning."""
    if not text:
        log.debug("Empty input, skipping translation")
        return ""

    result = invoker.run(build_spec(text, config, debug_dir))
    translated = strip_banners(result.text or "", config.banner_prefix)
    log.debug(f"Translated {len(text)} -> {len(translated)} chars")
    return translated
