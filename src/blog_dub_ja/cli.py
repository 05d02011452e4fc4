"""CLI entry point for blog-dub-ja."""

import os
import sys
from pathlib import Path

import click
from loguru import logger
from pydantic import ValidationError

from .config import PipelineConfig
from .errors import UsageError
from .models import TtsEngine
from .paths import resolve_job
from .runner import PipelineRunner

log = logger.bind(stage="cli")


def _find_env_file() -> Path | None:
    """Look for .env in cwd."""
    candidate = Path.cwd() / ".env"
    if candidate.is_file():
        return candidate
    return None


def _load_env_file(env_file: Path) -> None:
    """Load a shell-style .env file into os.environ (without overriding).

    The external tools read their API credentials from the environment,
    so they need to be exported here rather than only parsed into config.
    """
    for line in env_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):]
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        value = value.strip()
        # Strip quotes
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        # Don't override existing env vars (CLI > env > file)
        if key not in os.environ:
            os.environ[key] = value


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value else None


class _DubCommand(click.Command):
    """Command whose argument parsing errors exit with status 1, not click's 2."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = UsageError.exit_code
            raise


@click.command(cls=_DubCommand)
@click.argument("url", required=False)
@click.option("-o", "--output", "project_name", default=None, help="Project name (used for the output folder).")
@click.option("-m", "--mp3-output", default=None, help="Explicit path for the audio file.")
@click.option("--txt-output", default=None, help="Explicit path for the combined title + content text file.")
@click.option("-t", "--title-txt", default=None, help="Write the translated title to this file.")
@click.option("-c", "--content-txt", default=None, help="Write the translated content to this file.")
@click.option("-d", "--debug-dir", default=None, help="Directory for per-stage debug output.")
@click.option("--debug", is_flag=True, help="Save debug output under the project directory.")
@click.option(
    "--tts",
    type=click.Choice([e.value for e in TtsEngine]),
    default=None,
    help="Speech synthesis engine (default: google).",
)
@click.option("--base-dir", default=None, help="Root directory for auto-generated output.")
@click.option(
    "--parallel-translate",
    is_flag=True,
    help="Translate title and content concurrently.",
)
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to .env file with tool credentials.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    url: str | None,
    project_name: str | None,
    mp3_output: str | None,
    txt_output: str | None,
    title_txt: str | None,
    content_txt: str | None,
    debug_dir: str | None,
    debug: bool,
    tts: str | None,
    base_dir: str | None,
    parallel_translate: bool,
    env_file: str | None,
    verbose: bool,
) -> None:
    """Turn a blog article into Japanese narration (text + audio)."""
    if not url:
        raise UsageError("Missing argument 'URL'.")

    # Load .env into environment before PipelineConfig reads env vars
    env_path = Path(env_file) if env_file else _find_env_file()
    if env_path is not None:
        _load_env_file(env_path)

    # Pass CLI flags as kwargs to avoid env pollution
    config_kwargs: dict[str, object] = {}
    if env_file:
        config_kwargs["_env_file"] = env_file
    if tts:
        config_kwargs["tts_engine"] = TtsEngine(tts)
    if parallel_translate:
        config_kwargs["parallel_translate"] = True
    if verbose:
        config_kwargs["log_level"] = "DEBUG"

    try:
        config = PipelineConfig(**config_kwargs)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise UsageError(f"Invalid configuration: {exc}") from exc
    config.setup_logging()
    if env_path is not None:
        log.debug(f"Loaded env from {env_path}")

    job = resolve_job(
        config,
        url,
        project_name,
        mp3_output=_optional_path(mp3_output),
        txt_output=_optional_path(txt_output),
        title_txt=_optional_path(title_txt),
        content_txt=_optional_path(content_txt),
        debug_dir=_optional_path(debug_dir),
        debug=debug,
        base_dir=_optional_path(base_dir),
    )

    log.debug(f"tts={config.tts_engine} project={job.project_name}")
    runner = PipelineRunner(config=config)
    sys.exit(runner.execute(job))
