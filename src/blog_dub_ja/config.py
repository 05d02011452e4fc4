"""Pipeline configuration via pydantic-settings (.env + BLOG_DUB_* env vars)."""

import sys
from pathlib import Path

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import TtsEngine


class PipelineConfig(BaseSettings):
    """All pipeline configuration with layered resolution:
    .env file < environment variables < constructor kwargs.

    Frozen once built; the CLI constructs a single instance and hands it
    to the runner and every stage.
    """

    model_config = SettingsConfigDict(
        env_prefix="BLOG_DUB_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    # -- External tools (resolved through the launcher, e.g. `npx <tool>`) --
    launcher: str = "npx"
    extract_cmd: str = "extract-readability"
    translate_cmd: str = "translate-to-ja"

    # -- Speech synthesis --
    tts_engine: TtsEngine = TtsEngine.GOOGLE
    google_tts_cmd: str = "tts-google"
    google_tts_model: str = ""  # tts-google picks its own voice
    openai_tts_cmd: str = "text-to-speech"
    openai_tts_model: str = "gpt-4o-mini-tts"

    # -- Output --
    output_dir: Path = Path("outputs")

    # -- Translation --
    title_prompt: str = "Translate this title to Japanese: {title}"
    banner_prefix: str = "[dotenv@"
    parallel_translate: bool = False

    # -- Logging --
    log_level: str = "INFO"
    log_file: Path | None = None

    @property
    def tts_cmd(self) -> str:
        """Synthesis tool for the selected engine."""
        if self.tts_engine == TtsEngine.OPENAI:
            return self.openai_tts_cmd
        return self.google_tts_cmd

    @property
    def tts_model(self) -> str:
        """Model/voice flag value for the selected engine ('' = omit flag)."""
        if self.tts_engine == TtsEngine.OPENAI:
            return self.openai_tts_model
        return self.google_tts_model

    def setup_logging(self) -> None:
        """Configure loguru for the pipeline.

        Everything goes to stderr; stdout is reserved for the final
        audio path so callers can capture it.
        """
        logger.remove()  # Remove default stderr handler

        log_format = (
            "{time:HH:mm:ss} | {level:<8} | {extra[stage]:<10} | {message}"
        )

        def _default_extra(record):
            record["extra"].setdefault("stage", "")
            return True

        logger.add(
            sys.stderr,
            format=log_format,
            level=self.log_level.upper(),
            filter=_default_extra,
        )

        if self.log_file is not None:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                str(self.log_file),
                format=log_format,
                level="DEBUG",
                rotation="10 MB",
                retention="30 days",
                filter=_default_extra,
            )
