"""Tests for config.py -- defaults, env var overrides, engine resolution."""

from pathlib import Path

import pydantic
import pytest

from blog_dub_ja.config import PipelineConfig
from blog_dub_ja.models import TtsEngine

# Env vars that pydantic-settings reads -- must be cleaned for default tests
_CONFIG_ENV_VARS = [
    "BLOG_DUB_LAUNCHER", "BLOG_DUB_EXTRACT_CMD", "BLOG_DUB_TRANSLATE_CMD",
    "BLOG_DUB_TTS_ENGINE", "BLOG_DUB_GOOGLE_TTS_CMD", "BLOG_DUB_GOOGLE_TTS_MODEL",
    "BLOG_DUB_OPENAI_TTS_CMD", "BLOG_DUB_OPENAI_TTS_MODEL", "BLOG_DUB_OUTPUT_DIR",
    "BLOG_DUB_TITLE_PROMPT", "BLOG_DUB_BANNER_PREFIX", "BLOG_DUB_PARALLEL_TRANSLATE",
    "BLOG_DUB_LOG_LEVEL", "BLOG_DUB_LOG_FILE",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove pipeline env vars so defaults tests see actual defaults."""
    for var in _CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_default_values(self):
        config = PipelineConfig(_env_file=None)
        assert config.launcher == "npx"
        assert config.extract_cmd == "extract-readability"
        assert config.translate_cmd == "translate-to-ja"
        assert config.tts_engine == TtsEngine.GOOGLE
        assert config.banner_prefix == "[dotenv@"
        assert config.parallel_translate is False
        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_default_output_dir(self):
        config = PipelineConfig(_env_file=None)
        assert config.output_dir == Path("outputs")


class TestEngineResolution:
    def test_google_has_no_model(self):
        config = PipelineConfig(_env_file=None)
        assert config.tts_cmd == "tts-google"
        assert config.tts_model == ""

    def test_openai_has_model(self):
        config = PipelineConfig(_env_file=None, tts_engine=TtsEngine.OPENAI)
        assert config.tts_cmd == "text-to-speech"
        assert config.tts_model == "gpt-4o-mini-tts"


class TestOverrides:
    def test_constructor_override(self):
        config = PipelineConfig(_env_file=None, launcher="bunx", parallel_translate=True)
        assert config.launcher == "bunx"
        assert config.parallel_translate is True

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("BLOG_DUB_TTS_ENGINE", "openai")
        monkeypatch.setenv("BLOG_DUB_PARALLEL_TRANSLATE", "true")
        config = PipelineConfig(_env_file=None)
        assert config.tts_engine == TtsEngine.OPENAI
        assert config.parallel_translate is True

    def test_path_from_env(self, monkeypatch):
        monkeypatch.setenv("BLOG_DUB_OUTPUT_DIR", "/tmp/dub-out")
        config = PipelineConfig(_env_file=None)
        assert config.output_dir == Path("/tmp/dub-out")

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("BLOG_DUB_LAUNCHER=pnpx\n")
        config = PipelineConfig(_env_file=env_file)
        assert config.launcher == "pnpx"

    def test_invalid_engine_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PipelineConfig(_env_file=None, tts_engine="azure")


class TestFrozen:
    def test_assignment_rejected(self):
        config = PipelineConfig(_env_file=None)
        with pytest.raises(pydantic.ValidationError):
            config.launcher = "other"
