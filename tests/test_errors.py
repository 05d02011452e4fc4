"""Tests for errors.py -- exception hierarchy and attributes."""

import click

from blog_dub_ja.errors import (
    ExitError,
    ParseError,
    PipelineError,
    SpawnError,
    StageError,
    UsageError,
)
from blog_dub_ja.models import Stage


class TestExceptionHierarchy:
    def test_all_inherit_from_pipeline_error(self):
        assert issubclass(SpawnError, PipelineError)
        assert issubclass(ExitError, PipelineError)
        assert issubclass(ParseError, PipelineError)
        assert issubclass(StageError, PipelineError)

    def test_usage_error_is_click_error_with_exit_1(self):
        assert issubclass(UsageError, click.UsageError)
        assert UsageError("missing").exit_code == 1


class TestSpawnError:
    def test_attributes(self):
        err = SpawnError(command="npx", reason="No such file or directory")
        assert err.command == "npx"
        assert err.reason == "No such file or directory"
        assert "npx" in str(err)


class TestExitError:
    def test_attributes(self):
        err = ExitError(command="npx", exit_code=2)
        assert err.exit_code == 2
        assert "code 2" in str(err)


class TestParseError:
    def test_raw_output_in_message(self):
        err = ParseError("no JSON", raw_output="[env] booting")
        assert err.raw_output == "[env] booting"
        assert "[env] booting" in str(err)


class TestStageError:
    def test_wraps_exit_error(self):
        err = StageError(Stage.EXTRACT, ExitError("npx", 2))
        assert err.stage == Stage.EXTRACT
        assert err.exit_code == 2
        assert str(err).startswith("extract failed:")

    def test_exit_code_none_for_parse_error(self):
        err = StageError(Stage.EXTRACT, ParseError("bad", "raw"))
        assert err.exit_code is None
