"""Tests for models.py -- enums, stage ordering, value types."""

import dataclasses

import pytest

from blog_dub_ja.models import (
    DEBUG_SUBDIRS,
    STAGE_ORDER,
    Article,
    ProcessSpec,
    Stage,
    TtsEngine,
)


class TestStage:
    def test_all_stages(self):
        assert len(Stage) == 4
        assert Stage.EXTRACT == "extract"
        assert Stage.SYNTHESIZE == "synthesize"

    def test_order(self):
        assert STAGE_ORDER == [
            Stage.EXTRACT,
            Stage.TRANSLATE_TITLE,
            Stage.TRANSLATE_CONTENT,
            Stage.SYNTHESIZE,
        ]

    def test_every_stage_has_debug_subdir(self):
        assert set(DEBUG_SUBDIRS) == set(Stage)
        assert len(set(DEBUG_SUBDIRS.values())) == 4


class TestTtsEngine:
    def test_from_string(self):
        assert TtsEngine("openai") is TtsEngine.OPENAI


class TestProcessSpec:
    def test_argv(self):
        spec = ProcessSpec("npx", ("translate-to-ja", "--debug-dir", "/d"))
        assert spec.argv == ["npx", "translate-to-ja", "--debug-dir", "/d"]

    def test_input_length(self):
        assert ProcessSpec("npx").input_length == 0
        assert ProcessSpec("npx", stdin_body="abc").input_length == 3

    def test_frozen(self):
        spec = ProcessSpec("npx")
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.command = "node"


class TestArticle:
    def test_from_payload(self):
        article = Article.from_payload(
            {"title": "T", "content": "C", "domain": "example.com", "url": "https://example.com/a"}
        )
        assert article == Article("T", "C", "example.com", "https://example.com/a")

    def test_missing_fields_default_empty(self):
        article = Article.from_payload({"title": "T"}, fallback_url="https://x.io")
        assert article.content == ""
        assert article.domain == ""
        assert article.url == "https://x.io"

    def test_null_fields_default_empty(self):
        article = Article.from_payload({"title": None, "content": "C"})
        assert article.title == ""
