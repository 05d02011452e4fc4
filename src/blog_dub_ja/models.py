"""Core enums, constants, and value types for the dubbing pipeline.

Enums:
    Stage      -- Individual pipeline stage (extract through synthesize).
    TtsEngine  -- Speech synthesis backend selector (google, openai).

Value types (all frozen -- built once, never mutated after creation):
    ProcessSpec    -- One subprocess invocation (command, args, stdin, capture).
    StageResult    -- Outcome of one invocation (captured text or success flag).
    Article        -- Extracted article fields consumed by translation.
    JobLayout      -- Every path a job reads or writes, resolved up front.
    PipelineJob    -- URL + project name + layout for a single run.
    PipelineResult -- Translated texts and final artifact locations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from pathlib import Path
from typing import Any


class Stage(StrEnum):
    EXTRACT = "extract"
    TRANSLATE_TITLE = "translate_title"
    TRANSLATE_CONTENT = "translate_content"
    SYNTHESIZE = "synthesize"


class TtsEngine(StrEnum):
    GOOGLE = "google"
    OPENAI = "openai"


STAGE_ORDER: list[Stage] = [
    Stage.EXTRACT,
    Stage.TRANSLATE_TITLE,
    Stage.TRANSLATE_CONTENT,
    Stage.SYNTHESIZE,
]

# Debug subdirectory per stage, named after the tool that writes into it
DEBUG_SUBDIRS: dict[Stage, str] = {
    Stage.EXTRACT: "extract-readability",
    Stage.TRANSLATE_TITLE: "translate-to-ja-title",
    Stage.TRANSLATE_CONTENT: "translate-to-ja-content",
    Stage.SYNTHESIZE: "text-to-speech",
}


@dataclass(frozen=True)
class ProcessSpec:
    """A single external command invocation."""

    command: str
    args: tuple[str, ...] = ()
    stdin_body: str | None = None
    capture_stdout: bool = True

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]

    @property
    def input_length(self) -> int:
        return len(self.stdin_body) if self.stdin_body else 0


@dataclass(frozen=True)
class StageResult:
    """Outcome of a finished subprocess.

    Captured invocations carry the trimmed stdout in ``text``; streamed
    invocations only report ``success``.
    """

    exit_code: int
    text: str | None = None
    success: bool = True


@dataclass(frozen=True)
class Article:
    title: str
    content: str
    domain: str
    url: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any], fallback_url: str = "") -> Article:
        """Build an Article from the extraction tool's JSON object.

        Missing fields become empty strings; a missing ``url`` falls back
        to the URL that was requested.
        """

        def _text(key: str) -> str:
            value = payload.get(key)
            return "" if value is None else str(value)

        return cls(
            title=_text("title"),
            content=_text("content"),
            domain=_text("domain"),
            url=_text("url") or fallback_url,
        )


@dataclass(frozen=True)
class JobLayout:
    """All filesystem locations for one job, computed once at job start."""

    project_dir: Path
    timestamp: str
    audio_path: Path
    text_path: Path | None = None
    title_text_path: Path | None = None
    content_text_path: Path | None = None
    debug_root: Path | None = None
    debug_dirs: dict[Stage, Path] = field(default_factory=dict)

    def debug_dir(self, stage: Stage) -> Path | None:
        return self.debug_dirs.get(stage)


@dataclass(frozen=True)
class PipelineJob:
    url: str
    project_name: str
    layout: JobLayout
    created_at: datetime


@dataclass(frozen=True)
class PipelineResult:
    """Translated texts plus where every artifact ended up."""

    article: Article
    title_ja: str
    content_ja: str
    text_paths: list[Path]
    audio_path: Path | None
