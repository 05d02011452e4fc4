"""Pipeline runner -- sequences the four stages for one job."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import click
from loguru import logger

from .config import PipelineConfig
from .errors import PipelineError, StageError
from .models import Article, PipelineJob, PipelineResult, Stage
from .paths import prepare_layout
from .process import ProcessInvoker
from .stages import extract, synthesize, translate

log = logger.bind(stage="runner")


def _write_text(path: Path, data: str) -> None:
    path.write_text(data, encoding="utf-8")
    log.info(f"Text saved: {path}")


class PipelineRunner:
    """Runs extract -> translate title -> translate content -> synthesize.

    Stages run strictly in order and the first failure ends the job. No
    cleanup happens on failure; whatever earlier stages wrote stays on disk.
    """

    def __init__(self, config: PipelineConfig, invoker: ProcessInvoker | None = None) -> None:
        self.config = config
        self.invoker = invoker or ProcessInvoker()

    def _stage(self, stage: Stage, func, *args, **kwargs):
        """Call a stage function, tagging any pipeline error with the stage."""
        try:
            return func(*args, **kwargs)
        except StageError:
            raise
        except PipelineError as exc:
            raise StageError(stage, exc) from exc

    def _translate_both(self, article: Article, job: PipelineJob) -> tuple[str, str]:
        layout = job.layout
        prompt = translate.title_prompt(article.title, self.config)

        if not self.config.parallel_translate:
            click.echo("\n[Phase 2] Translating title...", err=True)
            title_ja = self._stage(
                Stage.TRANSLATE_TITLE,
                translate.run,
                prompt,
                self.config,
                self.invoker,
                layout.debug_dir(Stage.TRANSLATE_TITLE),
            )
            click.echo("\n[Phase 3] Translating content...", err=True)
            content_ja = self._stage(
                Stage.TRANSLATE_CONTENT,
                translate.run,
                article.content,
                self.config,
                self.invoker,
                layout.debug_dir(Stage.TRANSLATE_CONTENT),
            )
            return title_ja, content_ja

        click.echo("\n[Phase 2-3] Translating title and content in parallel...", err=True)
        with ThreadPoolExecutor(max_workers=2) as executor:
            title_future = executor.submit(
                self._stage,
                Stage.TRANSLATE_TITLE,
                translate.run,
                prompt,
                self.config,
                self.invoker,
                layout.debug_dir(Stage.TRANSLATE_TITLE),
            )
            content_future = executor.submit(
                self._stage,
                Stage.TRANSLATE_CONTENT,
                translate.run,
                article.content,
                self.config,
                self.invoker,
                layout.debug_dir(Stage.TRANSLATE_CONTENT),
            )
            # Joined title first so a title failure is reported before content
            title_ja = title_future.result()
            content_ja = content_future.result()
        return title_ja, content_ja

    def _write_texts(self, job: PipelineJob, title_ja: str, content_ja: str) -> list[Path]:
        layout = job.layout
        written: list[Path] = []
        if layout.text_path is not None:
            _write_text(layout.text_path, f"Title: {title_ja}\n\n{content_ja}")
            written.append(layout.text_path)
        if layout.title_text_path is not None:
            _write_text(layout.title_text_path, title_ja)
            written.append(layout.title_text_path)
        if layout.content_text_path is not None:
            _write_text(layout.content_text_path, content_ja)
            written.append(layout.content_text_path)
        return written

    def run(self, job: PipelineJob) -> PipelineResult:
        """Run every stage for ``job``. Raises StageError on the first failure."""
        layout = job.layout
        prepare_layout(layout)

        log.info(f"Starting pipeline: url={job.url} project={job.project_name}")

        click.echo("\n[Phase 1] Extracting article...", err=True)
        article = self._stage(
            Stage.EXTRACT,
            extract.run,
            job.url,
            self.config,
            self.invoker,
            layout.debug_dir(Stage.EXTRACT),
        )

        title_ja, content_ja = self._translate_both(article, job)

        click.echo("\n[Phase 4] Generating audio...", err=True)
        produced = self._stage(
            Stage.SYNTHESIZE,
            synthesize.run,
            content_ja,
            layout.audio_path,
            self.config,
            self.invoker,
            layout.debug_dir(Stage.SYNTHESIZE),
        )

        text_paths = self._write_texts(job, title_ja, content_ja)

        return PipelineResult(
            article=article,
            title_ja=title_ja,
            content_ja=content_ja,
            text_paths=text_paths,
            audio_path=layout.audio_path if produced else None,
        )

    def execute(self, job: PipelineJob) -> int:
        """Run the job and report. Returns the process exit code.

        This is the single place pipeline errors are caught: one line goes
        to stderr and the job exits 1. On success the audio path is the
        only thing written to stdout so a calling process can read it.
        """
        try:
            result = self.run(job)
        except PipelineError as exc:
            message, _, detail = str(exc).partition("\n")
            if detail:
                log.debug(f"Error detail:\n{detail}")
            click.echo(f"Error: {message}", err=True)
            return 1

        click.echo("\nAll done!", err=True)
        for path in result.text_paths:
            click.echo(f"   Text:  {path}", err=True)
        if result.audio_path is not None:
            click.echo(f"   Audio: {result.audio_path}", err=True)
        else:
            click.echo("   Audio: (skipped, no narration text)", err=True)
        if job.layout.debug_root is not None:
            click.echo(f"   Debug info saved in: {job.layout.debug_root}", err=True)

        if result.audio_path is not None:
            click.echo(str(result.audio_path))
        return 0
