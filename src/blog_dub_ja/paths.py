"""Output path resolution -- project directory, timestamped artifacts, debug tree.

Every path a job touches is computed once by ``resolve_job`` and frozen
into a JobLayout. Precedence for each artifact:

    explicit caller path  >  auto path under --base-dir  >  auto path under output_dir

Auto paths look like ``<root>/<project>/<project>_<YYYYMMDD_HHMMSS>.<ext>``.
All artifacts of one job share a single timestamp.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from .models import DEBUG_SUBDIRS, STAGE_ORDER, JobLayout, PipelineJob
from .sanitize import default_project_name, sanitize_name

if TYPE_CHECKING:
    from .config import PipelineConfig

log = logger.bind(stage="paths")


def make_timestamp(now: datetime) -> str:
    """Local time, second resolution: YYYYMMDD_HHMMSS."""
    return now.strftime("%Y%m%d_%H%M%S")


def resolve_job(
    config: PipelineConfig,
    url: str,
    project_name: str | None = None,
    *,
    mp3_output: Path | None = None,
    txt_output: Path | None = None,
    title_txt: Path | None = None,
    content_txt: Path | None = None,
    debug_dir: Path | None = None,
    debug: bool = False,
    base_dir: Path | None = None,
    now: datetime | None = None,
) -> PipelineJob:
    """Build the immutable job description for one run.

    Passing ``title_txt`` or ``content_txt`` switches the text artifact to
    separate-file mode; the combined file is then only written when
    ``txt_output`` is also given. ``debug_dir`` wins over ``debug``.
    Nothing is created on disk here -- see ``prepare_layout``.
    """
    if now is None:
        now = datetime.now()

    name = project_name or default_project_name(url, int(now.timestamp() * 1000))
    clean_name = sanitize_name(name) or "job"
    root = base_dir if base_dir is not None else config.output_dir
    project_dir = root / clean_name
    timestamp = make_timestamp(now)

    def _auto(extension: str) -> Path:
        return project_dir / f"{clean_name}_{timestamp}.{extension}"

    separate = title_txt is not None or content_txt is not None
    if txt_output is not None:
        text_path = txt_output
    elif separate:
        text_path = None
    else:
        text_path = _auto("txt")

    if debug_dir is not None:
        debug_root = debug_dir
    elif debug:
        debug_root = project_dir / f"debug_{timestamp}"
    else:
        debug_root = None

    debug_dirs = {}
    if debug_root is not None:
        debug_dirs = {stage: debug_root / DEBUG_SUBDIRS[stage] for stage in STAGE_ORDER}

    layout = JobLayout(
        project_dir=project_dir,
        timestamp=timestamp,
        audio_path=mp3_output if mp3_output is not None else _auto("mp3"),
        text_path=text_path,
        title_text_path=title_txt,
        content_text_path=content_txt,
        debug_root=debug_root,
        debug_dirs=debug_dirs,
    )
    log.debug(f"Resolved layout for {clean_name}: {layout}")

    return PipelineJob(
        url=url,
        project_name=name,
        layout=layout,
        created_at=now,
    )


def prepare_layout(layout: JobLayout) -> None:
    """Create the project directory, artifact parents, and debug subdirectories.

    Idempotent. Existing directories (including debug output from earlier
    runs) are left untouched.
    """
    layout.project_dir.mkdir(parents=True, exist_ok=True)

    for path in (
        layout.audio_path,
        layout.text_path,
        layout.title_text_path,
        layout.content_text_path,
    ):
        if path is not None:
            path.parent.mkdir(parents=True, exist_ok=True)

    for stage_dir in layout.debug_dirs.values():
        stage_dir.mkdir(parents=True, exist_ok=True)

    log.info(f"Project directory ready: {layout.project_dir} (timestamp: {layout.timestamp})")
    if layout.debug_root is not None:
        log.info(f"Debug output: {layout.debug_root}")
