"""Stage 1: Extract -- run the readability tool and recover its JSON payload."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

from loguru import logger

from ..errors import ParseError
from ..models import Article, ProcessSpec

if TYPE_CHECKING:
    from ..config import PipelineConfig
    from ..process import ProcessInvoker

log = logger.bind(stage="extract")

# An opening brace directly followed by a key; skips stray braces in log lines
_JSON_START = re.compile(r'\{\s*"')


def build_spec(url: str, config: PipelineConfig, debug_dir: Path | None = None) -> ProcessSpec:
    args = [config.extract_cmd, url]
    if debug_dir is not None:
        args += ["--debug-dir", str(debug_dir)]
    return ProcessSpec(command=config.launcher, args=tuple(args), capture_stdout=True)


def recover_json(raw: str) -> dict[str, Any]:
    """Best-effort recovery of one JSON object from noisy tool output.

    The object starts at the first ``{`` followed by optional whitespace
    and a double quote, and ends at the last ``}`` in the text. Output
    where either boundary is missing, or the span does not decode, raises
    ParseError with the raw output attached.
    """
    match = _JSON_START.search(raw)
    end = raw.rfind("}")
    if match is None or end == -1 or end < match.start():
        raise ParseError("Extraction output does not contain a JSON object", raw)

    try:
        payload = json.loads(raw[match.start() : end + 1])
    except json.JSONDecodeError as exc:
        raise ParseError(f"Failed to parse extraction result: {exc}", raw) from exc

    if not isinstance(payload, dict):
        raise ParseError("Extraction result is not a JSON object", raw)
    return payload


def run(
    url: str,
    config: PipelineConfig,
    invoker: ProcessInvoker,
    debug_dir: Path | None = None,
) -> Article:
    """Extract the article at ``url``.

    Raises SpawnError/ExitError from the invoker, ParseError when the
    output holds no usable JSON.
    """
    result = invoker.run(build_spec(url, config, debug_dir))
    article = Article.from_payload(recover_json(result.text or ""), fallback_url=url)

    log.info(f"Title: {article.title}")
    log.info(f"Domain: {article.domain}")
    log.debug(f"Content: {len(article.content)} chars")
    return article
