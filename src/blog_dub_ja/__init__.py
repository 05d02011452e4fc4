"""Blog Dub JA -- turn a web article into Japanese narration.

Core modules:
    config    -- Pipeline configuration via pydantic-settings (BLOG_DUB_* env vars).
                 Frozen after construction; CLI flags passed as kwargs.
    cli       -- Click CLI entry point. Prints progress to stderr and only the
                 final audio path to stdout.
    runner    -- Pipeline orchestration: extract -> translate title ->
                 translate content -> synthesize, fail-fast.
    process   -- Subprocess invocation with piped stdin, captured or streamed
                 stdout, SpawnError/ExitError on failure.
    paths     -- Job layout: project dir, shared timestamp, debug tree.
    sanitize  -- Filename sanitization and default project names.
    errors    -- Exception hierarchy.

Subpackages:
    stages    -- One wrapper per external tool (extract, translate, synthesize).
"""

__version__ = "0.1.0"
