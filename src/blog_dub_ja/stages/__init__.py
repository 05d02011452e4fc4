"""Pipeline stages -- thin wrappers around the external tools.

Pipeline order: extract -> translate_title -> translate_content -> synthesize

Stages:
    extract -- Runs the readability tool with the article URL (plus
               --debug-dir when debugging) and captures stdout. The tool
               prints diagnostic lines around its JSON, so the object is
               recovered heuristically: first `{` followed by a quoted key
               up to the last `}`. No recoverable object raises ParseError
               carrying the raw output.
    translate -- Pipes text through the translation tool and captures the
                 result. Used twice per job: once for the title (wrapped
                 in an instruction prompt) and once for the body, each with
                 its own debug subdirectory. Lines starting with the
                 env-loader banner prefix are removed wherever they appear.
                 Empty input returns '' without spawning.
    synthesize -- Pipes narration into the engine-specific TTS tool with
                  -o <path> and an optional --model. stdout is inherited so
                  the tool's progress is visible. Exit 0 is success; the
                  audio file itself is not inspected. Empty text is skipped.

Each stage raises SpawnError/ExitError (from the invoker) or ParseError
and never recovers locally; the runner decides what happens next.
"""
