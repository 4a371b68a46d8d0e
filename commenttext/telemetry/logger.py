"""Structured run logging and diagnostic dump utilities.

Responsibilities:
- Emit concise, deterministic stage-level runtime logs through `loguru`.
- Render full parse-failure context so operators see it even when callers
  later recover from the error.
"""

from __future__ import annotations

import platform
import re
import sys
import traceback
from typing import TextIO

from loguru import logger

from .. import __version__
from ..errors import MarkupParseError

SNIP_MARKER = "---8<---"

# Anything outside this set would break `key=value` splitting on spaces.
_UNSAFE_TOKEN_RE = re.compile(r"[^\w.:/-]")


def _context_suffix(context: dict[str, object]) -> str:
    """Render context as ` key=value` pairs sorted by key.

    Values are stripped, blanks become `none` and unsafe characters become `_`.
    """

    suffix = ""
    for key in sorted(context):
        value = str(context[key]).strip() or "none"
        suffix += f" {key}={_UNSAFE_TOKEN_RE.sub('_', value)}"
    return suffix


class RunLogger:
    """Emit deterministic phase logs for CLI-observable command activity.

    Each instance owns one plain-text `loguru` handler on its sink, so scanner
    warnings and parse dumps land next to the phase lines. Handlers installed
    by anyone else are left alone.
    """

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        self._handler_id = logger.add(
            sink or sys.stderr,
            format="{message}",
            level=level,
            colorize=False,
        )

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        line = f"[phase] level={level} stage={stage} event={event}"
        logger.log(level, line + _context_suffix(context))

    def log_stage_start(self, stage: str) -> None:
        self._emit("INFO", "start", stage)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str, **context: object) -> None:
        """Emit a stage failure naming the exception class, never its message."""

        self._emit("ERROR", "failure", stage, error_type=error_type, **context)

    def close(self) -> None:
        """Detach the handler installed by this logger."""

        logger.remove(self._handler_id)


def _error_trace(error: MarkupParseError) -> list[str]:
    """Return the parser-supplied location trace, or the Python traceback."""

    if error.trace:
        return list(error.trace)
    return [
        entry.strip().replace("\n", " ")
        for entry in traceback.format_tb(error.__traceback__)
    ]


def format_parse_failure(error: MarkupParseError, text: str) -> str:
    """Render the diagnostic dump for a failed markup parse."""

    trace = _error_trace(error)
    trace_block = "\tfrom " + "\n\tfrom ".join(trace) if trace else "\t(no trace)"
    return (
        f"While parsing markup, commenttext encountered a {type(error).__name__} "
        f"({error.error_type}):\n"
        "\n"
        f"{error.message}\n"
        f"{trace_block}\n"
        "\n"
        f"{SNIP_MARKER}\n"
        f"{text}\n"
        f"{SNIP_MARKER}\n"
        "\n"
        f"commenttext {__version__}\n"
        "\n"
        f"Python {platform.python_version()} ({platform.python_implementation()})\n"
    )


def log_parse_failure(error: MarkupParseError, text: str) -> None:
    """Write the parse-failure dump to the diagnostic log stream."""

    logger.error(format_parse_failure(error, text))
