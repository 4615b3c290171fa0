"""Structured command logging utilities.

Responsibilities:
- Emit concise, deterministic phase-level runtime logs through `loguru`.
- Enable the library's own debug records only when a CLI sink is configured.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


_SAFE_CONTEXT_PUNCTUATION = frozenset("-_.:/")


def _context_token(value: object) -> str:
    """Render a context value such as a language code or encoding as one log token.

    Characters outside letters, digits and `-_.:/` become `_`, so text samples
    with spaces stay a single token; blank values render as `none`.
    """

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        char if char.isalnum() or char in _SAFE_CONTEXT_PUNCTUATION else "_" for char in raw
    )


def _context_suffix(context: dict[str, object]) -> str:
    """Render `key=value` pairs sorted by key, prefixed with a space when non-empty."""

    if not context:
        return ""
    return " " + " ".join(f"{key}={_context_token(context[key])}" for key in sorted(context))


class RunLogger:
    """Emit deterministic phase logs for CLI commands."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route `loguru` output to `sink` and enable `prooftext` records."""

        self._sink = sink or sys.stderr
        logger.remove()
        logger.add(self._sink, format="{message}", level=level, colorize=False)
        logger.enable("prooftext")

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[phase] level={level} stage={stage} event={event}{_context_suffix(context)}"
        logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start runtime event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete runtime event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure runtime event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
