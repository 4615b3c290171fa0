"""Whitespace, digit, and token-spacing predicates.

Responsibilities:
- Recognize whitespace including the no-break variants common in word processors.
- Normalize whitespace in short values such as numbers with group separators.
- Decide whether a token needs a separating space in a given language.
"""

from __future__ import annotations

import re

from ..errors import MissingTextError
from ..languages import SENTENCE_PUNCTUATION, Language


# BOM, narrow no-break space, no-break space.
_EXTRA_WHITESPACE = frozenset({"\ufeff", "\u202f", "\u00a0"})
_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")
_ASCII_DIGITS = frozenset("0123456789")


def is_whitespace(text: str) -> bool:
    """Return whether every character of `text` is whitespace.

    Control characters such as `\\x01` (an office-suite field marker) and
    literal escape-looking text like `"\\\\u02"` are not whitespace.
    """

    return all(char.isspace() or char in _EXTRA_WHITESPACE for char in text)


def is_positive_number(char: str) -> bool:
    """Return whether `char` is a single ASCII decimal digit, `0` included."""

    return len(char) == 1 and char in _ASCII_DIGITS


def trim_whitespace(text: str | None) -> str:
    """Strip `text` and drop every inner run of two or more whitespace characters.

    A single inner space is significant (`"1 234,56"` keeps it) while a run is
    removed entirely (`"1  234,56"` becomes `"1234,56"`).

    Raises:
        MissingTextError: If `text` is `None`.
    """

    if text is None:
        raise MissingTextError(name="text", detail="`text` must not be None.")
    return _WHITESPACE_RUN_RE.sub("", text).strip()


def add_space(token: str, language: Language) -> str:
    """Return the separator to put before `token` when joining tokens.

    Sentence punctuation gets a space only when `language` requires one before
    it (French `!`); other tokens get a space in languages that separate words.
    """

    if token in SENTENCE_PUNCTUATION:
        return " " if token in language.space_before_punctuation else ""
    return " " if language.uses_word_spacing else ""
