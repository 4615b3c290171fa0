"""Title-casing with per-language exception words."""

from __future__ import annotations

import re

from ..languages import GLOBAL_TITLE_EXCEPTIONS, Language
from .casing import uppercase_first_char


_WORD_SPLIT_RE = re.compile(r"(\s+)")
# Punctuation around a word core, e.g. `"of,"` or `«the»`.
_WORD_CORE_RE = re.compile(r"^(\W*)(.*?)(\W*)$", re.DOTALL)


def titlecase_global(text: str, language: Language | None = None) -> str:
    """Capitalize every word except the language's exception words.

    Exception words are lowercased, except the first word, which is always
    capitalized: `"the lord of the rings"` becomes `"The Lord of the Rings"`.
    Punctuation attached to a word does not hide it from the exception set.
    Without a language, a merged multi-language exception set is used.
    """

    exceptions = GLOBAL_TITLE_EXCEPTIONS if language is None else language.title_exceptions
    parts = _WORD_SPLIT_RE.split(text)
    seen_word = False
    for index, part in enumerate(parts):
        if not part or part.isspace():
            continue
        leading, core, trailing = _WORD_CORE_RE.match(part).groups()
        if seen_word and core.lower() in exceptions:
            parts[index] = leading + core.lower() + trailing
        else:
            parts[index] = uppercase_first_char(part)
        seen_word = True
    return "".join(parts)


def all_start_with_lowercase(text: str) -> bool:
    """Return whether the first letter of every word is lowercase.

    Leading non-letters such as quotes are skipped; words without letters are ignored.
    """

    for word in text.split():
        first_letter = next((char for char in word if char.isalpha()), None)
        if first_letter is not None and not first_letter.islower():
            return False
    return True
