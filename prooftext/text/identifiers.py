"""Locale-aware identifier derivation.

Responsibilities:
- Turn free-form rule or message text into an uppercase, whitespace-free id.
- Keep non-ASCII letters in their Unicode form unless the locale transliterates them.

Ids are not ASCII slugs: `to_id("üß çãÔ-où Ñ", pt) == "ÜSS_ÇÃÔ_OÙ_Ñ"`.
"""

from __future__ import annotations

import re

from ..languages import Language


_ESCAPES = {
    "'": "_Q_",
    "(": "_",
    ")": "",
    "-": "_",
}
_WHITESPACE_RUN_RE = re.compile(r"\s+")


def to_id(text: str, language: Language) -> str:
    """Return an uppercase identifier token for `text` in `language`.

    Each whitespace run becomes a single `_`. Apostrophes become `_Q_`, `(` and
    `-` become `_`, and `)` is removed. Leading and trailing underscores are
    trimmed from the result.
    """

    upper = language.to_upper(text.strip())
    if language.id_transliterations:
        upper = "".join(language.id_transliterations.get(char, char) for char in upper)
    escaped = "".join(_ESCAPES.get(char, char) for char in upper)
    return _WHITESPACE_RUN_RE.sub("_", escaped).strip("_")
