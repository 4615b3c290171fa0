"""Rewrite text for speller consumption without moving offsets.

Responsibilities:
- Blank out characters a dictionary lookup cannot process (emoji and symbols).
- Preserve the UTF-16 code-unit length of the input, so match positions
  reported by a UTF-16 based speller map straight back to the original text.

Key public functions:
- `string_for_speller`: blanked text.
- `speller_text`: blanked text plus an explicit code-point offset table.
"""

from __future__ import annotations

from dataclasses import dataclass
import unicodedata


_ZERO_WIDTH_JOINER = "\u200d"
_COMBINING_ENCLOSING_KEYCAP = "\u20e3"
_BMP_LIMIT = 0xFFFF


@dataclass(frozen=True, slots=True)
class SpellerText:
    """Speller-ready text with offsets back into the original.

    Attributes:
        text: Normalized text; its UTF-16 length equals the original's.
        offsets: For each code point index of the original text, the index of
            its first replacement character in `text`, plus one trailing entry
            for the end of text.
    """

    text: str
    offsets: tuple[int, ...]

    def to_normalized(self, original_index: int) -> int:
        """Map a code-point offset in the original text to an offset in `text`."""

        return self.offsets[original_index]

    def to_original(self, normalized_index: int) -> int:
        """Map an offset in `text` back to the code point it was derived from."""

        low, high = 0, len(self.offsets) - 1
        while low < high:
            middle = (low + high + 1) // 2
            if self.offsets[middle] <= normalized_index:
                low = middle
            else:
                high = middle - 1
        return low


def utf16_length(text: str) -> int:
    """Return the number of UTF-16 code units needed to encode `text`."""

    return sum(2 if ord(char) > _BMP_LIMIT else 1 for char in text)


def is_speller_blank(char: str) -> bool:
    """Return whether a speller cannot process `char` and it must be blanked."""

    if ord(char) > _BMP_LIMIT:
        return True
    if char in (_ZERO_WIDTH_JOINER, _COMBINING_ENCLOSING_KEYCAP):
        return True
    if "\ufe00" <= char <= "\ufe0f":
        return True
    return unicodedata.category(char) in ("So", "Cs")


def string_for_speller(text: str) -> str:
    """Replace unprocessable characters with one space per UTF-16 code unit.

    A supplementary-plane character such as `🧡` becomes two spaces. Letters and
    ordinary combining marks (e.g. Arabic harakat) are kept.
    """

    return speller_text(text).text


def speller_text(text: str) -> SpellerText:
    """Return speller-ready text together with its offset table."""

    parts: list[str] = []
    offsets: list[int] = []
    position = 0
    for char in text:
        offsets.append(position)
        if is_speller_blank(char):
            width = 2 if ord(char) > _BMP_LIMIT else 1
            parts.append(" " * width)
            position += width
        else:
            parts.append(char)
            position += 1
    offsets.append(position)
    return SpellerText(text="".join(parts), offsets=tuple(offsets))
