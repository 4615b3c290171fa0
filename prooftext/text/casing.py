"""Case classification and first-character case transforms.

Responsibilities:
- Classify the casing pattern of single words.
- Change the case of the first letter while leaving the rest untouched.

First-letter transforms use single-character mappings, so `ß` never expands
to `SS` there. Whole-string uppercasing lives on `Language.to_upper`.
"""

from __future__ import annotations

from enum import Enum


class CasePattern(str, Enum):
    """Casing pattern of a word."""

    ALL_UPPER = "all_upper"
    MIXED = "mixed"
    CAPITALIZED = "capitalized"
    CAMEL = "camel"
    LOWER = "lower"
    OTHER = "other"


def is_all_uppercase(text: str) -> bool:
    """Return whether no cased letter in `text` is lowercase."""

    return not any(char.islower() for char in text)


def is_not_all_lowercase(text: str) -> bool:
    """Return whether `text` contains at least one uppercase letter."""

    return any(char.isupper() for char in text)


def is_capitalized_word(text: str) -> bool:
    """Return whether `text` starts uppercase and has no later uppercase letter."""

    if not text or not text[0].isupper():
        return False
    return not any(char.isupper() for char in text[1:])


def is_mixed_case(text: str) -> bool:
    """Return whether `text` mixes cases beyond plain capitalization.

    `"MixedCase"` and `"iPod"` qualify, `"Word"`, `"ABC"` and `"abc"` do not.
    """

    return (
        not is_all_uppercase(text)
        and not is_capitalized_word(text)
        and is_not_all_lowercase(text)
    )


def is_camel_case(text: str) -> bool:
    """Return whether `text` has an inner lower-to-upper transition (`microRNA`)."""

    if is_all_uppercase(text) or is_capitalized_word(text):
        return False
    return any(
        text[index].isupper() and not text[index - 1].isupper()
        for index in range(1, len(text))
    )


def starts_with_uppercase(text: str) -> bool:
    """Return whether the first character of `text` is uppercase."""

    return text[:1].isupper()


def classify_case(text: str) -> CasePattern:
    """Return the most specific `CasePattern` for `text`."""

    if not any(char.isalpha() for char in text):
        return CasePattern.OTHER
    if is_all_uppercase(text):
        return CasePattern.ALL_UPPER
    if is_capitalized_word(text):
        return CasePattern.CAPITALIZED
    if is_camel_case(text):
        return CasePattern.CAMEL
    if is_mixed_case(text):
        return CasePattern.MIXED
    if not is_not_all_lowercase(text):
        return CasePattern.LOWER
    return CasePattern.OTHER


def uppercase_first_char(text: str | None) -> str | None:
    """Uppercase the first letter of `text`, skipping leading non-letters."""

    return _change_first_letter_case(text, to_upper=True)


def lowercase_first_char(text: str | None) -> str | None:
    """Lowercase the first letter of `text`, skipping leading non-letters."""

    return _change_first_letter_case(text, to_upper=False)


def _single_char_case(char: str, *, to_upper: bool) -> str:
    """Map one character, keeping it unchanged when the mapping would expand it."""

    mapped = char.upper() if to_upper else char.lower()
    if len(mapped) != 1:
        return char
    return mapped


def _change_first_letter_case(text: str | None, *, to_upper: bool) -> str | None:
    if not text:
        return text
    for index, char in enumerate(text):
        if char.isalpha():
            return text[:index] + _single_char_case(char, to_upper=to_upper) + text[index + 1 :]
    return text
