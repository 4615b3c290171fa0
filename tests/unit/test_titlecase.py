"""Unit tests for title-casing and word-initial case checks."""

from __future__ import annotations

import pytest

from prooftext.languages import Language, get_language
from prooftext.text.titlecase import all_start_with_lowercase, titlecase_global


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("the lord of the rings", "The Lord of the Rings"),
        ("rhythm And blues", "Rhythm and Blues"),
        ("memória de leitura", "Memória de Leitura"),
        ("fond du lac", "Fond du Lac"),
        ("el niño de Las islas", "El Niño de las Islas"),
    ],
)
def test_titlecase_global(value: str, expected: str) -> None:
    """Exception words stay lowercase except in first position."""

    assert titlecase_global(value) == expected


def test_titlecase_keeps_whitespace_layout() -> None:
    """Original separators are preserved."""

    assert titlecase_global("  of  mice\tand men") == "  Of  Mice\tand Men"


def test_titlecase_uses_language_exceptions() -> None:
    """A language replaces the global exception set."""

    german = get_language("de")
    assert titlecase_global("herr der ringe", german) == "Herr der Ringe"
    assert titlecase_global("lord of rings", german) == "Lord Of Rings"
    assert titlecase_global("lord of rings", Language(code="zz", title_exceptions=frozenset())) == (
        "Lord Of Rings"
    )


def test_all_start_with_lowercase() -> None:
    """Every word must start lowercase."""

    assert all_start_with_lowercase("the lord of the rings")
    assert not all_start_with_lowercase("the Fellowship of the Ring")
    assert all_start_with_lowercase("bilbo")
    assert not all_start_with_lowercase("Baggins")


def test_titlecase_matches_exception_words_with_attached_punctuation() -> None:
    """Commas, quotes and brackets around a word do not hide an exception word."""

    assert titlecase_global("war and, peace") == "War and, Peace"
    assert titlecase_global("tales OF, the «THE» city") == "Tales of, the «the» City"
    assert titlecase_global("(the) end") == "(The) End"


def test_all_start_with_lowercase_skips_leading_punctuation() -> None:
    """The first letter is checked, not the first character."""

    assert all_start_with_lowercase("«the» lord")
    assert all_start_with_lowercase("'bilbo' 42 baggins")
    assert not all_start_with_lowercase("«The» lord")
