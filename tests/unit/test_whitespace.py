"""Unit tests for whitespace, digit, and spacing helpers."""

from __future__ import annotations

import pytest

from prooftext.errors import MissingTextError
from prooftext.languages import Language
from prooftext.text.whitespace import add_space, is_positive_number, is_whitespace, trim_whitespace


@pytest.mark.parametrize("text", ["\ufeff", "  ", "\t", "\u2002", "\u00a0", "\u202f", " \u00a0\n"])
def test_is_whitespace_true(text: str) -> None:
    """Unicode whitespace and no-break variants are whitespace."""

    assert is_whitespace(text) is True


@pytest.mark.parametrize("text", ["abc", "\\u02", "\u0001", "\u0002", " a "])
def test_is_whitespace_false(text: str) -> None:
    """Field markers and literal escape text are not whitespace."""

    assert is_whitespace(text) is False


def test_is_positive_number() -> None:
    """Any single ASCII digit counts, including zero."""

    assert is_positive_number("3") is True
    assert is_positive_number("0") is True
    assert is_positive_number("a") is False
    assert is_positive_number("12") is False
    assert is_positive_number("٣") is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", ""),
        (" ", ""),
        (" \nXX\t Y", "XXY"),
        (" \r\nXX\t Y", "XXY"),
        ("word", "word"),
        ("1 234,56", "1 234,56"),
        ("1  234,56", "1234,56"),
    ],
)
def test_trim_whitespace(value: str, expected: str) -> None:
    """Single inner spaces survive while runs are removed entirely."""

    assert trim_whitespace(value) == expected


def test_trim_whitespace_rejects_none() -> None:
    """`None` is reported as missing, not as blank."""

    with pytest.raises(MissingTextError):
        trim_whitespace(None)


def test_add_space_for_demo_language(demo: Language) -> None:
    """Words get a space and ordinary punctuation does not."""

    assert add_space("word", demo) == " "
    assert add_space(",", demo) == ""
    assert add_space("!", demo) == ""


def test_add_space_depends_on_language(french: Language, german: Language) -> None:
    """French puts a space before `!` where German does not."""

    assert add_space(".", french) == ""
    assert add_space(".", german) == ""
    assert add_space("!", french) == " "
    assert add_space("!", german) == ""


def test_add_space_without_word_spacing() -> None:
    """Languages written without spaces never need a separator."""

    japanese = Language(code="ja", uses_word_spacing=False)
    assert add_space("単語", japanese) == ""
