"""Minimal prefix/suffix decomposition of two strings for error highlights."""

from __future__ import annotations

from typing import NamedTuple


class DiffResult(NamedTuple):
    """Common prefix, the two differing middles, and common suffix.

    `prefix + left + suffix` rebuilds the first input and
    `prefix + right + suffix` rebuilds the second.
    """

    prefix: str
    left: str
    right: str
    suffix: str


def get_difference(first: str, second: str) -> DiffResult:
    """Split two strings into common prefix, differing middles, and common suffix.

    The suffix is matched only within the tails left after the prefix, so the
    two windows never overlap: `get_difference("stress", "stresses")` yields
    `("stress", "", "es", "")`.
    """

    first_len = len(first)
    second_len = len(second)
    shortest = min(first_len, second_len)

    prefix_len = 0
    while prefix_len < shortest and first[prefix_len] == second[prefix_len]:
        prefix_len += 1

    suffix_len = 0
    max_suffix = shortest - prefix_len
    while (
        suffix_len < max_suffix
        and first[first_len - 1 - suffix_len] == second[second_len - 1 - suffix_len]
    ):
        suffix_len += 1

    return DiffResult(
        prefix=first[:prefix_len],
        left=first[prefix_len : first_len - suffix_len],
        right=second[prefix_len : second_len - suffix_len],
        suffix=first[first_len - suffix_len :],
    )
