"""Shared precondition and parsing helpers for text and configuration values."""

from __future__ import annotations

from .errors import BlankTextError, MissingTextError


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def assure_set(value: str | None, name: str) -> str:
    """Return `value` if it is set, raising a typed error otherwise.

    Args:
        value: Text value that must be present and non-blank.
        name: Parameter name used in the error message.

    Raises:
        MissingTextError: If `value` is `None`.
        BlankTextError: If `value` is empty or whitespace-only.
    """

    if value is None:
        raise MissingTextError(name=name, detail=f"`{name}` must be set, got None.")
    if not value.strip():
        raise BlankTextError(name=name, detail=f"`{name}` must be set, got a blank value.")
    return value


def is_empty(value: str | None) -> bool:
    """Return whether `value` is `None` or the empty string."""

    return value is None or value == ""


def as_string(value: object) -> str | None:
    """Return `str(value)`, propagating `None` instead of rendering it."""

    if value is None:
        return None
    return str(value)


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as trimmed text, or `None` when nothing is left.

    Used for YAML and environment values where an empty or whitespace-only
    entry means "not configured".
    """

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Read a config flag such as `uses_word_spacing`.

    Accepts real booleans and the tokens `true/false`, `yes/no`, `on/off`,
    `1/0` in any case; returns `None` for anything else so the caller can
    report the offending field.
    """

    if isinstance(value, bool):
        return value
    token = normalize_optional_string(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None
