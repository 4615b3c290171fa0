"""Domain exceptions for text preconditions, stream decoding, and CLI diagnostics."""

from __future__ import annotations


class TextArgumentError(ValueError):
    """Raised when a required text argument does not satisfy its precondition."""

    def __init__(self, *, name: str, detail: str) -> None:
        """Initialize an argument error scoped to one named parameter."""

        super().__init__(detail)
        self.name = name
        self.detail = detail


class BlankTextError(TextArgumentError):
    """Raised when a required text argument is empty or whitespace-only."""


class MissingTextError(TextArgumentError, TypeError):
    """Raised when a required text argument is `None`.

    Subclasses `TypeError` as well, so callers can tell an absent value apart
    from a blank one without inspecting messages.
    """


class StreamDecodeError(OSError):
    """Raised when a stream cannot be decoded with the requested encoding."""

    def __init__(self, *, encoding: str, detail: str) -> None:
        """Initialize a decode error for one encoding name."""

        super().__init__(detail)
        self.encoding = encoding
        self.detail = detail


class LanguageNotFoundError(KeyError):
    """Raised when a language code is not known to a registry."""

    def __init__(self, code: str) -> None:
        """Initialize the lookup error with the unknown code."""

        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown language code `{self.code}`."


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
