"""Locale capabilities consumed by the text primitives.

Responsibilities:
- Describe per-language casing, title-case, and spacing rules as plain data.
- Provide a registry of built-in languages that configuration can extend.

Key types:
- `Language`: immutable locale capability passed into locale-aware functions.
- `LanguageRegistry`: lookup table from short language codes to `Language`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

from .errors import LanguageNotFoundError


SENTENCE_PUNCTUATION = frozenset({".", ",", ";", ":", "?", "!"})

# Words kept lowercase by title-casing when no language is given.
GLOBAL_TITLE_EXCEPTIONS = frozenset(
    {
        "a", "an", "and", "as", "at", "but", "by", "for", "from", "in", "into",
        "nor", "of", "on", "or", "the", "to", "with",
        "da", "das", "de", "del", "della", "der", "des", "di", "do", "dos", "du",
        "e", "et", "la", "las", "le", "les", "los", "und", "van", "von", "y",
    }
)


@dataclass(frozen=True, slots=True)
class Language:
    """Locale capability for casing, identifiers, and spacing.

    Attributes:
        code: Short language code such as `de` or `fr`.
        name: Human-readable language name.
        uppercase_overrides: Characters whose uppercase form replaces the
            default Unicode mapping for this locale.
        id_transliterations: Uppercase letters rewritten to ASCII sequences
            when deriving identifiers.
        title_exceptions: Lowercase words that title-casing leaves lowercase.
        space_before_punctuation: Punctuation marks preceded by a space.
        uses_word_spacing: Whether words are separated by spaces.
    """

    code: str
    name: str = ""
    uppercase_overrides: Mapping[str, str] = field(default_factory=dict, hash=False)
    id_transliterations: Mapping[str, str] = field(default_factory=dict, hash=False)
    title_exceptions: frozenset[str] = GLOBAL_TITLE_EXCEPTIONS
    space_before_punctuation: frozenset[str] = frozenset()
    uses_word_spacing: bool = True

    def to_upper(self, text: str) -> str:
        """Uppercase `text` using this locale's uppercase rules."""

        if not self.uppercase_overrides:
            return text.upper()
        return "".join(self.uppercase_overrides.get(char, char.upper()) for char in text)


_BUILTIN_LANGUAGES = (
    Language(
        code="en",
        name="English",
        title_exceptions=frozenset(
            {"a", "an", "and", "as", "at", "but", "by", "for", "from", "in", "into",
             "nor", "of", "on", "or", "the", "to", "with"}
        ),
    ),
    Language(
        code="de",
        name="German",
        id_transliterations={"Ä": "AE", "Ö": "OE", "Ü": "UE"},
        title_exceptions=frozenset({"der", "die", "das", "und", "oder", "von", "zu", "im", "am"}),
    ),
    Language(
        code="fr",
        name="French",
        title_exceptions=frozenset({"de", "du", "des", "la", "le", "les", "et", "ou", "en"}),
        space_before_punctuation=frozenset({"!", "?", ";", ":"}),
    ),
    Language(
        code="es",
        name="Spanish",
        title_exceptions=frozenset({"de", "del", "la", "las", "el", "los", "y", "o", "en"}),
    ),
    Language(
        code="pt",
        name="Portuguese",
        title_exceptions=frozenset({"de", "da", "das", "do", "dos", "e", "o", "a", "em"}),
    ),
    Language(
        code="tr",
        name="Turkish",
        uppercase_overrides={"i": "İ", "ı": "I"},
        title_exceptions=frozenset({"ve", "ile", "veya"}),
    ),
    Language(
        code="ja",
        name="Japanese",
        title_exceptions=frozenset(),
        uses_word_spacing=False,
    ),
    Language(
        code="zh",
        name="Chinese",
        title_exceptions=frozenset(),
        uses_word_spacing=False,
    ),
    Language(code="xx", name="Demo"),
)


class LanguageRegistry:
    """Mapping of language codes to `Language` capabilities."""

    def __init__(self, languages: Iterable[Language] = _BUILTIN_LANGUAGES) -> None:
        """Initialize the registry from an iterable of languages."""

        self._languages: dict[str, Language] = {}
        for language in languages:
            self.register(language)

    def register(self, language: Language) -> None:
        """Add or replace a language, keyed by its lowercase code."""

        self._languages[language.code.lower()] = language

    def get(self, code: str) -> Language:
        """Return the language for `code`.

        Raises:
            LanguageNotFoundError: If the code is not registered.
        """

        try:
            return self._languages[code.strip().lower()]
        except KeyError as exc:
            raise LanguageNotFoundError(code) from exc

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().lower() in self._languages

    def __iter__(self) -> Iterator[Language]:
        return iter(sorted(self._languages.values(), key=lambda language: language.code))

    def __len__(self) -> int:
        return len(self._languages)


def get_language(code: str) -> Language:
    """Return a built-in language by code."""

    return _DEFAULT_REGISTRY.get(code)


def demo_language() -> Language:
    """Return the neutral demo language used for locale-independent checks."""

    return _DEFAULT_REGISTRY.get("xx")


_DEFAULT_REGISTRY = LanguageRegistry()
