"""Top-level package for prooftext.

This package provides locale-aware string primitives for proofreading
pipelines: case classification, identifier derivation, title-casing,
character diffs for error highlights, speller input normalization, and
markup escaping. Locale rules are passed in explicitly as `Language` values.
"""

from loguru import logger

from .errors import (
    BlankTextError,
    LanguageNotFoundError,
    MissingTextError,
    StreamDecodeError,
    TextArgumentError,
)
from .languages import Language, LanguageRegistry, get_language
from .parsing import as_string, assure_set, is_empty
from .text import (
    CasePattern,
    DiffResult,
    add_space,
    all_start_with_lowercase,
    classify_case,
    escape_html,
    escape_xml,
    filter_xml,
    get_difference,
    is_all_uppercase,
    is_camel_case,
    is_capitalized_word,
    is_mixed_case,
    is_positive_number,
    is_whitespace,
    lowercase_first_char,
    starts_with_uppercase,
    string_for_speller,
    titlecase_global,
    to_id,
    trim_whitespace,
    uppercase_first_char,
)

logger.disable("prooftext")

__all__ = [
    "BlankTextError",
    "CasePattern",
    "DiffResult",
    "Language",
    "LanguageNotFoundError",
    "LanguageRegistry",
    "MissingTextError",
    "StreamDecodeError",
    "TextArgumentError",
    "__version__",
    "add_space",
    "all_start_with_lowercase",
    "as_string",
    "assure_set",
    "classify_case",
    "escape_html",
    "escape_xml",
    "filter_xml",
    "get_difference",
    "get_language",
    "is_all_uppercase",
    "is_camel_case",
    "is_capitalized_word",
    "is_empty",
    "is_mixed_case",
    "is_positive_number",
    "is_whitespace",
    "lowercase_first_char",
    "starts_with_uppercase",
    "string_for_speller",
    "titlecase_global",
    "to_id",
    "trim_whitespace",
    "uppercase_first_char",
]

__version__ = "0.1.0"
