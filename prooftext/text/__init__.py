"""Text primitives for casing, identifiers, diffing, markup, and speller input.

Every function in this package is pure: it reads only its arguments and
returns a new value.
"""

from .casing import (
    CasePattern,
    classify_case,
    is_all_uppercase,
    is_camel_case,
    is_capitalized_word,
    is_mixed_case,
    is_not_all_lowercase,
    lowercase_first_char,
    starts_with_uppercase,
    uppercase_first_char,
)
from .diffing import DiffResult, get_difference
from .identifiers import to_id
from .markup import escape_html, escape_xml, filter_xml
from .speller import SpellerText, speller_text, string_for_speller, utf16_length
from .titlecase import all_start_with_lowercase, titlecase_global
from .whitespace import add_space, is_positive_number, is_whitespace, trim_whitespace

__all__ = [
    "CasePattern",
    "DiffResult",
    "SpellerText",
    "add_space",
    "all_start_with_lowercase",
    "classify_case",
    "escape_html",
    "escape_xml",
    "filter_xml",
    "get_difference",
    "is_all_uppercase",
    "is_camel_case",
    "is_capitalized_word",
    "is_mixed_case",
    "is_not_all_lowercase",
    "is_positive_number",
    "is_whitespace",
    "lowercase_first_char",
    "speller_text",
    "starts_with_uppercase",
    "string_for_speller",
    "titlecase_global",
    "to_id",
    "trim_whitespace",
    "uppercase_first_char",
    "utf16_length",
]
