"""
Naming utilities for safe code generation.

Handles identifier extraction from decorated schema keys, first-letter
capitalization and declaration names derived from API paths.
"""

import re
from typing import Optional

from .errors import IllegalFieldNameError

# ASCII only: tag keys and Go field names must stay plain identifiers
_IDENTIFIER_RE = re.compile(r"[0-9A-Za-z_]+")

PATH_SEPARATOR = "/"


def find_identifier(raw_name: str) -> Optional[str]:
    """Return the first run of word characters in ``raw_name``, or None."""
    match = _IDENTIFIER_RE.search(raw_name or "")
    return match.group(0) if match else None


def sanitize_identifier(raw_name: str) -> str:
    """
    Extract the first run of word characters from a schema key.

    Strips presentation artifacts such as ``"* "`` markers, punctuation
    and surrounding whitespace, e.g. ``"* nodeNetwork"`` -> ``"nodeNetwork"``.

    Args:
        raw_name: Key as found in the schema document

    Returns:
        Identifier usable as a struct field name and JSON tag

    Raises:
        IllegalFieldNameError: If the key holds no word characters
    """
    identifier = find_identifier(raw_name)
    if identifier is None:
        raise IllegalFieldNameError(raw_name)
    return identifier


def upper_first(word: str) -> str:
    """Capitalize the first character only; the rest is left untouched."""
    if not word:
        return word
    return word[0].upper() + word[1:]


def declaration_name(path: str, suffix: str) -> str:
    """
    Derive a declaration name from an API path and a role suffix.

    The leading separator is stripped exactly once:
    ``declaration_name("/user", "ReqDto")`` -> ``"UserReqDto"``.
    """
    if path.startswith(PATH_SEPARATOR):
        path = path[len(PATH_SEPARATOR):]
    return upper_first(path) + suffix
