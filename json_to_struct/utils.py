"""
Utility functions for the JSON to struct generator.
"""

import re
from collections.abc import Iterable

# Regex pattern to find runs of letters and digits; separators and punctuation split runs
_WORD_PATTERN = re.compile(r"[^\W_]+")

# Words that Go linters expect fully upper-case in identifiers
DEFAULT_ACRONYMS = ("id", "api", "http", "url", "uri")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries and digit runs.

    An upper-case letter starts a new word. Uncased letters (e.g. CJK) stay in
    the current word.
    """
    words = []
    for run in _WORD_PATTERN.findall(text):
        word = run[0]
        for ch in run[1:]:
            if ch.isupper() or ch.isdigit() != word[-1].isdigit():
                words.append(word)
                word = ch
            else:
                word += ch
        words.append(word)
    return words


def snake_to_pascal_case(text: str, acronyms: Iterable[str] = ()) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Words listed in ``acronyms`` (case-insensitive) are fully upper-cased.

    Examples:
        "first_name" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"
        "user_id" with acronyms ["id"] -> "UserID"

    Args:
        text: The text to convert (snake_case, camelCase, kebab-case, or space-separated)
        acronyms: Words to upper-case

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    upper = {acronym.lower() for acronym in acronyms}
    words = _split_into_words(text)
    return "".join(word.upper() if word.lower() in upper else word.capitalize() for word in words if word)


def to_go_field_name(json_name: str, additional_acronyms: Iterable[str] = ()) -> str:
    """Convert a JSON key to an exported Go field name.

    Go only exports identifiers starting with an upper-case letter, so names that are
    empty or start with a digit or an uncased letter are prefixed with ``X``.

    Examples:
        "user_id" -> "UserID"
        "apiKey" -> "APIKey"
        "2fa" -> "X2Fa"
        "名前" -> "X名前"
    """
    name = snake_to_pascal_case(json_name, (*DEFAULT_ACRONYMS, *additional_acronyms))
    if not name or not name[0].isupper():
        name = "X" + name
    return name
