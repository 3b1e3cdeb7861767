"""
Label utilities for pyqt-formbuilder.

Identifier-to-text formatting shared by scaffolding, the widget heuristic and
the form views. Identifiers may be PascalCase, camelCase or snake_case.
"""

import re
from enum import Enum
from typing import List

# Acronym runs ("HTTP" in "HTTPPort"), capitalised or lower words, digit runs
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")

_BOOL_PREFIXES = frozenset({"is", "has", "can", "should"})


def split_words(name: str) -> List[str]:
    """Split an identifier into words: 'UserId', 'userId', 'user_id' -> ['User'|'user', 'Id']"""
    words: List[str] = []
    for chunk in name.split("_"):
        words.extend(_WORD_PATTERN.findall(chunk))
    return words


def split_pascal_case(name: str) -> str:
    """Convert an identifier to capitalised words: 'user_id' -> 'User Id'"""
    return " ".join(word[0].upper() + word[1:] for word in split_words(name))


def ends_with_word(name: str, *suffixes: str) -> bool:
    """Check whether the identifier's last word is one of suffixes (case-insensitive)."""
    words = split_words(name)
    if not words:
        return False
    return words[-1].lower() in {suffix.lower() for suffix in suffixes}


def ends_with_id(name: str) -> bool:
    """
    Check for a trailing identifier word: 'UserId', 'userId' or snake_case 'user_id'.

    Case-sensitive apart from the snake_case form, so 'UserID' and 'ID' do not match.
    """
    words = split_words(name)
    if not words:
        return False
    return words[-1] == "Id" or name.endswith("_id")


def label_for(name: str) -> str:
    """
    Default field label.

    Drops a trailing 'Id' word so foreign keys read naturally
    ('UserId' -> 'User'), except for a bare 'Id' and for 'GovId' names.
    """
    label = split_pascal_case(name)
    words = split_words(name)
    if len(words) > 1 and ends_with_id(name) and words[-2].lower() != "gov":
        label = label[:-len(" " + words[-1])]
    return label


def has_custom_label(label: str, name: str) -> bool:
    """True when label differs from the plain word split of name."""
    return label != split_pascal_case(name)


def bool_caption(name: str) -> str:
    """Checkbox caption: 'IsActive' -> 'Active', 'has_newsletter' -> 'Newsletter'"""
    words = split_words(name)
    if len(words) > 1 and words[0].lower() in _BOOL_PREFIXES:
        words = words[1:]
    return split_pascal_case("_".join(words))


def format_enum_display(enum_value: Enum) -> str:
    """Get enum display text: Enum.DARK_MODE -> 'Dark Mode'"""
    return split_pascal_case(enum_value.name.lower())


def invalid_message(invalid_fields: int) -> str:
    """Validation summary text for a positive invalid-field count."""
    if invalid_fields == 1:
        return "There is 1 invalid field."
    return f"There are {invalid_fields} invalid fields."
