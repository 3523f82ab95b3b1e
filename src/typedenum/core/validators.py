# File: src/typedenum/core/validators.py
"""Definition-time validation of typed enum value sets."""

import keyword
from collections.abc import Mapping
from typing import Any

from typedenum.core.errors import BadFormatError, EmptyValueSetError
from typedenum.models.enums import StorageKind

# Names enum refuses as member names
RESERVED_TAG_NAMES = frozenset({"mro"})


def is_tag_name(value: Any) -> bool:
    """Return True if ``value`` can name a tag."""
    return (
        isinstance(value, str)
        and value.isidentifier()
        and not keyword.iskeyword(value)
        and not value.startswith("_")
        and value not in RESERVED_TAG_NAMES
    )


def is_code(value: Any) -> bool:
    """Return True for integer codes. ``bool`` is not a code."""
    return isinstance(value, int) and not isinstance(value, bool)


def _is_pair(value: Any) -> bool:
    return isinstance(value, tuple) and len(value) == 2


def normalize_value_set(name: str, values: Any) -> list[Any]:
    """
    Flatten a value set into a list.

    Mappings become ``(name, code)`` pairs in insertion order.

    Raises:
        BadFormatError: If ``values`` is not a list, tuple or mapping
    """
    if isinstance(values, Mapping):
        return list(values.items())
    if isinstance(values, (list, tuple)):
        return list(values)
    raise BadFormatError(name, "values must be a list, tuple or mapping", values)


def detect_storage_kind(entries: list[Any]) -> StorageKind:
    """Integer variant when the first entry is a pair, string variant otherwise."""
    return StorageKind.INTEGER if _is_pair(entries[0]) else StorageKind.STRING


def validate_string_values(name: str, entries: list[Any]) -> None:
    """
    Validate a string-variant value set.

    Raises:
        BadFormatError: If an entry is not a tag name or a tag repeats
    """
    seen: set[str] = set()
    for entry in entries:
        if not is_tag_name(entry):
            raise BadFormatError(name, f"{entry!r} is not a valid tag name", entry)
        if entry in seen:
            raise BadFormatError(name, f"tag {entry!r} is declared more than once", entry)
        seen.add(entry)


def validate_integer_values(name: str, entries: list[Any]) -> None:
    """
    Validate an integer-variant value set.

    Raises:
        BadFormatError: If an entry is not a (tag name, int) pair, or a tag or code repeats
    """
    seen_tags: set[str] = set()
    seen_codes: set[int] = set()
    for entry in entries:
        if not (_is_pair(entry) and is_tag_name(entry[0]) and is_code(entry[1])):
            raise BadFormatError(name, f"{entry!r} is not a (tag name, integer) pair", entry)

        tag, code = entry
        if tag in seen_tags:
            raise BadFormatError(name, f"tag {tag!r} is declared more than once", entry)
        if code in seen_codes:
            raise BadFormatError(name, f"code {code!r} is declared more than once", entry)
        seen_tags.add(tag)
        seen_codes.add(code)


def validate_value_set(name: str, values: Any) -> tuple[StorageKind, list[Any]]:
    """
    Validate a value set and detect its variant.

    Args:
        name: Type name for error messages
        values: List of tag names, list of (tag name, code) pairs, or mapping

    Returns:
        The storage kind and the flattened entries

    Raises:
        EmptyValueSetError: If there are no entries
        BadFormatError: If the entries are malformed or repeat
    """
    entries = normalize_value_set(name, values)
    if not entries:
        raise EmptyValueSetError(name)

    kind = detect_storage_kind(entries)
    if kind == StorageKind.INTEGER:
        validate_integer_values(name, entries)
    else:
        validate_string_values(name, entries)

    return kind, entries
