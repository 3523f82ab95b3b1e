"""Lookup tables derived once from a validated value set."""

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from typedenum.core.errors import BadFormatError, CastError
from typedenum.models.enums import StorageKind


class Tag(enum.Enum):
    """Base class of every generated tag enum. ``str(tag)`` is the tag name."""

    def __str__(self) -> str:
        return self.name

    def __reduce_ex__(self, proto):
        # Generated classes are not module attributes; resolve through the registry
        return _unpickle_tag, (type(self).__name__, self.name)


def _unpickle_tag(type_name: str, tag_name: str) -> Tag:
    from typedenum.core.registry import get_enum

    enum_type = get_enum(type_name)
    if enum_type is None:
        raise CastError(type_name, tag_name)
    return enum_type.tag(tag_name)


_EMPTY: Mapping[Any, Any] = MappingProxyType({})


@dataclass(frozen=True)
class LookupTables:
    """Read-only lookup tables for one typed enum."""

    tag_class: type[Tag]
    tags: tuple[Tag, ...]
    strings: tuple[str, ...]
    codes: tuple[int, ...] = ()
    string_to_tag: Mapping[str, Tag] = field(default_factory=lambda: _EMPTY)
    tag_to_code: Mapping[Tag, int] = field(default_factory=lambda: _EMPTY)
    code_to_tag: Mapping[int, Tag] = field(default_factory=lambda: _EMPTY)
    string_to_code: Mapping[str, int] = field(default_factory=lambda: _EMPTY)


def make_tag_class(
    name: str, kind: StorageKind, entries: list[Any], module: Optional[str] = None
) -> type[Tag]:
    """Generate the tag enum. Member values are names (string kind) or codes (integer kind)."""
    if kind == StorageKind.INTEGER:
        members = [(tag, int(code)) for tag, code in entries]
    else:
        members = [(tag, tag) for tag in entries]
    try:
        return Tag(name, members, module=module)
    except (TypeError, ValueError) as e:
        raise BadFormatError(name, f"tag names rejected by enum: {e}", entries) from e


def build_tables(
    name: str, kind: StorageKind, entries: list[Any], module: Optional[str] = None
) -> LookupTables:
    """
    Build all lookup tables in one pass over the declared values.

    Args:
        name: Type name, also used for the generated tag enum
        kind: Storage kind detected by the validator
        entries: Validated entries in declaration order
        module: Module the tag enum should report, for pickling

    Returns:
        Immutable LookupTables
    """
    tag_class = make_tag_class(name, kind, entries, module)

    tags: list[Tag] = []
    strings: list[str] = []
    codes: list[int] = []
    string_to_tag: dict[str, Tag] = {}
    tag_to_code: dict[Tag, int] = {}
    code_to_tag: dict[int, Tag] = {}
    string_to_code: dict[str, int] = {}

    for tag in tag_class:
        text = str(tag)
        tags.append(tag)
        strings.append(text)
        string_to_tag[text] = tag

        if kind == StorageKind.INTEGER:
            code = tag.value
            codes.append(code)
            tag_to_code[tag] = code
            code_to_tag[code] = tag
            string_to_code[text] = code

    return LookupTables(
        tag_class=tag_class,
        tags=tuple(tags),
        strings=tuple(strings),
        codes=tuple(codes),
        string_to_tag=MappingProxyType(string_to_tag),
        tag_to_code=MappingProxyType(tag_to_code),
        code_to_tag=MappingProxyType(code_to_tag),
        string_to_code=MappingProxyType(string_to_code),
    )
