"""Typed enumerations convertible between tags, strings and integer codes."""

from typedenum.core.conversion import IntegerTypedEnum, StringTypedEnum, TypedEnum
from typedenum.core.definition import build
from typedenum.core.errors import (
    BadFormatError,
    CastError,
    DumpError,
    DuplicateDefinitionError,
    EmptyValueSetError,
    InvalidDefinitionError,
    TypedEnumError,
    UnsupportedFormatError,
)
from typedenum.core.registry import clear_registry, get_enum, registered_names
from typedenum.core.tables import Tag
from typedenum.models.enums import FailureKind, StorageKind, ValueFormat
from typedenum.models.overrides import NO_MATCH, Overrides, aliases
from typedenum.models.result import Failure, Ok

__all__ = [
    "BadFormatError",
    "CastError",
    "DumpError",
    "DuplicateDefinitionError",
    "EmptyValueSetError",
    "Failure",
    "FailureKind",
    "IntegerTypedEnum",
    "InvalidDefinitionError",
    "NO_MATCH",
    "Ok",
    "Overrides",
    "StorageKind",
    "StringTypedEnum",
    "Tag",
    "TypedEnum",
    "TypedEnumError",
    "UnsupportedFormatError",
    "ValueFormat",
    "aliases",
    "build",
    "clear_registry",
    "get_enum",
    "registered_names",
]
