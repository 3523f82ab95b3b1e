"""Typed enum value objects."""

from typedenum.models.enums import FailureKind, StorageKind, ValueFormat
from typedenum.models.overrides import NO_MATCH, Overrides, aliases
from typedenum.models.result import ConversionResult, Failure, Ok

__all__ = [
    "ConversionResult",
    "Failure",
    "FailureKind",
    "NO_MATCH",
    "Ok",
    "Overrides",
    "StorageKind",
    "ValueFormat",
    "aliases",
]
