"""
Enums for typed enumeration metadata.
Describe how a typed enum is stored and which view of its values is requested.
"""

import enum


class StorageKind(str, enum.Enum):
    """Column type a typed enum is persisted as."""

    STRING = "string"
    INTEGER = "integer"


class ValueFormat(str, enum.Enum):
    """Representation requested from ``TypedEnum.values``."""

    TAGS = "tags"
    STRINGS = "strings"
    CODES = "codes"

    @classmethod
    def _missing_(cls, value):
        # "atoms" and "ints" are accepted as aliases
        aliases = {"atoms": cls.TAGS, "ints": cls.CODES}
        if isinstance(value, str):
            lowered = value.lower()
            return aliases.get(lowered) or cls._value2member_map_.get(lowered)
        return None


class FailureKind(str, enum.Enum):
    """Reason a conversion did not resolve."""

    NOT_CASTABLE = "NOT_CASTABLE"
    NOT_DUMPABLE = "NOT_DUMPABLE"
