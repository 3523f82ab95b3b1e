"""Custom exceptions and error response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field

VALUE_SET_SHAPE = (
    "a keyword-style sequence of (name, integer) pairs or a mapping of name to integer "
    "(e.g.: [('atom_key', 1), ('another_possible', 2)] or {'atom_key': 1}), or a list of "
    "names for the string version (e.g.: ['atom_key', 'another_possible'])"
)


class ErrorDetail(BaseModel):
    """Standardized error payload."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(None, description="Additional context")


class TypedEnumError(Exception):
    """Base exception for all typed enum errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorDetail:
        """Convert to a serializable error schema."""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            details=self.details if self.details else None,
        )


class InvalidDefinitionError(TypedEnumError, ValueError):
    """Raised when a typed enum cannot be built from its value set."""

    def __init__(self, code: str, message: str, name: str, details: Optional[dict] = None):
        super().__init__(
            code=code,
            message=message,
            details={"name": name, **(details or {})},
        )
        self.name = name


class EmptyValueSetError(InvalidDefinitionError):
    """Raised when the value set has no elements."""

    def __init__(self, name: str):
        super().__init__(
            code="EMPTY_VALUE_SET",
            message=(
                f"TypedEnum {name} expects `values` to be a list or keyword-style list "
                "with at least 1 element"
            ),
            name=name,
        )


class BadFormatError(InvalidDefinitionError):
    """Raised when the value set has the wrong shape or repeats a tag or code."""

    def __init__(self, name: str, reason: str, offending: Any = None):
        super().__init__(
            code="BAD_FORMAT",
            message=f"TypedEnum {name} expects the format of `values` to be {VALUE_SET_SHAPE}; {reason}",
            name=name,
            details={"reason": reason, "offending": repr(offending)},
        )
        self.reason = reason
        self.offending = offending


class DuplicateDefinitionError(InvalidDefinitionError):
    """Raised when a type name is registered twice under the strict registry."""

    def __init__(self, name: str):
        super().__init__(
            code="DUPLICATE_DEFINITION",
            message=f"TypedEnum {name} is already defined",
            name=name,
        )


class UnsupportedFormatError(TypedEnumError, ValueError):
    """Raised when a value format is requested that the type does not carry."""

    def __init__(self, type_name: str, requested: Any):
        super().__init__(
            code="UNSUPPORTED_FORMAT",
            message=f"TypedEnum {type_name} has no {requested!r} representation",
            details={"type": type_name, "requested": repr(requested)},
        )


class DumpError(TypedEnumError, ValueError):
    """Raised by ``dump_strict`` when a value cannot be dumped."""

    def __init__(self, type_name: str, value: Any):
        super().__init__(
            code="DUMP_ERROR",
            message=f"Unable to dump:: {value!r} ::into:: {type_name}",
            details={"type": type_name, "value": repr(value)},
        )
        self.type_name = type_name
        self.value = value


class CastError(TypedEnumError, ValueError):
    """Raised when an input or stored value does not map to a declared tag."""

    def __init__(self, type_name: str, value: Any):
        super().__init__(
            code="CAST_ERROR",
            message=f"Unable to cast:: {value!r} ::into:: {type_name}",
            details={"type": type_name, "value": repr(value)},
        )
        self.type_name = type_name
        self.value = value
