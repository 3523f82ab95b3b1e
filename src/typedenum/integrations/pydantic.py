"""pydantic field support for typed enums."""

from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from typedenum.core.conversion import TypedEnum


def annotated(enum_type: TypedEnum) -> Any:
    """
    Build an ``Annotated`` field type for ``enum_type``.

    Validation casts any accepted representation to the tag; unknown
    input fails validation. JSON serialization dumps to the storage
    value, python-mode serialization keeps the tag.

    Usage:
        class Invoice(BaseModel):
            status: InvoiceStatus.annotated()
    """

    def validate(value: Any) -> Any:
        result = enum_type.cast(value)
        if not result.ok:
            raise ValueError(f"{value!r} is not a valid {enum_type.name}")
        return result.value

    return Annotated[
        Any,
        BeforeValidator(validate),
        PlainSerializer(enum_type.dump_strict, when_used="json"),
    ]
