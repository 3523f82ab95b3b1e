"""SQLAlchemy column type backed by a typed enum."""

from typing import Any, Optional

from sqlalchemy import Integer, String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine

from typedenum.core.conversion import TypedEnum
from typedenum.models.enums import StorageKind


class TypedEnumColumn(TypeDecorator):
    """
    Persist tags as strings or integer codes.

    The column type follows the enum's storage kind. Bound values go
    through ``dump_strict``; loaded values go through ``load`` and unknown
    stored values raise ``CastError``. ``None`` passes through both ways.

    Usage:
        status: Mapped[Tag] = mapped_column(InvoiceStatus.column(), nullable=False)
    """

    impl = String
    cache_ok = True

    def __init__(self, enum_type: TypedEnum, length: Optional[int] = None):
        self.enum_type = enum_type
        if length is None and enum_type.storage_kind == StorageKind.STRING:
            length = max(len(s) for s in enum_type.strings)
        self.length = length
        super().__init__()

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine:
        if self.enum_type.storage_kind == StorageKind.INTEGER:
            return dialect.type_descriptor(Integer())
        return dialect.type_descriptor(String(self.length))

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        return self.enum_type.dump_strict(value)

    def process_literal_param(self, value: Any, dialect: Dialect) -> str:
        dumped = self.process_bind_param(value, dialect)
        if dumped is None:
            return "NULL"
        if isinstance(dumped, int):
            return str(dumped)
        return "'" + str(dumped).replace("'", "''") + "'"

    def process_result_value(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        return self.enum_type.load(value).unwrap()

    def compare_values(self, x: Any, y: Any) -> bool:
        if x is None or y is None:
            return x is y
        return self.enum_type.equal(x, y)

    @property
    def python_type(self) -> type:
        return self.enum_type.tag_class

    def copy(self, **kw: Any) -> "TypedEnumColumn":
        return TypedEnumColumn(self.enum_type, self.length)

    def __repr__(self) -> str:
        return f"TypedEnumColumn({self.enum_type.name})"
