"""Runtime conversion between tags, strings and integer codes."""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Union

from typedenum.core.errors import CastError, DumpError, UnsupportedFormatError
from typedenum.core.logging import get_logger
from typedenum.core.tables import LookupTables, Tag
from typedenum.core.validators import is_code
from typedenum.models.enums import FailureKind, StorageKind, ValueFormat
from typedenum.models.overrides import NO_MATCH, Overrides
from typedenum.models.result import ConversionResult, Failure, Ok

logger = get_logger(__name__)


def _same(a: Any, b: Any) -> bool:
    # 1 == True and 1 == 1.0 must not count as the same raw input
    return a is b or (type(a) is type(b) and a == b)


class TypedEnum(ABC):
    """
    A closed set of tags convertible to and from strings (and integer codes).

    Instances are built once by ``typedenum.build`` and never change.
    Every conversion tries the caller's overrides first, then the lookup
    tables. ``cast`` and ``dump`` return ``Ok`` or ``Failure`` and never
    raise for unknown input.
    """

    storage_kind: StorageKind

    def __init__(self, name: str, tables: LookupTables, overrides: Overrides):
        self._name = name
        self._tables = tables
        self._overrides = overrides

    @property
    def name(self) -> str:
        return self._name

    @property
    def tag_class(self) -> type[Tag]:
        """The generated enum whose members are this type's tags."""
        return self._tables.tag_class

    @property
    def overrides(self) -> Overrides:
        return self._overrides

    @property
    def tags(self) -> tuple[Tag, ...]:
        return self._tables.tags

    @property
    def strings(self) -> tuple[str, ...]:
        return self._tables.strings

    @property
    def codes(self) -> tuple[int, ...]:
        return self._tables.codes

    def tag(self, name: str) -> Tag:
        """Get the tag declared as ``name``.

        Raises:
            CastError: If no such tag is declared
        """
        try:
            return self._tables.string_to_tag[name]
        except (KeyError, TypeError):
            raise CastError(self._name, name) from None

    def values(self, fmt: Union[ValueFormat, str] = ValueFormat.TAGS) -> tuple[Any, ...]:
        """Given a desired format, return the declared values in that format."""
        try:
            fmt = ValueFormat(fmt)
        except ValueError:
            raise UnsupportedFormatError(self._name, fmt) from None

        if fmt == ValueFormat.TAGS:
            return self.tags
        if fmt == ValueFormat.STRINGS:
            return self.strings
        if self.storage_kind != StorageKind.INTEGER:
            raise UnsupportedFormatError(self._name, fmt.value)
        return self.codes

    # -- cast / load -----------------------------------------------------

    def cast(self, value: Any) -> ConversionResult:
        """Convert a tag, string or code into its tag."""
        for hook in self._overrides.cast:
            resolved = hook(value, self)
            if resolved is not NO_MATCH:
                return Ok(self._hook_tag(resolved, hook))

        tag = self._cast_generic(value)
        if tag is NO_MATCH:
            return Failure(FailureKind.NOT_CASTABLE, value, self._name)
        return Ok(tag)

    def load(self, value: Any) -> ConversionResult:
        """Materialize a stored value. Same as ``cast``."""
        return self.cast(value)

    def _cast_generic(self, value: Any) -> Any:
        if isinstance(value, self._tables.tag_class):
            return value
        if isinstance(value, str):
            return self._tables.string_to_tag.get(value, NO_MATCH)
        return NO_MATCH

    def _hook_tag(self, resolved: Any, hook: Any) -> Tag:
        if isinstance(resolved, self._tables.tag_class):
            return resolved
        if isinstance(resolved, str) and resolved in self._tables.string_to_tag:
            return self._tables.string_to_tag[resolved]
        raise TypeError(
            f"Override {getattr(hook, '__name__', hook)!r} for {self._name} returned "
            f"{resolved!r}, expected one of its tags"
        )

    # -- dump ------------------------------------------------------------

    def dump(self, value: Any) -> ConversionResult:
        """Convert a tag (or equivalent) into its storage value."""
        for hook in self._overrides.dump:
            dumped = hook(value, self)
            if dumped is not NO_MATCH:
                return Ok(dumped)

        dumped = self._dump_generic(value)
        if dumped is NO_MATCH:
            return Failure(FailureKind.NOT_DUMPABLE, value, self._name)
        return Ok(dumped)

    def dump_strict(self, value: Any) -> Any:
        """Dumps but raises in case of non-valid data.

        Raises:
            DumpError: If ``value`` cannot be dumped
        """
        result = self.dump(value)
        if result.ok:
            return result.value

        logger.warning("typed_enum.dump_failed", name=self._name, value=repr(value))
        raise DumpError(self._name, value)

    @abstractmethod
    def _dump_generic(self, value: Any) -> Any:
        ...

    # -- equality --------------------------------------------------------

    def equal(self, a: Any, b: Any) -> bool:
        """True if ``a`` and ``b`` denote the same value in any representation."""
        if _same(a, b):
            return True
        return _same(self._normalize(a), self._normalize(b))

    def _normalize(self, value: Any) -> Any:
        for hook in self._overrides.normalize:
            resolved = hook(value, self)
            if resolved is not NO_MATCH:
                return self._hook_tag(resolved, hook)

        tag = self._cast_generic(value)
        return value if tag is NO_MATCH else tag

    def embed_as(self, fmt: Any = None) -> str:
        """Embedded values go through ``dump``; there is no separate form."""
        return "dump"

    # -- integrations ----------------------------------------------------

    def annotated(self) -> Any:
        """``Annotated`` type for pydantic fields holding this enum's tags."""
        from typedenum.integrations.pydantic import annotated

        return annotated(self)

    def column(self) -> Any:
        """SQLAlchemy column type storing this enum."""
        from typedenum.integrations.sqlalchemy import TypedEnumColumn

        return TypedEnumColumn(self)

    # -- container protocol ----------------------------------------------

    def __contains__(self, value: Any) -> bool:
        return self.cast(value).ok

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tables.tags)

    def __len__(self) -> int:
        return len(self._tables.tags)

    def __getitem__(self, name: str) -> Tag:
        return self.tag(name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}({self._name}, storage={self.storage_kind.value}, values={list(self.strings)})>"


class StringTypedEnum(TypedEnum):
    """Typed enum persisted as its tag names."""

    storage_kind = StorageKind.STRING

    def _dump_generic(self, value: Any) -> Any:
        tag = self._cast_generic(value)
        if tag is NO_MATCH:
            return NO_MATCH
        return str(tag)


class IntegerTypedEnum(TypedEnum):
    """Typed enum persisted as integer codes."""

    storage_kind = StorageKind.INTEGER

    def _cast_generic(self, value: Any) -> Any:
        if is_code(value):
            return self._tables.code_to_tag.get(value, NO_MATCH)
        return super()._cast_generic(value)

    def _dump_generic(self, value: Any) -> Any:
        if isinstance(value, self._tables.tag_class):
            return self._tables.tag_to_code[value]
        if isinstance(value, str):
            return self._tables.string_to_code.get(value, NO_MATCH)
        if is_code(value) and value in self._tables.code_to_tag:
            return int(value)
        return NO_MATCH
