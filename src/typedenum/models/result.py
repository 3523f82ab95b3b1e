"""Conversion results returned by ``cast``, ``load`` and ``dump``."""

from dataclasses import dataclass
from typing import Any, Union

from typedenum.core.errors import CastError, DumpError
from typedenum.models.enums import FailureKind


@dataclass(frozen=True)
class Ok:
    """A resolved conversion."""

    value: Any

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A conversion that matched no override and no declared value."""

    kind: FailureKind
    raw: Any
    type_name: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise the matching error for this failure."""
        if self.kind == FailureKind.NOT_DUMPABLE:
            raise DumpError(self.type_name, self.raw)
        raise CastError(self.type_name, self.raw)


ConversionResult = Union[Ok, Failure]
