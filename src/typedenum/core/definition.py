# File: src/typedenum/core/definition.py
"""Build typed enums from declared value sets."""

import sys
from typing import Any, Optional

from typedenum.core.conversion import IntegerTypedEnum, StringTypedEnum, TypedEnum
from typedenum.core.errors import BadFormatError, InvalidDefinitionError
from typedenum.core.logging import get_logger
from typedenum.core.registry import register as register_enum
from typedenum.core.tables import build_tables
from typedenum.core.validators import validate_value_set
from typedenum.models.enums import StorageKind
from typedenum.models.overrides import Overrides

logger = get_logger(__name__)


def _caller_module() -> Optional[str]:
    """Module name of the code calling build()."""
    return sys._getframe(2).f_globals.get("__name__")


def build(
    name: str,
    values: Any,
    *,
    overrides: Optional[Overrides] = None,
    register: bool = True,
    module: Optional[str] = None,
) -> TypedEnum:
    """
    Build a typed enum from its value set.

    A list of names builds a string-stored enum; a list of ``(name, code)``
    pairs or a ``{name: code}`` mapping builds an integer-stored one.

    Args:
        name: Type name, used for the tag enum, errors, logs and the registry
        values: The declared value set
        overrides: Hooks consulted before the lookup tables
        register: Add the type to the process-wide registry
        module: Module the generated tag enum reports, defaults to the caller's

    Returns:
        StringTypedEnum or IntegerTypedEnum

    Raises:
        EmptyValueSetError: If ``values`` is empty
        BadFormatError: If ``values`` is malformed or repeats a tag or code
        DuplicateDefinitionError: If ``name`` is already registered (strict registry)
    """
    try:
        if not isinstance(name, str) or not name.isidentifier():
            raise BadFormatError(str(name), "type name must be a valid identifier", name)
        if overrides is not None and not isinstance(overrides, Overrides):
            raise BadFormatError(name, "overrides must be an Overrides instance", overrides)
        kind, entries = validate_value_set(name, values)
        tables = build_tables(name, kind, entries, module or _caller_module())
    except InvalidDefinitionError as e:
        logger.warning("typed_enum.definition_rejected", name=str(name), code=e.code)
        raise

    enum_cls = IntegerTypedEnum if kind == StorageKind.INTEGER else StringTypedEnum
    enum_type = enum_cls(name, tables, overrides or Overrides())

    if register:
        register_enum(enum_type)

    logger.debug(
        "typed_enum.defined",
        name=name,
        storage_kind=kind.value,
        size=len(tables.tags),
        cast_overrides=len(enum_type.overrides.cast),
        dump_overrides=len(enum_type.overrides.dump),
        normalize_overrides=len(enum_type.overrides.normalize),
    )
    return enum_type
