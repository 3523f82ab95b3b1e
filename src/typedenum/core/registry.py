"""Process-wide registry of defined typed enums."""

from typing import TYPE_CHECKING, Optional

from typedenum.core.config import get_settings
from typedenum.core.errors import DuplicateDefinitionError
from typedenum.core.logging import get_logger

if TYPE_CHECKING:
    from typedenum.core.conversion import TypedEnum

logger = get_logger(__name__)

_registry: dict[str, "TypedEnum"] = {}


def register(enum_type: "TypedEnum") -> None:
    """Register a type under its name.

    Raises:
        DuplicateDefinitionError: If the name is taken and the registry is strict
    """
    name = enum_type.name
    if name in _registry and get_settings().registry_mode == "strict":
        raise DuplicateDefinitionError(name)
    if name in _registry:
        logger.info("typed_enum.registry.replaced", name=name)
    _registry[name] = enum_type


def get_enum(name: str) -> Optional["TypedEnum"]:
    """Get a registered type by name."""
    return _registry.get(name)


def is_registered(name: str) -> bool:
    return name in _registry


def registered_names() -> list[str]:
    """Names of registered types in definition order."""
    return list(_registry.keys())


def clear_registry(pattern: Optional[str] = None) -> None:
    """Forget registered types whose name contains ``pattern``, or all if None."""
    if pattern is None:
        _registry.clear()
    else:
        for name in [name for name in _registry if pattern in name]:
            del _registry[name]

    logger.debug("typed_enum.registry.cleared", pattern=pattern)
