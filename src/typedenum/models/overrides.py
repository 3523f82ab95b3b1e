"""Caller-supplied resolution hooks consulted before the lookup tables."""

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Sequence

if TYPE_CHECKING:
    from typedenum.core.conversion import TypedEnum


class _Sentinel(enum.Enum):
    NO_MATCH = "NO_MATCH"

    def __repr__(self) -> str:
        return "NO_MATCH"


# Returned by a hook that does not recognise its input.
NO_MATCH = _Sentinel.NO_MATCH

Hook = Callable[[Any, "TypedEnum"], Any]


def _as_hooks(hooks: Sequence[Hook] | Hook, kind: str) -> tuple[Hook, ...]:
    if callable(hooks):
        hooks = (hooks,)
    hooks = tuple(hooks)
    for hook in hooks:
        if not callable(hook):
            raise TypeError(f"{kind} override must be callable, got {hook!r}")
    return hooks


@dataclass(frozen=True)
class Overrides:
    """Ordered hooks for ``cast``, ``dump`` and the normalization behind ``equal``.

    Each hook is called as ``hook(value, enum_type)`` and returns either a
    result or ``NO_MATCH``. The first hook that matches wins; when none
    match, the type falls back to its lookup tables. Hooks may accept inputs
    outside the declared value set, which is how legacy aliases are bridged.

    Cast and normalize hooks return a tag (or a declared tag name). Dump
    hooks return the storage value.
    """

    cast: tuple[Hook, ...] = ()
    dump: tuple[Hook, ...] = ()
    normalize: tuple[Hook, ...] = ()

    def __post_init__(self) -> None:
        # frozen dataclass, so coerce through object.__setattr__
        object.__setattr__(self, "cast", _as_hooks(self.cast, "cast"))
        object.__setattr__(self, "dump", _as_hooks(self.dump, "dump"))
        object.__setattr__(self, "normalize", _as_hooks(self.normalize, "normalize"))

    def __bool__(self) -> bool:
        return bool(self.cast or self.dump or self.normalize)

    def merge(self, other: "Overrides") -> "Overrides":
        """Return overrides trying ``self`` first, then ``other``."""
        return Overrides(
            cast=self.cast + other.cast,
            dump=self.dump + other.dump,
            normalize=self.normalize + other.normalize,
        )


def _lookup(mapping: Mapping[Any, str], value: Any) -> Any:
    try:
        return mapping.get(value, NO_MATCH)
    except TypeError:
        # unhashable input
        return NO_MATCH


def aliases(mapping: Mapping[Any, str]) -> Overrides:
    """
    Build overrides mapping raw inputs onto declared tag names.

    Args:
        mapping: ``{raw_input: tag_name}``, e.g. ``{"legacy": "val_1"}``

    Returns:
        Overrides whose cast, dump and normalize hooks all honour the aliases
    """
    frozen = dict(mapping)

    def cast_alias(value: Any, enum_type: "TypedEnum") -> Any:
        name = _lookup(frozen, value)
        if name is NO_MATCH:
            return NO_MATCH
        return enum_type.tag(name)

    def dump_alias(value: Any, enum_type: "TypedEnum") -> Any:
        name = _lookup(frozen, value)
        if name is NO_MATCH:
            return NO_MATCH
        return enum_type.dump_strict(enum_type.tag(name))

    return Overrides(cast=(cast_alias,), dump=(dump_alias,), normalize=(cast_alias,))
