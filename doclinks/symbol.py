"""Data models for crates, modules and the symbols documented in them."""

from dataclasses import dataclass
from enum import Enum


class SymbolKind(Enum):
    """Kind of a program entity that documentation can be attached to."""

    STRUCT = "struct"
    ENUM = "enum"
    UNION = "union"
    MODULE = "module"
    TRAIT = "trait"
    TYPE_ALIAS = "type"
    BUILTIN_TYPE = "primitive"
    FUNCTION = "fn"
    ENUM_VARIANT = "variant"
    CONST = "const"
    STATIC = "static"
    MACRO = "macro"
    FIELD = "field"
    LOCAL = "local"
    SELF_TYPE = "self_type"
    GENERIC_PARAM = "generic_param"


# Items that live directly in a module (everything but macros, fields, locals
# and the generic/self pseudo-items).
MODULE_DEF_KINDS = frozenset(
    {
        SymbolKind.STRUCT,
        SymbolKind.ENUM,
        SymbolKind.UNION,
        SymbolKind.MODULE,
        SymbolKind.TRAIT,
        SymbolKind.TYPE_ALIAS,
        SymbolKind.BUILTIN_TYPE,
        SymbolKind.FUNCTION,
        SymbolKind.ENUM_VARIANT,
        SymbolKind.CONST,
        SymbolKind.STATIC,
    }
)


@dataclass(frozen=True)
class Crate:
    """A separately documented compilation unit."""

    name: str | None  # display name, None for unnamed crates


@dataclass(frozen=True)
class Module:
    """A module inside a crate, identified by its path from the crate root."""

    crate: Crate
    path: tuple[str, ...] = ()  # empty for the crate root


@dataclass(frozen=True)
class Symbol:
    """A resolved program entity (type, value, macro or other item)."""

    uid: str
    kind: SymbolKind
    name: str | None
    module: Module | None  # owning module, None for built-in types
    parent: "Symbol | None" = None  # owning enum of a variant

    @property
    def crate(self) -> Crate | None:
        """Return the crate that owns this symbol."""
        return self.module.crate if self.module else None

    @property
    def is_module_def(self) -> bool:
        """Check whether this symbol is an item declared directly in a module."""
        return self.kind in MODULE_DEF_KINDS
