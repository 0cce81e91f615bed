"""Interfaces of the program database that link resolution reads from.

The rewriter never builds symbols or scopes itself; it asks a `Database` for
them. `doclinks.symbol_index.SymbolIndex` is the YAML-backed implementation
used by the CLI, and tests substitute their own doubles.
"""

from dataclasses import dataclass
from typing import Protocol

from doclinks.attribute_tokens import Attribute
from doclinks.module_path import ModulePath
from doclinks.namespace import Namespace
from doclinks.symbol import Crate, Module, Symbol

# Canonical exported path of an item, including the item's own name.
ImportPath = tuple[str, ...]


@dataclass(frozen=True)
class PerNamespace:
    """Result of resolving one path: at most one symbol per namespace."""

    types: Symbol | None = None
    values: Symbol | None = None
    macros: Symbol | None = None


class SymbolResolver(Protocol):
    """Resolves module paths relative to the location of a symbol."""

    def scope_of(self, symbol: Symbol) -> object | None:
        """Return the resolution scope that applies where `symbol` is defined."""
        ...

    def resolve_in_scope(self, scope: object, path: ModulePath) -> PerNamespace:
        """Resolve `path` within `scope`, split by namespace."""
        ...


class ImportIndex(Protocol):
    """Per-crate index of the canonical public path of each item."""

    def path_of(
        self, crate: Crate, symbol: Symbol, namespace: Namespace
    ) -> ImportPath | None:
        """Return the public path of `symbol` in `namespace`, if it has one."""
        ...


class AttributeReader(Protocol):
    """Attribute introspection on module items."""

    def root_module(self, crate: Crate) -> Module | None:
        """Return the root module of `crate`."""
        ...

    def attributes(self, module: Module, key: str) -> list[Attribute]:
        """Return the attributes named `key` attached to `module`."""
        ...


class Database(SymbolResolver, ImportIndex, AttributeReader, Protocol):
    """Everything link resolution needs to know about a program."""
