"""In-memory program database backing link resolution."""

import logging

from doclinks.attribute_tokens import Attribute, AttrToken, TokenKind
from doclinks.get_doc_url import ROOT_URL_KEY
from doclinks.module_path import ModulePath, PathKind
from doclinks.namespace import Namespace, namespaces_of
from doclinks.protocols import ImportPath, PerNamespace
from doclinks.symbol import Crate, Module, Symbol, SymbolKind

logger = logging.getLogger(__name__)

BUILTIN_TYPES = frozenset(
    {
        "bool",
        "char",
        "str",
        "f32",
        "f64",
        "i8",
        "i16",
        "i32",
        "i64",
        "i128",
        "isize",
        "u8",
        "u16",
        "u32",
        "u64",
        "u128",
        "usize",
    }
)

DefKey = tuple[str, tuple[str, ...]]  # (crate name, definition path)


class SymbolIndex:
    """Symbols of one or more crates, indexed by definition path and namespace.

    Implements the `doclinks.protocols.Database` interface: the scope of a
    symbol is the module it is defined in (a module is its own scope), and
    paths resolve the way Rust paths do, minus `use` imports.
    """

    def __init__(self) -> None:
        """Initialize an empty index."""
        self.crates: dict[str, Crate] = {}
        self.symbols: dict[str, Symbol] = {}  # uid -> symbol
        self.docs: dict[str, str] = {}  # uid -> markdown
        self.items: dict[DefKey, dict[Namespace, Symbol]] = {}
        self.public_paths: dict[tuple[str, Namespace], ImportPath] = {}
        self.module_scopes: dict[str, Module] = {}  # uid of a module -> itself
        self.module_attributes: dict[Module, list[Attribute]] = {}

    def add_crate(
        self, name: str, attributes: list[Attribute] | None = None
    ) -> Crate:
        """Register a crate and its root module."""
        crate = Crate(name)
        self.crates[name] = crate
        root = Module(crate)
        self.module_attributes[root] = list(attributes or [])
        self.add_symbol(
            Symbol(uid=name, kind=SymbolKind.MODULE, name=name, module=root),
            path=(),
            public_path=(),
        )
        return crate

    def add_symbol(
        self,
        symbol: Symbol,
        *,
        path: tuple[str, ...],
        public_path: ImportPath | None = None,
        docs: str | None = None,
        attributes: list[Attribute] | None = None,
    ) -> None:
        """Register a symbol defined at `path` inside its crate."""
        crate = symbol.crate
        if crate is None or crate.name is None:
            msg = f"Symbol {symbol.uid} does not belong to a named crate"
            raise ValueError(msg)

        self.symbols[symbol.uid] = symbol
        slots = self.items.setdefault((crate.name, path), {})
        for ns in namespaces_of(symbol.kind):
            if ns in slots:
                logger.warning(
                    "Duplicate %s item at %s::%s, keeping %s",
                    ns.value,
                    crate.name,
                    "::".join(path),
                    slots[ns].uid,
                )
                continue
            slots[ns] = symbol
            if public_path is not None:
                self.public_paths[(symbol.uid, ns)] = public_path

        if symbol.kind is SymbolKind.MODULE:
            scope = Module(crate, path)
            self.module_scopes[symbol.uid] = scope
            if attributes:
                self.module_attributes.setdefault(scope, []).extend(attributes)
        if docs:
            self.docs[symbol.uid] = docs

    def set_doc_root(self, crate: str, url: str) -> bool:
        """Give a crate a documentation root unless it declares its own.

        Returns False when the crate is not part of the index.
        """
        if crate not in self.crates:
            return False
        tokens = (
            AttrToken(TokenKind.IDENT, ROOT_URL_KEY),
            AttrToken(TokenKind.PUNCT, "="),
            AttrToken(TokenKind.LITERAL, f'"{url}"'),
        )
        root = Module(self.crates[crate])
        self.module_attributes.setdefault(root, []).append(Attribute("doc", tokens))
        return True

    def get(self, uid: str) -> Symbol | None:
        """Look up a symbol by uid."""
        return self.symbols.get(uid)

    def lookup(self, crate: str, path: tuple[str, ...]) -> dict[Namespace, Symbol]:
        """Return the items defined at `path` in `crate`, by namespace."""
        return self.items.get((crate, path), {})

    # -----------------------------
    # Database interface
    # -----------------------------

    def scope_of(self, symbol: Symbol) -> Module | None:
        """Return the module paths in the docs of `symbol` resolve from."""
        scope = self.module_scopes.get(symbol.uid)
        if scope is not None:
            return scope
        return symbol.module

    def resolve_in_scope(self, scope: object, path: ModulePath) -> PerNamespace:
        """Resolve `path` from `scope`.

        The most specific location that defines the name shadows the others,
        so a function in the current module hides a type of the same name at
        the crate root.
        """
        if not isinstance(scope, Module) or scope.crate.name is None:
            return PerNamespace()

        found: dict[Namespace, Symbol] = {}
        for key in self._candidates(scope, path):
            slots = self.items.get(key, {})
            if Namespace.TYPES in slots or Namespace.VALUES in slots:
                found = slots
                break

        types = found.get(Namespace.TYPES)
        if types is None and path.kind is PathKind.PLAIN:
            types = self._builtin(path)
        # Macros are never resolved through module paths.
        return PerNamespace(types=types, values=found.get(Namespace.VALUES))

    def path_of(
        self, crate: Crate, symbol: Symbol, namespace: Namespace
    ) -> ImportPath | None:
        """Return the public path of `symbol` in `crate`, if exported."""
        if symbol.crate != crate:
            return None
        return self.public_paths.get((symbol.uid, namespace))

    def root_module(self, crate: Crate) -> Module | None:
        """Return the root module of a known crate."""
        if crate.name is None or crate.name not in self.crates:
            return None
        return Module(crate)

    def attributes(self, module: Module, key: str) -> list[Attribute]:
        """Return the attributes named `key` on `module`."""
        return [a for a in self.module_attributes.get(module, []) if a.key == key]

    # -----------------------------
    # Path resolution
    # -----------------------------

    def _candidates(self, scope: Module, path: ModulePath) -> list[DefKey]:
        """List the definition keys `path` may refer to, most specific first."""
        crate = str(scope.crate.name)
        segments = path.segments

        if path.kind is PathKind.CRATE:
            return [(crate, segments)]
        if path.kind is PathKind.SUPER:
            if path.super_count > len(scope.path):
                return []
            base = scope.path[: len(scope.path) - path.super_count]
            return [(crate, base + segments)]
        if path.kind is PathKind.ABSOLUTE:
            return [(segments[0], segments[1:])] if segments[0] in self.crates else []

        candidates = [(crate, scope.path + segments)]
        if scope.path:
            candidates.append((crate, segments))
        if segments and segments[0] in self.crates:
            candidates.append((segments[0], segments[1:]))
        return candidates

    def _builtin(self, path: ModulePath) -> Symbol | None:
        """Resolve a primitive type name such as `u32`."""
        if len(path.segments) != 1 or path.segments[0] not in BUILTIN_TYPES:
            return None
        name = path.segments[0]
        return Symbol(uid=name, kind=SymbolKind.BUILTIN_TYPE, name=name, module=None)
