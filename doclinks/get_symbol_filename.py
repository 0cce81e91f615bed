"""Utility for determining the documentation page filename of a symbol."""

from collections.abc import Iterable

from doclinks.symbol import Symbol, SymbolKind

PAGE_PREFIXES: dict[SymbolKind, str] = {
    SymbolKind.STRUCT: "struct",
    SymbolKind.ENUM: "enum",
    SymbolKind.UNION: "union",
    SymbolKind.TRAIT: "trait",
    SymbolKind.TYPE_ALIAS: "type",
    SymbolKind.BUILTIN_TYPE: "primitive",
    SymbolKind.FUNCTION: "fn",
    SymbolKind.CONST: "const",
    SymbolKind.STATIC: "static",
    SymbolKind.MACRO: "macro",
}


def get_symbol_filename(symbol: Symbol) -> str | None:
    """Get the filename (and anchor) the doc generator produces for a symbol.

    Example: `struct.Gizmo.html`, `enum.Shape.html#variant.Circle`.
    """
    if symbol.kind is SymbolKind.MODULE:
        return "index.html"

    if not symbol.name:
        return None

    if symbol.kind is SymbolKind.ENUM_VARIANT:
        parent = symbol.parent
        if parent is None or not parent.name:
            return None
        return f"enum.{parent.name}.html#variant.{symbol.name}"

    prefix = PAGE_PREFIXES.get(symbol.kind)
    if prefix is None:
        return None
    return f"{prefix}.{symbol.name}.html"


def get_symbol_dir(symbol: Symbol, segments: Iterable[str]) -> str:
    """Join path segments into the relative directory part of a symbol's URL.

    Module pages live inside their own directory (`gadget/index.html`), so a
    module path keeps a trailing slash; for other items the last segment is
    replaced by the page filename when the URLs are joined. A variant is
    documented on its enum's page, so its own segment is dropped first.
    """
    parts = list(segments)
    if symbol.kind is SymbolKind.ENUM_VARIANT:
        parts = parts[:-1]
    rel = "/".join(parts)
    if rel and symbol.kind is SymbolKind.MODULE:
        rel += "/"
    return rel
