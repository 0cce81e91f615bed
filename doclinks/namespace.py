"""Namespaces and the disambiguator tables used by intra-doc links."""

from enum import Enum

from doclinks.symbol import SymbolKind


class Namespace(Enum):
    """The namespace an intra-doc link resolves in."""

    TYPES = "types"
    VALUES = "values"
    MACROS = "macros"

    @classmethod
    def from_intra_spec(cls, s: str) -> "Namespace | None":
        """Extract the namespace requested by a link target, if it names one.

        `struct  Gizmo` -> TYPES, `fn @spin` -> VALUES. The separator is looked
        up one character past the end of the prefix, so `struct Gizmo` and
        `fn@spin` carry no disambiguator.
        """
        for ns in cls:
            prefixes, suffixes = DISAMBIGUATORS[ns]
            if any(_has_separator(s, token) for token in (*prefixes, *suffixes)):
                return ns
        return None


def _has_separator(s: str, token: str) -> bool:
    """Check `s` starts with `token` followed (after one char) by a separator."""
    pos = len(token) + 1
    return s.startswith(token) and pos < len(s) and s[pos] in ("@", " ")


TYPES: tuple[tuple[str, ...], tuple[str, ...]] = (
    ("type", "struct", "enum", "mod", "trait", "union", "module"),
    (),
)
VALUES: tuple[tuple[str, ...], tuple[str, ...]] = (
    ("value", "function", "fn", "method", "const", "static", "mod", "module"),
    ("()",),
)
MACROS: tuple[tuple[str, ...], tuple[str, ...]] = (("macro",), ("!",))

# Checked in declaration order: the first matching namespace wins.
DISAMBIGUATORS: dict[Namespace, tuple[tuple[str, ...], tuple[str, ...]]] = {
    Namespace.TYPES: TYPES,
    Namespace.VALUES: VALUES,
    Namespace.MACROS: MACROS,
}

_TYPE_KINDS = frozenset(
    {
        SymbolKind.STRUCT,
        SymbolKind.ENUM,
        SymbolKind.UNION,
        SymbolKind.MODULE,
        SymbolKind.TRAIT,
        SymbolKind.TYPE_ALIAS,
        SymbolKind.BUILTIN_TYPE,
        SymbolKind.ENUM_VARIANT,
    }
)
_VALUE_KINDS = frozenset(
    {
        SymbolKind.FUNCTION,
        SymbolKind.CONST,
        SymbolKind.STATIC,
        SymbolKind.ENUM_VARIANT,
    }
)


def namespaces_of(kind: SymbolKind) -> tuple[Namespace, ...]:
    """Return the namespaces an item of the given kind is declared in."""
    found: list[Namespace] = []
    if kind in _TYPE_KINDS:
        found.append(Namespace.TYPES)
    if kind in _VALUE_KINDS:
        found.append(Namespace.VALUES)
    if kind is SymbolKind.MACRO:
        found.append(Namespace.MACROS)
    return tuple(found)
