"""Tests for namespace disambiguators."""

from doclinks.namespace import Namespace, namespaces_of
from doclinks.strip_prefixes_suffixes import strip_prefixes_suffixes
from doclinks.symbol import SymbolKind


def test_from_intra_spec_plain_path() -> None:
    """Verify that a plain path requests no namespace."""
    assert Namespace.from_intra_spec("Gizmo") is None
    assert Namespace.from_intra_spec("gadget::Gizmo") is None
    assert Namespace.from_intra_spec("") is None


def test_from_intra_spec_separator_one_past_prefix() -> None:
    """Verify the separator is looked up one character after the prefix."""
    assert Namespace.from_intra_spec("struct Gizmo") is None
    assert Namespace.from_intra_spec("struct  Gizmo") is Namespace.TYPES
    assert Namespace.from_intra_spec("fn@spin") is None
    assert Namespace.from_intra_spec("fn @spin") is Namespace.VALUES
    assert Namespace.from_intra_spec("fn  spin") is Namespace.VALUES


def test_from_intra_spec_types_checked_first() -> None:
    """Verify that `mod` and `module` resolve to types before values."""
    assert Namespace.from_intra_spec("mod  gadget") is Namespace.TYPES
    assert Namespace.from_intra_spec("module  gadget") is Namespace.TYPES


def test_from_intra_spec_macros() -> None:
    """Verify that the macro prefix selects the macro namespace."""
    assert Namespace.from_intra_spec("macro  gizmo") is Namespace.MACROS


def test_from_intra_spec_suffix_tokens_match_as_prefixes() -> None:
    """Verify that suffix tokens are matched at the start of the target."""
    assert Namespace.from_intra_spec("()  spin") is Namespace.VALUES
    assert Namespace.from_intra_spec("spin()") is None
    assert Namespace.from_intra_spec("gizmo!") is None


def test_namespaces_of() -> None:
    """Verify the namespaces each kind of item is declared in."""
    assert namespaces_of(SymbolKind.STRUCT) == (Namespace.TYPES,)
    assert namespaces_of(SymbolKind.MODULE) == (Namespace.TYPES,)
    assert namespaces_of(SymbolKind.FUNCTION) == (Namespace.VALUES,)
    assert namespaces_of(SymbolKind.CONST) == (Namespace.VALUES,)
    assert namespaces_of(SymbolKind.ENUM_VARIANT) == (
        Namespace.TYPES,
        Namespace.VALUES,
    )
    assert namespaces_of(SymbolKind.MACRO) == (Namespace.MACROS,)
    assert namespaces_of(SymbolKind.LOCAL) == ()


def test_strip_prefixes_and_suffixes() -> None:
    """Verify that disambiguators and code marks are removed."""
    assert strip_prefixes_suffixes("struct Gizmo") == "Gizmo"
    assert strip_prefixes_suffixes("fn@spin") == "spin"
    assert strip_prefixes_suffixes("spin()") == "spin"
    assert strip_prefixes_suffixes("gizmo!") == "gizmo"
    assert strip_prefixes_suffixes("`Gizmo`") == "Gizmo"
    assert strip_prefixes_suffixes("gadget::Gizmo") == "gadget::Gizmo"


def test_strip_removes_raw_prefix_text() -> None:
    """Verify that prefixes are removed even when they begin a longer word."""
    assert strip_prefixes_suffixes("modules") == "ules"
    assert strip_prefixes_suffixes("typeface") == "face"


def test_strip_is_idempotent() -> None:
    """Verify that stripping an already stripped string changes nothing."""
    for s in ("struct  Gizmo", "`fn@spin()`", "macro @gizmo!", "Shape::Circle"):
        once = strip_prefixes_suffixes(s)
        assert strip_prefixes_suffixes(once) == once
