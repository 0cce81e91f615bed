"""Tests for parsing link targets as module paths."""

from doclinks.module_path import ModulePath, PathKind, parse_module_path


def test_parse_plain_path() -> None:
    """Verify parsing of a plain multi-segment path."""
    path = parse_module_path("gadget::Gizmo")
    assert path == ModulePath(PathKind.PLAIN, ("gadget", "Gizmo"))
    assert str(path) == "gadget::Gizmo"


def test_parse_qualified_paths() -> None:
    """Verify `crate`, `self`, `super` and leading `::` qualifiers."""
    assert parse_module_path("crate::Widget") == ModulePath(
        PathKind.CRATE, ("Widget",)
    )
    assert parse_module_path("crate") == ModulePath(PathKind.CRATE, ())
    assert parse_module_path("self::Gizmo") == ModulePath(
        PathKind.SUPER, ("Gizmo",), 0
    )
    assert parse_module_path("super::super::Widget") == ModulePath(
        PathKind.SUPER, ("Widget",), 2
    )
    assert parse_module_path("::gears::Gear") == ModulePath(
        PathKind.ABSOLUTE, ("gears", "Gear")
    )


def test_parse_strips_generic_arguments() -> None:
    """Verify that generic arguments are ignored."""
    path = parse_module_path("Vec<Option<u8>>")
    assert path == ModulePath(PathKind.PLAIN, ("Vec",))
    assert parse_module_path("Vec<u8") is None


def test_parse_raw_identifier() -> None:
    """Verify that raw identifiers lose their `r#` marker."""
    assert parse_module_path("r#type") == ModulePath(PathKind.PLAIN, ("type",))


def test_parse_rejects_non_paths() -> None:
    """Verify that text which is not a path is rejected."""
    assert parse_module_path("") is None
    assert parse_module_path("not a path") is None
    assert parse_module_path("../struct.Widget.html") is None
    assert parse_module_path("#method.spin") is None
    assert parse_module_path("gadget::") is None
    assert parse_module_path("gadget::crate") is None
    assert parse_module_path("::") is None


def test_module_path_str() -> None:
    """Verify rendering paths back to text."""
    assert str(ModulePath(PathKind.SUPER, ("Widget",), 2)) == "super::super::Widget"
    assert str(ModulePath(PathKind.SUPER, ("Gizmo",))) == "self::Gizmo"
    assert str(ModulePath(PathKind.ABSOLUTE, ("gears",))) == "::gears"
