"""Logic for parsing link targets into module paths."""

import re
from dataclasses import dataclass
from enum import Enum

IDENT_RE = re.compile(r"^(?:r#)?[A-Za-z_][A-Za-z0-9_]*$")
GENERIC_ARGS_RE = re.compile(r"<[^<>]*>")

KEYWORDS = frozenset({"crate", "self", "super", "Self"})

MAX_GENERIC_DEPTH = 8  # deepest `<...>` nesting stripped from a path


class PathKind(Enum):
    """Where a module path starts resolving from."""

    PLAIN = "plain"
    SUPER = "super"  # self:: is SUPER with a count of zero
    CRATE = "crate"
    ABSOLUTE = "absolute"  # leading ::, first segment names a crate


@dataclass(frozen=True)
class ModulePath:
    """A parsed `a::b::C` style path."""

    kind: PathKind
    segments: tuple[str, ...]
    super_count: int = 0

    def __str__(self) -> str:
        """Render the path back in `::` form."""
        if self.kind is PathKind.CRATE:
            head = ["crate"]
        elif self.kind is PathKind.SUPER:
            head = ["super"] * self.super_count if self.super_count else ["self"]
        elif self.kind is PathKind.ABSOLUTE:
            head = [""]
        else:
            head = []
        return "::".join([*head, *self.segments])


def _strip_generic_args(text: str) -> str | None:
    """Remove `<...>` generic arguments, or return None if they are unbalanced."""
    for _ in range(MAX_GENERIC_DEPTH):
        stripped = GENERIC_ARGS_RE.sub("", text)
        if stripped == text:
            break
        text = stripped
    if "<" in text or ">" in text:
        return None
    return text


def parse_module_path(text: str) -> ModulePath | None:
    """Parse a link target as a module path, or return None if it is not one."""
    text = _strip_generic_args(text.strip())
    if not text:
        return None

    kind = PathKind.PLAIN
    if text.startswith("::"):
        kind = PathKind.ABSOLUTE
        text = text[2:]

    parts = text.split("::")
    if any(not IDENT_RE.match(p) for p in parts):
        return None

    super_count = 0
    i = 0
    if kind is PathKind.PLAIN:
        if parts[0] == "crate":
            kind = PathKind.CRATE
            i = 1
        elif parts[0] == "self":
            kind = PathKind.SUPER
            i = 1
        while i < len(parts) and parts[i] == "super" and kind is not PathKind.CRATE:
            kind = PathKind.SUPER
            super_count += 1
            i += 1

    segments = tuple(p.removeprefix("r#") for p in parts[i:])
    # Keywords are only valid as a leading qualifier.
    if any(s in KEYWORDS for s in segments):
        return None
    if not segments and kind is PathKind.ABSOLUTE:
        return None
    return ModulePath(kind=kind, segments=segments, super_count=super_count)
