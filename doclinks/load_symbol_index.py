"""Logic for loading a symbol index from a YAML description of crates."""

import logging
from pathlib import Path
from typing import Any

import yaml

from doclinks.attribute_tokens import Attribute, parse_attribute
from doclinks.symbol import Crate, Module, Symbol, SymbolKind
from doclinks.symbol_index import SymbolIndex

logger = logging.getLogger(__name__)

KIND_ALIASES = {
    "function": "fn",
    "mod": "module",
    "type_alias": "type",
    "enum_variant": "variant",
    "builtin": "primitive",
}


def split_path(path: object) -> tuple[str, ...]:
    """Split a `a::b::C` path into its segments."""
    if path is None:
        return ()
    return tuple(p for p in str(path).split("::") if p)


def parse_kind(raw: object) -> SymbolKind | None:
    """Parse an item kind, accepting a few common spellings."""
    k = str(raw or "").strip().lower()
    try:
        return SymbolKind(KIND_ALIASES.get(k, k))
    except ValueError:
        return None


def _parse_attributes(raw: object) -> list[Attribute]:
    """Parse a list of attribute source strings, skipping unreadable ones."""
    attrs = []
    for text in raw or []:
        attr = parse_attribute(str(text))
        if attr is None:
            logger.warning("Ignoring unparseable attribute: %s", text)
            continue
        attrs.append(attr)
    return attrs


def _add_item(
    index: SymbolIndex, crate: Crate, it: dict[str, Any], kind: SymbolKind
) -> None:
    """Add one item of a crate to the index."""
    path = split_path(it.get("path") or it.get("name"))
    if not path:
        logger.warning("Skipping %s item without a path in %s", kind.value, crate.name)
        return
    uid = str(it.get("uid") or "::".join([str(crate.name), *path]))
    name = it.get("name") or path[-1]

    parent = None
    module_path = path[:-1]
    if kind is SymbolKind.ENUM_VARIANT:
        parent_uid = it.get("parent")
        if parent_uid:
            parent = index.get(str(parent_uid))
        else:
            siblings = index.lookup(str(crate.name), path[:-1]).values()
            parent = next((s for s in siblings if s.kind is SymbolKind.ENUM), None)
        if parent is None or parent.kind is not SymbolKind.ENUM:
            logger.warning("Skipping variant %s: parent enum not found", uid)
            return
        module_path = parent.module.path if parent.module else path[:-2]

    public_path = it.get("public_path")
    index.add_symbol(
        Symbol(
            uid=uid,
            kind=kind,
            name=str(name),
            module=Module(crate, module_path),
            parent=parent,
        ),
        path=path,
        public_path=None if public_path is None else split_path(public_path),
        docs=it.get("docs"),
        attributes=_parse_attributes(it.get("attributes")),
    )


def build_symbol_index(doc: dict[str, Any]) -> SymbolIndex:
    """Build a symbol index from a parsed YAML document."""
    index = SymbolIndex()
    for raw in doc.get("crates") or []:
        if not isinstance(raw, dict) or not raw.get("name"):
            logger.warning("Skipping crate entry without a name")
            continue
        crate = index.add_crate(
            str(raw["name"]), _parse_attributes(raw.get("attributes"))
        )
        if raw.get("docs"):
            index.docs[str(crate.name)] = str(raw["docs"])

        items = [it for it in raw.get("items") or [] if isinstance(it, dict)]
        kinds = [parse_kind(it.get("kind")) for it in items]
        # Variants need their enum, so they are added last.
        ordered = sorted(
            zip(items, kinds, strict=True),
            key=lambda pair: pair[1] is SymbolKind.ENUM_VARIANT,
        )
        for it, kind in ordered:
            if kind is None:
                logger.warning("Skipping item with unknown kind: %s", it.get("kind"))
                continue
            _add_item(index, crate, it, kind)
    return index


def load_symbol_index(path: Path) -> SymbolIndex:
    """Load and index a YAML symbol file."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    return build_symbol_index(doc or {})
