"""Logic for resolving intra-doc links (`super::gadget::Gizmo`) to URLs.

An intra-doc link names a symbol by path, optionally with a namespace
disambiguator (`struct Gizmo`, `spin()`). The path is resolved from the scope
of the documented item and the target's canonical public path is used to
build its page URL under the crate's documentation root.
"""

import logging

from doclinks.get_doc_url import DEFAULT_DOC_HOST, get_doc_url
from doclinks.get_symbol_filename import get_symbol_dir, get_symbol_filename
from doclinks.join_url import join_url
from doclinks.module_path import parse_module_path
from doclinks.namespace import MACROS, Namespace
from doclinks.protocols import Database, PerNamespace
from doclinks.strip_prefixes_suffixes import strip_prefixes_suffixes
from doclinks.symbol import Symbol

logger = logging.getLogger(__name__)


def _is_macro_request(target: str) -> bool:
    """Check whether a target carries a macro suffix such as `panic!`."""
    target = target.strip("`").strip()
    return any(target.endswith(suffix) for suffix in MACROS[1])


def _select(
    resolved: PerNamespace, namespace: Namespace | None
) -> tuple[Symbol, Namespace] | None:
    """Pick the symbol a link refers to, preferring types when unqualified."""
    if namespace is None:
        if resolved.types is not None:
            return resolved.types, Namespace.TYPES
        if resolved.values is not None:
            return resolved.values, Namespace.VALUES
        return None
    if namespace is Namespace.TYPES and resolved.types is not None:
        return resolved.types, namespace
    if namespace is Namespace.VALUES and resolved.values is not None:
        return resolved.values, namespace
    return None


def try_resolve_intra(
    db: Database,
    definition: Symbol,
    link_text: str,
    link_target: str,
    *,
    doc_host: str = DEFAULT_DOC_HOST,
) -> tuple[str, str] | None:
    """Try to resolve an intra-doc link to `(url, display_text)`."""
    # Shortcut links use their text as the target: [`Gizmo`]
    if not link_target:
        link_target = link_text.strip("`")

    namespace = Namespace.from_intra_spec(link_target)
    if namespace is Namespace.MACROS or _is_macro_request(link_target):
        logger.debug("Macro links are not supported: %s", link_target)
        return None

    path = parse_module_path(strip_prefixes_suffixes(link_target))
    if path is None:
        return None

    scope = db.scope_of(definition)
    if scope is None:
        return None

    selected = _select(db.resolve_in_scope(scope, path), namespace)
    if selected is None:
        logger.debug("Unresolved intra-doc link %s from %s", path, definition.uid)
        return None
    symbol, namespace = selected

    crate = symbol.crate
    if crate is None or not crate.name:
        return None

    import_path = db.path_of(crate, symbol, namespace)
    if import_path is None:
        logger.debug("%s has no public path in %s", symbol.uid, crate.name)
        return None

    filename = get_symbol_filename(symbol)
    if filename is None:
        return None

    url = join_url(get_doc_url(db, crate, doc_host=doc_host), f"{crate.name}/")
    # Modules keep their own directory and variants use the enum page (DESIGN.md).
    url = join_url(url, get_symbol_dir(symbol, import_path))
    url = join_url(url, filename)
    if url is None:
        return None
    return url, strip_prefixes_suffixes(link_text)
