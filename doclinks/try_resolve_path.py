"""Logic for resolving doc-generator relative links (`../gadget/struct.Gizmo.html`)."""

from doclinks.get_doc_url import DEFAULT_DOC_HOST, get_doc_url
from doclinks.get_symbol_filename import get_symbol_dir, get_symbol_filename
from doclinks.join_url import join_url
from doclinks.namespace import Namespace
from doclinks.protocols import Database
from doclinks.symbol import Symbol


def is_path_link(link: str) -> bool:
    """Check if a link looks like a reference into generated documentation."""
    return "#" in link or ".html" in link


def try_resolve_path(
    db: Database,
    definition: Symbol,
    link: str,
    *,
    doc_host: str = DEFAULT_DOC_HOST,
) -> str | None:
    """Try to resolve a relative link from the page of the documented item."""
    if not is_path_link(link) or not definition.is_module_def:
        return None

    crate = definition.crate
    if crate is None or not crate.name:
        return None
    import_path = db.path_of(crate, definition, Namespace.TYPES)
    if import_path is None:
        return None
    base = get_symbol_dir(definition, [crate.name, *import_path])

    filename = get_symbol_filename(definition)
    if filename is None:
        return None

    url = join_url(get_doc_url(db, crate, doc_host=doc_host), base)
    url = join_url(url, filename)
    return join_url(url, link)
