"""Logic for choosing how a single documentation link gets resolved."""

import logging

from doclinks.get_doc_url import DEFAULT_DOC_HOST
from doclinks.protocols import Database
from doclinks.symbol import Symbol
from doclinks.try_resolve_intra import try_resolve_intra
from doclinks.try_resolve_path import try_resolve_path

logger = logging.getLogger(__name__)


def resolve_link(
    db: Database,
    definition: Symbol,
    target: str,
    text: str,
    *,
    doc_host: str = DEFAULT_DOC_HOST,
) -> tuple[str, str]:
    """Resolve a link to `(target, text)`, keeping it unchanged on failure."""
    # Some intra-doc links are also valid URLs; anything with a scheme wins.
    if "://" in target:
        return target, text

    # Two possibilities:
    # * intra-doc links: `super::gadget::Gizmo`
    # * path-based links: `../gadget/struct.Gizmo.html`
    resolved = try_resolve_intra(db, definition, text, target, doc_host=doc_host)
    if resolved is not None:
        return resolved

    url = try_resolve_path(db, definition, target, doc_host=doc_host)
    if url is not None:
        return url, text

    logger.debug("Leaving link %r (%r) unresolved", target, text)
    return target, text
