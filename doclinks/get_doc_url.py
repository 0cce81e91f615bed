"""Logic for finding the documentation root URL of a crate."""

import logging

from doclinks.attribute_tokens import Attribute, TokenKind
from doclinks.join_url import parse_url
from doclinks.protocols import AttributeReader
from doclinks.symbol import Crate

logger = logging.getLogger(__name__)

DEFAULT_DOC_HOST = "docs.rs"
ROOT_URL_KEY = "html_root_url"


def _html_root_url(attr: Attribute) -> str | None:
    """Find the string literal assigned to `html_root_url` in a doc attribute."""
    if attr.tokens is None:
        return None
    tokens = list(attr.tokens)
    for i, tok in enumerate(tokens):
        if tok.kind is TokenKind.IDENT and tok.text == ROOT_URL_KEY:
            # Skip the identifier and the `=` that follows it.
            value = tokens[i + 2] if i + 2 < len(tokens) else None
            if value is not None and value.kind is TokenKind.LITERAL:
                return value.text
            return None
    return None


def get_doc_url(
    db: AttributeReader, crate: Crate, *, doc_host: str = DEFAULT_DOC_HOST
) -> str | None:
    """Get the root URL of the documentation of a crate.

    Uses `#![doc(html_root_url = "...")]` on the crate root when present and
    falls back to `https://<doc_host>/<crate>/*` (latest version) otherwise.
    The result always ends with exactly one `/`.
    """
    doc_url = None
    root = db.root_module(crate)
    if root is not None:
        for attr in db.attributes(root, "doc"):
            doc_url = _html_root_url(attr)
            if doc_url is not None:
                break

    if doc_url is None:
        if not crate.name:
            return None
        # TODO: pin the version once crate versions are part of the symbol index
        doc_url = f"https://{doc_host}/{crate.name}/*"

    url = doc_url.strip('"').rstrip("/") + "/"
    parsed = parse_url(url)
    if parsed is None:
        logger.debug("Ignoring unusable doc root %r for crate %s", url, crate.name)
    return parsed
