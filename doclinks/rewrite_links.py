"""Rewrite documentation links in Markdown to point to a documentation host."""

from doclinks.get_doc_url import DEFAULT_DOC_HOST
from doclinks.map_links import map_links
from doclinks.markdown_events import events_to_markdown, markdown_to_events
from doclinks.protocols import Database
from doclinks.resolve_link import resolve_link
from doclinks.symbol import Symbol


def rewrite_links(
    db: Database,
    markdown: str,
    definition: Symbol,
    *,
    doc_host: str = DEFAULT_DOC_HOST,
) -> str:
    """Rewrite the links of the documentation attached to `definition`."""

    def callback(target: str, text: str) -> tuple[str, str]:
        return resolve_link(db, definition, target, text, doc_host=doc_host)

    events = map_links(markdown_to_events(markdown), callback)
    return events_to_markdown(events)
