"""Logic for rewriting the links of a Markdown event stream."""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace

from doclinks.events import Event, EventKind

LinkCallback = Callable[[str, str], tuple[str, str]]


def map_links(events: Iterable[Event], callback: LinkCallback) -> Iterator[Event]:
    """Rewrite link targets and texts with `callback(target, text)`.

    Every text or code span inside a link is passed to the callback together
    with the current target; its result replaces both, so the last call
    decides the final target. Link titles are dropped.
    """
    pending_target: str | None = None  # None while outside a link

    for event in events:
        if event.kind is EventKind.LINK_START:
            pending_target = event.target
            yield event
        elif event.kind is EventKind.LINK_END:
            target = event.target if pending_target is None else pending_target
            pending_target = None
            yield replace(event, target=target, title="")
        elif pending_target is not None and event.kind in (
            EventKind.TEXT,
            EventKind.CODE,
        ):
            pending_target, new_text = callback(pending_target, event.text)
            yield replace(event, text=new_text)
        else:
            yield event
