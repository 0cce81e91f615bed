"""Data models for the Markdown event stream."""

from dataclasses import dataclass
from enum import Enum

from markdown_it.token import Token


class EventKind(Enum):
    """Tag of a Markdown event."""

    TEXT = "text"
    CODE = "code"
    LINK_START = "link_start"
    LINK_END = "link_end"
    INLINE_START = "inline_start"  # start of a block's inline content
    INLINE_END = "inline_end"
    OTHER = "other"


@dataclass(frozen=True)
class Event:
    """One node of a Markdown document, in document order."""

    kind: EventKind
    text: str = ""  # TEXT and CODE content
    target: str = ""  # LINK_START / LINK_END destination
    title: str = ""
    token: Token | None = None  # parser token the event came from


def text(content: str) -> Event:
    """Build a TEXT event."""
    return Event(EventKind.TEXT, text=content)


def code(content: str) -> Event:
    """Build a CODE event."""
    return Event(EventKind.CODE, text=content)


def link_start(target: str, title: str = "") -> Event:
    """Build a LINK_START event."""
    return Event(EventKind.LINK_START, target=target, title=title)


def link_end(target: str, title: str = "") -> Event:
    """Build a LINK_END event."""
    return Event(EventKind.LINK_END, target=target, title=title)
