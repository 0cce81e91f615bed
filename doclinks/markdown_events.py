"""Conversion between Markdown text and the event stream.

Parsing is done by markdown-it-py (CommonMark) and serialization by mdformat's
Markdown renderer. Block tokens pass through as OTHER events; the inline
children of each block are flattened between INLINE_START and INLINE_END so
links can be rewritten in a single forward pass.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.helpers import parseLinkLabel
from markdown_it.rules_inline import StateInline
from markdown_it.token import Token
from mdformat.renderer import MDRenderer

from doclinks.events import Event, EventKind

RENDER_OPTIONS: dict[str, Any] = {
    "parser_extension": [],
    "codeformatters": {},
    "mdformat": {"wrap": "keep", "number": False, "end_of_line": "lf"},
}


def broken_link_rule(state: StateInline, silent: bool) -> bool:
    """Turn reference links without a definition into links to their label.

    `[Gizmo]`, `[Gizmo][]` and `[the gizmo][Gizmo]` all become links whose
    href and title are `Gizmo`. A label spanning lines links to the label
    with its whitespace collapsed. Runs after the regular `link` rule, so only
    references that rule rejected reach it.
    """
    if state.src[state.pos] != "[" or state.linkLevel > 0:
        return False

    label_start = state.pos + 1
    label_end = parseLinkLabel(state, state.pos, True)
    if label_end < 0:
        return False

    pos = label_end + 1
    label = ""
    if pos < state.posMax and state.src[pos] == "[":
        ref_end = parseLinkLabel(state, pos)
        if ref_end >= 0:
            label = state.src[pos + 1 : ref_end]
            pos = ref_end + 1
    if not label:
        label = state.src[label_start:label_end]
    # Labels may wrap across lines; whitespace runs match as one space.
    label = " ".join(label.split())
    if not label:
        return False

    if not silent:
        maximum = state.posMax
        state.pos = label_start
        state.posMax = label_end

        token = state.push("link_open", "a", 1)
        token.attrs = {"href": label, "title": label}

        state.linkLevel += 1
        state.md.inline.tokenize(state)
        state.linkLevel -= 1

        state.push("link_close", "a", -1)
        state.posMax = maximum

    state.pos = pos
    return True


class DocParser(MarkdownIt):
    """CommonMark parser that keeps link destinations as written.

    Intra-doc targets such as `fn  spin` must reach the resolver without
    percent-encoding.
    """

    def normalizeLink(self, url: str) -> str:  # noqa: N802
        """Return the destination unchanged."""
        return url


def build_parser() -> MarkdownIt:
    """Create the CommonMark parser used for documentation comments."""
    md = DocParser("commonmark")
    md.inline.ruler.after("link", "broken_link", broken_link_rule)
    return md


def _inline_events(children: list[Token]) -> Iterator[Event]:
    """Map the inline tokens of one block to events."""
    href = ""
    for child in children:
        if child.type == "link_open":
            href = str(child.attrGet("href") or "")
            title = str(child.attrGet("title") or "")
            yield Event(EventKind.LINK_START, target=href, title=title, token=child)
        elif child.type == "link_close":
            yield Event(EventKind.LINK_END, target=href, token=child)
        elif child.type == "text":
            yield Event(EventKind.TEXT, text=child.content, token=child)
        elif child.type == "code_inline":
            yield Event(EventKind.CODE, text=child.content, token=child)
        else:
            yield Event(EventKind.OTHER, token=child)


def markdown_to_events(
    markdown: str, parser: MarkdownIt | None = None
) -> Iterator[Event]:
    """Parse Markdown into a stream of events."""
    md = parser or build_parser()
    for token in md.parse(markdown):
        if token.type != "inline" or not token.children:
            yield Event(EventKind.OTHER, token=token)
            continue
        yield Event(EventKind.INLINE_START, token=token)
        yield from _inline_events(token.children)
        yield Event(EventKind.INLINE_END, token=token)


def _event_token(event: Event) -> Token:
    """Build the parser token for an event, reusing its original token."""
    if event.kind is EventKind.TEXT:
        if event.token is None:
            return Token("text", "", 0, content=event.text)
        return event.token.copy(content=event.text)
    if event.kind is EventKind.CODE:
        if event.token is None:
            return Token("code_inline", "code", 0, content=event.text, markup="`")
        return event.token.copy(content=event.text)
    if event.kind is EventKind.LINK_START:
        if event.token is None:
            return Token("link_open", "a", 1)
        return event.token.copy(attrs=dict(event.token.attrs))
    if event.kind is EventKind.LINK_END:
        if event.token is None:
            return Token("link_close", "a", -1)
        return event.token.copy()
    if event.token is None:
        msg = f"{event.kind.value} event has no token to render"
        raise ValueError(msg)
    return event.token


def events_to_markdown(events: Iterable[Event]) -> str:
    """Render an event stream back to Markdown.

    A link's destination is taken from its LINK_END event; an empty title
    removes the title.
    """
    tokens: list[Token] = []
    children: list[Token] | None = None
    open_link: Token | None = None

    for event in events:
        if event.kind is EventKind.INLINE_START:
            children = []
            continue
        if event.kind is EventKind.INLINE_END:
            if event.token is None:
                tokens.append(Token("inline", "", 0, children=children or []))
            else:
                tokens.append(event.token.copy(children=children or []))
            children = None
            continue

        token = _event_token(event)
        if event.kind is EventKind.LINK_START:
            open_link = token
        elif event.kind is EventKind.LINK_END and open_link is not None:
            open_link.attrs = {"href": event.target}
            if event.title:
                open_link.attrs["title"] = event.title
            open_link = None
        (tokens if children is None else children).append(token)

    # Links are written inline, so no reference definitions are emitted.
    env: dict[str, Any] = {"indent_width": 0, "used_refs": set()}
    return MDRenderer().render(tokens, RENDER_OPTIONS, env)
