"""Logic for splitting attribute source text into structured tokens."""

import re
from dataclasses import dataclass
from enum import Enum

TOKEN_RE = re.compile(
    r"""
    (?P<space>\s+)
    |(?P<literal>"(?:[^"\\]|\\.)*"|-?[0-9][0-9A-Za-z_.]*)
    |(?P<ident>(?:r\#)?[A-Za-z_][A-Za-z0-9_]*)
    |(?P<open>[(\[{])
    |(?P<close>[)\]}])
    |(?P<punct>[^\sA-Za-z0-9_"()\[\]{}])
    """,
    re.VERBOSE,
)
ATTR_WRAPPER_RE = re.compile(r"^#!?\[(?P<body>.*)\]$", re.DOTALL)
CLOSERS = {"(": ")", "[": "]", "{": "}"}


class TokenKind(Enum):
    """Kind of a token inside an attribute."""

    IDENT = "ident"
    PUNCT = "punct"
    LITERAL = "literal"
    GROUP = "group"


@dataclass(frozen=True)
class AttrToken:
    """A leaf token, or a delimited group of tokens."""

    kind: TokenKind
    text: str  # literal text keeps its quotes; groups hold their delimiter
    children: tuple["AttrToken", ...] = ()


@dataclass(frozen=True)
class Attribute:
    """An attribute attached to an item, e.g. `doc(html_root_url = "...")`."""

    key: str
    tokens: tuple[AttrToken, ...] | None  # None for the `key = "value"` form


def tokenize_attribute(text: str) -> list[AttrToken] | None:
    """Split attribute text into a token tree, or None if it does not lex."""
    stack: list[tuple[str, list[AttrToken]]] = [("", [])]
    pos = 0
    while pos < len(text):
        m = TOKEN_RE.match(text, pos)
        if not m:
            return None
        pos = m.end()
        group = m.lastgroup
        value = m.group()
        if group == "space":
            continue
        if group == "open":
            stack.append((value, []))
        elif group == "close":
            opener, children = stack.pop()
            if len(stack) == 0 or CLOSERS.get(opener) != value:
                return None
            stack[-1][1].append(
                AttrToken(TokenKind.GROUP, opener, tuple(children)),
            )
        else:
            stack[-1][1].append(AttrToken(TokenKind(group), value))
    if len(stack) != 1:
        return None
    return stack[0][1]


def parse_attribute(text: str) -> Attribute | None:
    """Parse `key(...)`, `key = value` or `#![key(...)]` attribute text."""
    text = text.strip()
    m = ATTR_WRAPPER_RE.match(text)
    if m:
        text = m.group("body").strip()

    tokens = tokenize_attribute(text)
    if not tokens or tokens[0].kind is not TokenKind.IDENT:
        return None
    key = tokens[0].text
    rest = tokens[1:]
    if len(rest) == 1 and rest[0].kind is TokenKind.GROUP and rest[0].text == "(":
        return Attribute(key=key, tokens=rest[0].children)
    return Attribute(key=key, tokens=None)
