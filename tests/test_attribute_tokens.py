"""Tests for attribute tokenizing."""

from doclinks.attribute_tokens import (
    Attribute,
    AttrToken,
    TokenKind,
    parse_attribute,
    tokenize_attribute,
)


def test_tokenize_groups() -> None:
    """Verify that delimited groups become nested tokens."""
    tokens = tokenize_attribute('doc(html_root_url = "https://x.example/")')
    assert tokens is not None
    assert tokens[0] == AttrToken(TokenKind.IDENT, "doc")
    group = tokens[1]
    assert group.kind is TokenKind.GROUP
    assert group.text == "("
    assert [t.kind for t in group.children] == [
        TokenKind.IDENT,
        TokenKind.PUNCT,
        TokenKind.LITERAL,
    ]
    assert group.children[2].text == '"https://x.example/"'


def test_tokenize_rejects_unbalanced() -> None:
    """Verify that unbalanced delimiters fail to tokenize."""
    assert tokenize_attribute("doc(a") is None
    assert tokenize_attribute("doc(a]") is None
    assert tokenize_attribute("doc)") is None


def test_parse_attribute_call_form() -> None:
    """Verify that `key(...)` keeps the group contents as tokens."""
    attr = parse_attribute('#![doc(html_root_url = "https://x.example/")]')
    assert attr is not None
    assert attr.key == "doc"
    assert attr.tokens is not None
    assert attr.tokens[0] == AttrToken(TokenKind.IDENT, "html_root_url")


def test_parse_attribute_assignment_form() -> None:
    """Verify that `key = value` carries no token list."""
    assert parse_attribute('doc = "Widgets."') == Attribute("doc", None)
    assert parse_attribute("inline") == Attribute("inline", None)


def test_parse_attribute_invalid() -> None:
    """Verify that text without a leading identifier is rejected."""
    assert parse_attribute("") is None
    assert parse_attribute('"doc"') is None
    assert parse_attribute("doc(") is None
