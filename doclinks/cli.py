"""Command line entry point for rewriting documentation links.

Reads a YAML symbol index and rewrites the links in the Markdown docs of one
symbol (from a file, stdin, or the index itself), or of every documented
symbol in the index.
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Any

from doclinks.load_config import load_config
from doclinks.load_symbol_index import load_symbol_index
from doclinks.rewrite_links import rewrite_links
from doclinks.symbol_index import SymbolIndex

logger = logging.getLogger(__name__)

# Conservative: keep letters, digits, underscore, dash.
UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9_-]+")


def uid_filename(uid: str) -> str:
    """Make a stable Markdown filename for a symbol uid."""
    name = UNSAFE_FILENAME_RE.sub("-", uid).strip("-")
    return f"{name or 'Unknown'}.md"


def _init_infra(args: argparse.Namespace) -> tuple[dict[str, Any], SymbolIndex]:
    """Load configuration, set up logging and load the symbol index."""
    config = load_config(args.config)
    if args.doc_host:
        config["doc_host"] = args.doc_host

    level = "DEBUG" if args.verbose else config["logging"]["level"]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not args.symbols.exists():
        msg = f"Symbol index not found: {args.symbols}"
        raise SystemExit(msg)
    index = load_symbol_index(args.symbols)
    for crate, url in config["doc_roots"].items():
        if index.set_doc_root(crate, url):
            logger.debug("Using %s as documentation root of %s", url, crate)
    return config, index


def _rewrite_one(
    args: argparse.Namespace, config: dict[str, Any], index: SymbolIndex
) -> int:
    """Rewrite the docs of a single symbol."""
    symbol = index.get(args.symbol)
    if symbol is None:
        msg = f"Unknown symbol: {args.symbol}"
        raise SystemExit(msg)

    if args.input:
        markdown = args.input.read_text(encoding="utf-8")
    elif args.symbol in index.docs:
        markdown = index.docs[args.symbol]
    else:
        markdown = sys.stdin.read()

    out = rewrite_links(index, markdown, symbol, doc_host=config["doc_host"])
    if args.output:
        args.output.write_text(out, encoding="utf-8")
    else:
        sys.stdout.write(out)
    return 0


def _rewrite_all(
    args: argparse.Namespace, config: dict[str, Any], index: SymbolIndex
) -> int:
    """Rewrite the docs of every documented symbol into a directory."""
    out_root = args.all_docs.resolve()
    out_root.mkdir(parents=True, exist_ok=True)

    written = 0
    for uid, markdown in sorted(index.docs.items()):
        symbol = index.get(uid)
        if symbol is None:
            continue
        out = rewrite_links(index, markdown, symbol, doc_host=config["doc_host"])
        (out_root / uid_filename(uid)).write_text(out, encoding="utf-8")
        written += 1

    print(f"Rewrote docs of {written} symbols into: {out_root}")
    return 0


def run(args: argparse.Namespace) -> int:
    """Execute the rewrite for the parsed command line."""
    config, index = _init_infra(args)
    if args.all_docs:
        return _rewrite_all(args, config, index)
    if not args.symbol:
        msg = "Either --symbol or --all-docs is required"
        raise SystemExit(msg)
    return _rewrite_one(args, config, index)


def main(argv: list[str] | None = None) -> int:
    """Run the link rewriter."""
    ap = argparse.ArgumentParser(
        description="Rewrite intra-doc links in Markdown to documentation URLs.",
    )
    ap.add_argument(
        "symbols",
        type=Path,
        help="YAML file describing crates and their items",
    )
    ap.add_argument(
        "--symbol",
        help="Uid of the documented symbol (links resolve from its scope)",
    )
    ap.add_argument(
        "--input",
        type=Path,
        help="Markdown file to rewrite (default: the symbol's docs, else stdin)",
    )
    ap.add_argument(
        "--output",
        type=Path,
        help="Write the result here instead of stdout",
    )
    ap.add_argument(
        "--all-docs",
        type=Path,
        help="Rewrite the docs of every symbol into this directory",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--doc-host",
        help="Documentation host for crates without html_root_url (default: docs.rs)",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every link that stays unresolved",
    )
    return run(ap.parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
