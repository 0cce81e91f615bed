"""Logic for loading the rewriter configuration."""

import logging
from pathlib import Path
from typing import Any

import yaml

from doclinks.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    # Host used when a crate does not set `html_root_url`.
    "doc_host": "docs.rs",
    # Crate name -> documentation root, for crates documented elsewhere.
    # Setting a crate to null in the user config removes its root.
    "doc_roots": {
        "std": "https://doc.rust-lang.org/nightly/",
        "core": "https://doc.rust-lang.org/nightly/",
        "alloc": "https://doc.rust-lang.org/nightly/",
    },
    "logging": {
        "level": "WARNING",
    },
}


def _doc_roots(raw: object) -> dict[str, str]:
    """Keep the crate roots that are set, as strings."""
    if not isinstance(raw, dict):
        return {}
    return {str(crate): str(url) for crate, url in raw.items() if url}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load the YAML config at `path` over the defaults.

    A missing file is reported and the defaults are used.
    """
    user_config: Any = {}
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        else:
            logger.warning("Config file %s not found, using defaults", p)

    if not isinstance(user_config, dict):
        msg = f"Config file {path} must contain a mapping"
        raise SystemExit(msg)

    config = deep_merge(DEFAULT_CONFIG, user_config)
    config["doc_roots"] = _doc_roots(config.get("doc_roots"))
    return config
