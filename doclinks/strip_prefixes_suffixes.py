"""Utility for removing namespace disambiguators from link targets and text."""

from doclinks.namespace import DISAMBIGUATORS


def _strip_once(s: str) -> str:
    s = s.strip("`")
    for prefixes, suffixes in DISAMBIGUATORS.values():
        for prefix in prefixes:
            while s.startswith(prefix):
                s = s[len(prefix) :]
        for suffix in suffixes:
            while s.endswith(suffix):
                s = s[: -len(suffix)]
    return s.lstrip("@").strip()


def strip_prefixes_suffixes(s: str) -> str:
    """Strip disambiguator prefixes, suffixes and inline code marks.

    `struct Gizmo` -> `Gizmo`, `spin()` -> `spin`, `` `fn@spin` `` -> `spin`.
    Prefixes are removed as raw text, so `modules` becomes `ules`.
    """
    stripped = _strip_once(s)
    while stripped != s:
        s, stripped = stripped, _strip_once(stripped)
    return stripped
