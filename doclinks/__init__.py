"""Rewrite intra-documentation links in Markdown to absolute documentation URLs."""
