"""Reference extractors."""

from __future__ import annotations

from depgraph.extractor.js_extractor import extract_references

__all__ = ["extract_references"]
