"""Specifier classification and node-key derivation. Pure string functions."""

from __future__ import annotations

from typing import AbstractSet

from depgraph.analysis.graph_models import NodeKind
from depgraph.scanner.language_map import BUILTIN_SCHEME, NODE_BUILTINS

_LOCAL_PREFIXES = (".", "/")


def classify(specifier: str, builtins: AbstractSet[str] = NODE_BUILTINS) -> NodeKind:
    """Classify a raw specifier as local, builtin or package."""
    if specifier.startswith(_LOCAL_PREFIXES):
        return NodeKind.LOCAL
    # An explicit scheme wins even for names missing from the table
    if specifier.startswith(BUILTIN_SCHEME):
        return NodeKind.BUILTIN
    if specifier.split("/")[0] in builtins:
        return NodeKind.BUILTIN
    return NodeKind.PACKAGE


def builtin_key(specifier: str) -> str:
    """``fs`` and ``node:fs`` both map to ``node:fs``."""
    if specifier.startswith(BUILTIN_SCHEME):
        return specifier
    return f"{BUILTIN_SCHEME}{specifier}"


def package_key(specifier: str) -> str:
    """Package name of a bare specifier.

    ``@scope/pkg/sub`` -> ``@scope/pkg``, ``lodash/fp`` -> ``lodash``.
    """
    parts = specifier.split("/")
    if specifier.startswith("@") and len(parts) >= 2:
        return f"{parts[0]}/{parts[1]}"
    return parts[0]
