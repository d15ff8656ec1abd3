"""Module reference extraction for JS/TS source text using regex patterns.

This is not a parser: matches inside comments or string literals that look
like imports are reported too.
"""

from __future__ import annotations

import re

# import x from '...', import { a } from "...", export * from '...', import '...'
# The binding clause may hold comments but never crosses a string or ';'.
_STATIC_RE = re.compile(
    r"""\b(?:import|export)\s+"""
    r"""(?:(?:[^'";/]|/(?![/*])|//[^\n]*(?![^\n])|/\*[\s\S]*?\*/)*?\s+from\s+)?"""
    r"""['"]([^'"]+)['"]"""
)
# import('...')
_DYNAMIC_RE = re.compile(r"""\bimport\s*\(\s*['"]([^'"]+)['"]\s*\)""")
# require('...')
_REQUIRE_RE = re.compile(r"""\brequire\s*\(\s*['"]([^'"]+)['"]\s*\)""")

_PATTERNS = (_STATIC_RE, _DYNAMIC_RE, _REQUIRE_RE)


def extract_references(source: str) -> list[str]:
    """Return the distinct specifiers referenced by ``source``.

    Matches from all three forms are ordered by where the specifier appears
    in the text; repeats keep their first position.
    """
    found: list[tuple[int, str]] = []
    for pattern in _PATTERNS:
        for m in pattern.finditer(source):
            found.append((m.start(1), m.group(1)))
    found.sort(key=lambda pair: pair[0])

    specifiers: list[str] = []
    seen: set[str] = set()
    for _, specifier in found:
        if specifier not in seen:
            seen.add(specifier)
            specifiers.append(specifier)
    return specifiers
