"""Regex heuristics for spotting a key reference in source text."""

from __future__ import annotations

import re

# Characters that may continue an identifier (hyphen included for kebab keys).
_IDENT = r"A-Za-z0-9_\-"


def build_key_patterns(key: str, case_sensitive: bool = True) -> list[re.Pattern[str]]:
    """Return the ordered pattern set used to decide whether ``key`` is referenced.

    The four shapes are, in order: a quoted literal (same quote on both
    sides), a ``.key`` property access, a ``["key"]`` bracket access and the
    key as a free-standing token.  Any hit counts as usage, including hits
    inside comments or unrelated strings.
    """

    flags = 0 if case_sensitive else re.IGNORECASE
    k = re.escape(key)
    return [
        re.compile(rf"(['\"`]){k}\1", flags),
        re.compile(rf"\.{k}(?![{_IDENT}])", flags),
        re.compile(rf"\[\s*(['\"`]){k}\1\s*\]", flags),
        re.compile(rf"(?<![{_IDENT}]){k}(?![{_IDENT}])", flags),
    ]


def key_matches(content: str, patterns: list[re.Pattern[str]]) -> bool:
    return any(p.search(content) for p in patterns)
