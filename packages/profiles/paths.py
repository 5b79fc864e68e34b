"""
Path template -> route regex.

The emitted regex is evaluated by a Go (RE2) runtime, so only the
characters Go's regexp.QuoteMeta escapes are escaped here.
"""

from __future__ import annotations

import re

REGEX_METACHARACTERS = frozenset("\\.+*?()|[]{}^$")

# An escaped placeholder: \{ ... \} with no closing brace inside.
PATH_PARAM_RE = re.compile(r"\\\{[^}]*\\\}")

PATH_SEGMENT_WILDCARD = "[^/]*"


def quote_meta(s: str) -> str:
    return "".join("\\" + ch if ch in REGEX_METACHARACTERS else ch for ch in s)


def path_to_regex(template: str) -> str:
    escaped = quote_meta(template)
    return PATH_PARAM_RE.sub(lambda _m: PATH_SEGMENT_WILDCARD, escaped)
