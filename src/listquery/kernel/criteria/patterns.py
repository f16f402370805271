"""LIKE pattern helpers shared by the search compiler and the evaluators.

Patterns use the SQL wildcards ``%`` (any run) and ``_`` (one character);
a backslash escapes the next character.
"""
from __future__ import annotations

import re

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape ``\\``, ``%`` and ``_`` so *value* matches literally."""
    value = value.replace("\\", "\\\\")
    return value.replace("%", "\\%").replace("_", "\\_")


def contains_pattern(term: str) -> str:
    """Wrap *term* as a literal "contains" pattern."""
    return f"%{escape_like(term)}%"


def like_to_regex(pattern: str, *, ignore_case: bool = False) -> re.Pattern[str]:
    """Compile a LIKE *pattern* into an anchored regular expression."""
    out: list[str] = []
    chars = iter(pattern)
    for ch in chars:
        if ch == LIKE_ESCAPE:
            nxt = next(chars, "")
            out.append(re.escape(nxt) if nxt else re.escape(LIKE_ESCAPE))
        elif ch == "%":
            out.append(".*")
        elif ch == "_":
            out.append(".")
        else:
            out.append(re.escape(ch))
    flags = re.DOTALL | (re.IGNORECASE if ignore_case else 0)
    return re.compile("".join(out), flags)


__all__ = ["LIKE_ESCAPE", "contains_pattern", "escape_like", "like_to_regex"]
