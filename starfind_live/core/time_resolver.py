"""Relative-time resolution for STARFIND LIVE."""

import re
from typing import Optional

_REL_MINUTES = re.compile(r"(\d+)\s*minutes?\s*(?:(ago|in)\b)?", re.IGNORECASE)
_AGO = re.compile(r"\bago\b", re.IGNORECASE)
_IN = re.compile(r"\bin\b", re.IGNORECASE)


def resolve_relative_minutes(text: Optional[str]) -> Optional[int]:
    """Resolve a phrase like "33 minutes ago" into a signed minute offset.

    The qualifier is read from the captured group, or from the whole
    fragment when the group is absent ("in 15 minutes"). Qualifiers
    must be whole words, so "minutes" itself never reads as "in".

    Args:
        text: Free-text time fragment, may be empty.

    Returns:
        Negative minutes for "ago", positive for "in", None when there is
        no count or the count carries no qualifier.
    """
    if not text:
        return None
    m = _REL_MINUTES.search(text)
    if not m:
        return None

    value = int(m.group(1))
    qualifier = m.group(2) or text
    if _AGO.search(qualifier):
        return -value
    if _IN.search(qualifier):
        return value
    return None
