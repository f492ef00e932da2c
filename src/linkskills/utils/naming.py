"""Name matching helpers for error hints."""

from __future__ import annotations

import difflib
from collections.abc import Iterable


def suggest_name(unknown: str, allowed: Iterable[str]) -> str:
    """Return a 'did you mean ...' hint for a close match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
