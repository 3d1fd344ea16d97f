"""Turn a free-text query into a fuzzy declaration search pattern."""

from __future__ import annotations

import re

_BAD_CHARS = re.compile(r"[^0-9a-z\-]", re.IGNORECASE | re.ASCII)


def build_fuzzy_pattern(query: str) -> str:
    """Build a case-insensitive regex matching the query's characters in order.

    ``"myc"`` becomes ``.*[Mm].*[Yy].*[Cc].*``. Anything other than ASCII
    letters, digits and hyphens is dropped first, so a query of pure
    punctuation matches everything.
    """
    cleaned = _BAD_CHARS.sub("", query)
    fragments = [f"[{c.upper()}{c.lower()}]" for c in cleaned]
    return ".*" + ".*".join(fragments) + ".*"
