"""Tag normalization for search and discovery layers."""

from __future__ import annotations

import re
from collections.abc import Iterable

MAX_TAG_LEN = 64
MAX_TAG_COUNT = 20

_DISALLOWED = re.compile(r"[^a-z0-9\-_.]")


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Normalize *tags* for indexing.

    Rules: lowercase, trim, collapse whitespace runs to ``-``, keep only
    ``[a-z0-9-_.]``, truncate to 64 characters, drop empty tags, dedupe
    preserving order, and keep at most 20 tags.
    """
    seen: set[str] = set()
    out: list[str] = []

    for raw in tags:
        if len(out) >= MAX_TAG_COUNT:
            break
        tag = "-".join(raw.strip().lower().split())
        tag = _DISALLOWED.sub("", tag)[:MAX_TAG_LEN]
        if not tag or tag in seen:
            continue
        seen.add(tag)
        out.append(tag)

    return out
