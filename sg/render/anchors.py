"""GitHub-compatible heading anchors."""

from __future__ import annotations

import re

_DROP_RE = re.compile(r"[^\w\- ]")


def slugify(title: str) -> str:
    """Return the anchor GitHub generates for a heading.

    >>> slugify("Naming & Folders")
    'naming--folders'
    """
    text = _DROP_RE.sub("", title.strip().lower())
    return text.replace(" ", "-")


class AnchorSet:
    """Allocates anchors in document order, suffixing repeats like GitHub."""

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def add(self, title: str) -> str:
        base = slugify(title)
        count = self._seen.get(base)
        if count is None:
            self._seen[base] = 0
            return base
        count += 1
        self._seen[base] = count
        anchor = f"{base}-{count}"
        # A literal heading may already own the suffixed form.
        while anchor in self._seen:
            count += 1
            self._seen[base] = count
            anchor = f"{base}-{count}"
        self._seen[anchor] = 0
        return anchor
