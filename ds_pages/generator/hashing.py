"""Content digests used to detect changed pages."""

from __future__ import annotations

import hashlib


def content_digest(text: str) -> str:
    """Return a hex digest of ``text`` for change detection only."""
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


__all__ = ["content_digest"]
