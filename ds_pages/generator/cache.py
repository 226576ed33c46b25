"""Decide whether a rendered page differs from what is already on disk.

The generated HTML files double as the build cache: before writing, the new
document's digest is compared with the digest of the existing file. Any
failure to read the existing file counts as a change, so an unnecessary write
is preferred over a missed one.

Example
-------
>>> from pathlib import Path
>>> should_write("<html></html>", Path("/nonexistent/index.html"))
True
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import CacheReadError
from .hashing import content_digest
from .models import CacheDecision, CacheReason

logger = logging.getLogger(__name__)


def check_cache(html: str, path: Path) -> CacheDecision:
    """Compare ``html`` with the contents of ``path``.

    Parameters
    ----------
    html : str
        Freshly rendered document.
    path : Path
        Location of the previously generated document, which may not exist.

    Returns
    -------
    CacheDecision
        ``changed`` is ``True`` when the file is missing, unreadable, or has a
        different digest.
    """
    try:
        existing = _read_existing(path)
    except CacheReadError as exc:
        cause = exc.__cause__ or exc
        logger.debug("Treating %s as changed: %s", path, cause)
        reason = (
            CacheReason.MISSING
            if isinstance(cause, FileNotFoundError)
            else CacheReason.UNREADABLE
        )
        return CacheDecision(changed=True, reason=reason)

    if content_digest(existing) != content_digest(html):
        return CacheDecision(changed=True, reason=CacheReason.CHANGED)
    return CacheDecision(changed=False, reason=CacheReason.UNCHANGED)


def should_write(html: str, path: Path) -> bool:
    """Return ``True`` when ``html`` needs to be written to ``path``."""
    return check_cache(html, path).changed


def _read_existing(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Unable to read '{path}'"
        raise CacheReadError(msg) from exc


__all__ = ["check_cache", "should_write"]
