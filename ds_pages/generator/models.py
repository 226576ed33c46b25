"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path

from .errors import GenerationError


class RenderMode(enum.Enum):
    """The two page flavours produced for a catalog entry."""

    MARKUP_ONLY = "markup-only"
    FULL_DOC = "full-doc"


class CacheReason(enum.Enum):
    """Why the cache gate did or did not ask for a write."""

    MISSING = "missing"
    UNREADABLE = "unreadable"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


@dc.dataclass(frozen=True, slots=True)
class CacheDecision:
    """Outcome of comparing freshly rendered HTML with the file on disk."""

    changed: bool
    reason: CacheReason


@dc.dataclass(frozen=True, slots=True)
class RenderTarget:
    """Rendered HTML destined for a single page URI.

    Attributes
    ----------
    uri : str
        Logical page location, resolved to a file by ``DocsPathResolver``.
    html : str
        Complete HTML document.
    reference : str
        Catalog reference of the page that produced the target.
    """

    uri: str
    html: str
    reference: str


@dc.dataclass(frozen=True, slots=True)
class TargetOutcome:
    """Record of what happened to one render target."""

    reference: str
    uri: str
    path: Path
    written: bool
    reason: CacheReason


@dc.dataclass(frozen=True, slots=True)
class PageFailure:
    """A catalog entry whose generation failed without aborting the run.

    Attributes
    ----------
    reference : str
        Catalog reference of the failed page.
    error : Exception
        The exception that stopped the page.
    outcomes : tuple[TargetOutcome, ...]
        Targets of the page that completed before ``error`` was raised.
    """

    reference: str
    error: Exception
    outcomes: tuple[TargetOutcome, ...] = ()


@dc.dataclass(slots=True)
class GenerationReport:
    """Aggregated outcome of a generation run.

    Attributes
    ----------
    results : list[bool]
        One flag per render target in catalog order; skipped pages contribute
        a single ``False`` and failed pages contribute the targets completed
        before the failure.
    outcomes : list[TargetOutcome]
        Details for every target that reached the cache gate.
    failures : list[PageFailure]
        Pages that raised a non-fatal error.
    skipped : list[str]
        References of pages that produced no targets in the selected mode.
    """

    results: list[bool] = dc.field(default_factory=list)
    outcomes: list[TargetOutcome] = dc.field(default_factory=list)
    failures: list[PageFailure] = dc.field(default_factory=list)
    skipped: list[str] = dc.field(default_factory=list)

    @property
    def written_paths(self) -> list[Path]:
        """Return the paths that were actually written during the run."""
        return [outcome.path for outcome in self.outcomes if outcome.written]

    @property
    def ok(self) -> bool:
        """Return ``True`` when no page failed."""
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise ``GenerationError`` when any page failed."""
        if self.failures:
            raise GenerationError(self.failures)


__all__ = [
    "CacheDecision",
    "CacheReason",
    "GenerationReport",
    "PageFailure",
    "RenderMode",
    "RenderTarget",
    "TargetOutcome",
]
