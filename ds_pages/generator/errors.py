"""Exception types raised by the page generation pipeline."""

from __future__ import annotations

import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    from .models import PageFailure


class PageGenerationError(RuntimeError):
    """Base class for failures raised while generating documentation pages."""


class ReservedNameError(PageGenerationError, ValueError):
    """Raised when a page URI collides with the static asset directory."""

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f'Page URI can\'t be "{uri}": the name is reserved for assets.')


class CacheReadError(PageGenerationError):
    """Existing output could not be read for comparison.

    The cache gate never raises this; unreadable output is treated as changed.
    """


class DirectoryCreateError(PageGenerationError):
    """Raised when the output directory cannot be created after retrying."""

    def __init__(self, directory: Path, attempts: int) -> None:
        self.directory = directory
        self.attempts = attempts
        super().__init__(
            f"Unable to create directory '{directory}' after {attempts} attempts."
        )


class WriteError(PageGenerationError):
    """Raised when a rendered page cannot be written to disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Unable to write page to '{path}'.")


class GenerationError(PageGenerationError):
    """Raised when one or more pages failed during a generation run."""

    def __init__(self, failures: typ.Sequence[PageFailure]) -> None:
        self.failures = tuple(failures)
        references = ", ".join(failure.reference for failure in self.failures)
        super().__init__(
            f"{len(self.failures)} page(s) failed to generate: {references}"
        )


__all__ = [
    "CacheReadError",
    "DirectoryCreateError",
    "GenerationError",
    "PageGenerationError",
    "ReservedNameError",
    "WriteError",
]
