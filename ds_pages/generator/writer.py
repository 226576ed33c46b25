"""Persist rendered pages, tolerating concurrent directory creation.

Pages are generated on a thread pool, so two tasks can race to create the
same parent directory. Creation is attempted a bounded number of times (two
by default) before the failure is escalated as :class:`DirectoryCreateError`.
Write failures are never retried.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from .errors import DirectoryCreateError, WriteError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 2


def _make_dirs(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)


class DirectoryWriter:
    """Create output directories and write page HTML into them."""

    def __init__(
        self,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        make_dirs: typ.Callable[[Path], None] = _make_dirs,
    ) -> None:
        """Initialize the writer.

        Parameters
        ----------
        max_attempts : int, optional
            Total directory creation attempts, including the first. Defaults
            to ``2`` (one retry).
        make_dirs : Callable[[Path], None], optional
            Recursive directory creation primitive; tests substitute failing
            variants to simulate races.
        """
        if max_attempts < 1:
            msg = "max_attempts must be at least 1"
            raise ValueError(msg)
        self.max_attempts = max_attempts
        self._make_dirs = make_dirs

    def ensure_directory(self, directory: Path) -> None:
        """Create ``directory`` recursively, retrying within the attempt budget.

        Raises
        ------
        DirectoryCreateError
            If every attempt fails; chained to the last ``OSError``.
        """
        last_error: OSError | None = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                self._make_dirs(directory)
            except OSError as exc:
                last_error = exc
                logger.debug(
                    "Creating %s failed on attempt %d/%d: %s",
                    directory,
                    attempt,
                    self.max_attempts,
                    exc,
                )
                continue
            return
        raise DirectoryCreateError(directory, self.max_attempts) from last_error

    def persist(self, path: Path, directory: Path, html: str) -> bool:
        """Write ``html`` to ``path`` after making sure ``directory`` exists.

        Returns
        -------
        bool
            Always ``True`` once the file has been written.

        Raises
        ------
        DirectoryCreateError
            If the directory could not be created.
        WriteError
            If the file write itself failed.
        """
        self.ensure_directory(directory)
        try:
            path.write_text(html, encoding="utf-8")
        except OSError as exc:
            raise WriteError(path) from exc
        logger.info("Wrote %s", path)
        return True


__all__ = ["DEFAULT_MAX_ATTEMPTS", "DirectoryWriter"]
