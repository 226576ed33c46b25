"""Map logical page URIs onto the generated docs directory tree."""

from __future__ import annotations

import dataclasses as dc
import re
from pathlib import Path

from ds_pages._constants import INDEX_FILENAME, RESERVED_ASSET_DIR

from .errors import ReservedNameError

URI_SEPARATOR_PATTERN = re.compile(r"[./]+")


@dc.dataclass(frozen=True, slots=True)
class DocsPath:
    """Physical location of a generated page.

    Attributes
    ----------
    directory : Path
        Directory that must exist before the page can be written.
    path : Path
        The ``index.html`` file inside ``directory``.
    """

    directory: Path
    path: Path


class DocsPathResolver:
    """Resolve page URIs to ``<docs_root>/<uri>/index.html`` locations."""

    def __init__(self, docs_root: Path) -> None:
        self.docs_root = docs_root

    def resolve(self, uri: str) -> DocsPath:
        """Return the directory and file path for ``uri``.

        Parameters
        ----------
        uri : str
            Slash or dot delimited page identifier such as
            ``"components.button"`` or ``"example/components.button"``.

        Returns
        -------
        DocsPath
            Deterministic output location; no filesystem access is performed.

        Raises
        ------
        ReservedNameError
            If ``uri`` resolves to the static asset directory itself.
        """
        segments = [segment for segment in URI_SEPARATOR_PATTERN.split(uri) if segment]
        if segments == [RESERVED_ASSET_DIR]:
            raise ReservedNameError(uri)
        directory = self.docs_root.joinpath(*segments)
        return DocsPath(directory=directory, path=directory / INDEX_FILENAME)


__all__ = ["DocsPath", "DocsPathResolver"]
