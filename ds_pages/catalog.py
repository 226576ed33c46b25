"""Load the component catalog produced by the upstream documentation builder.

The catalog is a JSON document with two keys: ``pages``, a list of page
entries, and ``routes``, the nested navigation structure used by the client
side application. Page entries are decoded into immutable :class:`PageModel`
instances; the original mappings are kept so they can be embedded verbatim in
generated pages for hydration. ``routes`` is treated as opaque data.

Examples
--------
>>> catalog = Catalog.from_payload(
...     {"pages": [{"reference": "components.button", "header": "Button"}]}
... )
>>> catalog.pages[0].reference
'components.button'
>>> catalog.pages[0].reference_uri is None
True
"""

from __future__ import annotations

import dataclasses as dc
import json
import typing as typ
from pathlib import Path


class CatalogError(ValueError):
    """Raised when the catalog document is malformed."""


@dc.dataclass(frozen=True, slots=True)
class Modifier:
    """A named style variant of a documented component."""

    name: str
    description: str = ""

    @property
    def class_name(self) -> str:
        """Return the CSS class for the variant (``name`` without a leading dot)."""
        return self.name.lstrip(".")

    @classmethod
    def from_payload(cls, payload: typ.Mapping[str, typ.Any]) -> Modifier:
        name = payload.get("name")
        if not isinstance(name, str) or not name:
            msg = f"Modifier is missing a 'name': {payload!r}"
            raise CatalogError(msg)
        return cls(name=name, description=str(payload.get("description") or ""))


@dc.dataclass(frozen=True, slots=True)
class PageModel:
    """A documentable unit from the catalog.

    Attributes
    ----------
    reference : str
        Unique dot-delimited identifier such as ``"components.button"``.
    reference_uri : str or None
        URI of the full documentation page; ``None`` when the entry only
        supports markup example pages.
    header : str
        Display title.
    markup : str
        Raw example markup template, possibly empty.
    modifiers : tuple[Modifier, ...]
        Ordered style variants.
    sections : tuple[PageModel, ...]
        Nested entries rooted at this page's reference.
    depth : int
        Nesting level; tabbed layouts apply from depth 2.
    description : str
        Markdown body rendered above the example.
    source : Mapping[str, Any]
        The decoded JSON mapping, serialized as-is for hydration.
    """

    reference: str
    reference_uri: str | None = None
    header: str = ""
    markup: str = ""
    modifiers: tuple[Modifier, ...] = ()
    sections: tuple[PageModel, ...] = ()
    depth: int = 0
    description: str = ""
    source: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=dict, compare=False, repr=False
    )

    @classmethod
    def from_payload(cls, payload: typ.Mapping[str, typ.Any]) -> PageModel:
        """Decode a catalog entry mapping into a :class:`PageModel`.

        Raises
        ------
        CatalogError
            If ``reference`` is missing or a nested field has the wrong shape.
        """
        if not isinstance(payload, dict):
            msg = f"Catalog entries must be mappings, got {type(payload).__name__}."
            raise CatalogError(msg)
        reference = payload.get("reference")
        if not isinstance(reference, str) or not reference:
            msg = f"Catalog entry is missing a 'reference': {payload!r}"
            raise CatalogError(msg)

        reference_uri = payload.get("referenceURI")
        depth = payload.get("depth", 0) or 0
        if not isinstance(depth, int):
            msg = f"Page '{reference}' has a non-integer depth: {depth!r}"
            raise CatalogError(msg)

        return cls(
            reference=reference,
            reference_uri=reference_uri if isinstance(reference_uri, str) else None,
            header=str(payload.get("header") or ""),
            markup=str(payload.get("markup") or ""),
            modifiers=tuple(
                Modifier.from_payload(item)
                for item in _sequence(payload, "modifiers", reference)
            ),
            sections=tuple(
                cls.from_payload(item)
                for item in _sequence(payload, "sections", reference)
            ),
            depth=depth,
            description=str(payload.get("description") or ""),
            source=payload,
        )

    def to_payload(self) -> dict[str, typ.Any]:
        """Return the JSON-serializable form embedded in documentation pages."""
        if self.source:
            return dict(self.source)
        payload: dict[str, typ.Any] = {
            "reference": self.reference,
            "header": self.header,
            "markup": self.markup,
            "modifiers": [
                {"name": m.name, "description": m.description} for m in self.modifiers
            ],
            "sections": [section.to_payload() for section in self.sections],
            "depth": self.depth,
            "description": self.description,
        }
        if self.reference_uri is not None:
            payload["referenceURI"] = self.reference_uri
        return payload


@dc.dataclass(frozen=True, slots=True)
class Catalog:
    """Pages to generate plus the opaque route tree shared by every page."""

    pages: tuple[PageModel, ...]
    routes: typ.Any = dc.field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: typ.Mapping[str, typ.Any]) -> Catalog:
        """Build a catalog from the decoded JSON document.

        Raises
        ------
        CatalogError
            If ``pages`` is not a list or two pages share a reference.
        """
        pages_raw = payload.get("pages") or []
        if not isinstance(pages_raw, list):
            msg = "Catalog 'pages' must be a list."
            raise CatalogError(msg)
        pages = tuple(PageModel.from_payload(item) for item in pages_raw)

        seen: set[str] = set()
        for page in pages:
            if page.reference in seen:
                msg = f"Duplicate page reference '{page.reference}' in catalog."
                raise CatalogError(msg)
            seen.add(page.reference)

        return cls(pages=pages, routes=payload.get("routes") or [])


def load_catalog(path: Path) -> Catalog:
    """Read a catalog JSON document from ``path``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    CatalogError
        If the document is not valid JSON or has an invalid shape.
    """
    if not path.exists():
        msg = f"Catalog file '{path}' not found."
        raise FileNotFoundError(msg)
    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Catalog file '{path}' is not valid JSON: {exc}"
        raise CatalogError(msg) from exc
    match loaded:
        case dict():
            return Catalog.from_payload(loaded)
        case list():
            return Catalog.from_payload({"pages": loaded})
        case _:
            msg = "Top-level catalog structure must be a mapping or a list."
            raise CatalogError(msg)


def _sequence(
    payload: typ.Mapping[str, typ.Any], key: str, reference: str
) -> list[typ.Any]:
    value = payload.get(key) or []
    if not isinstance(value, list):
        msg = f"Page '{reference}' has a non-list '{key}' field."
        raise CatalogError(msg)
    return value


__all__ = ["Catalog", "CatalogError", "Modifier", "PageModel", "load_catalog"]
