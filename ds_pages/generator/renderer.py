"""Render catalog pages into complete HTML documents.

Each catalog entry can produce two flavours of page, selected with
:class:`~ds_pages.generator.models.RenderMode`:

``MARKUP_ONLY``
    Minimal documents containing only the example markup, one for the base
    page and one per modifier. These are viewed directly or embedded in an
    iframe by the documentation UI.
``FULL_DOC``
    The documentation page with navigation UI. The serialized page model and
    route tree are embedded for client-side hydration; the component tree is
    rendered on the server unless the build targets interactive development.

Rendering is a pure function of the page, root path, mode, and
:class:`~ds_pages.config.RenderSettings`: the same inputs always produce the
same bytes, which is what makes the digest-based cache work.

Example
-------
>>> from ds_pages.catalog import Modifier, PageModel
>>> renderer = PageRenderer()  # doctest: +SKIP
>>> page = PageModel("components.button", modifiers=(Modifier("--primary"),))
>>> [t.uri for t in renderer.render(page, "", RenderMode.MARKUP_ONLY)]  # doctest: +SKIP
['example/components.button', 'example/components.button--primary']
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ds_pages._constants import EXAMPLE_DIR
from ds_pages.config import RenderSettings, normalize_root_path

from .markup import process_example_markup
from .models import RenderMode, RenderTarget
from .page_tree import PageTreeRenderer

if typ.TYPE_CHECKING:
    from ds_pages.catalog import Modifier, PageModel

TreeRenderer = typ.Callable[["PageModel"], str]
MarkupProcessor = typ.Callable[[str, "Modifier | None"], str]


def serialize_for_script(value: object) -> str:
    """Serialize ``value`` as JSON that is safe inside a ``<script>`` element."""
    text = json.dumps(value, sort_keys=True, ensure_ascii=False)
    return text.replace("</", "<\\/")


def is_homepage_uri(uri: str, root_path: str) -> bool:
    """Return ``True`` when ``uri`` is empty once ``root_path`` is stripped."""
    trimmed = uri.strip("/")
    prefix = root_path.strip("/")
    if prefix and trimmed.startswith(prefix):
        trimmed = trimmed[len(prefix) :]
    return not trimmed.strip("/")


class PageRenderer:
    """Produce render targets for catalog pages."""

    def __init__(
        self,
        settings: RenderSettings | None = None,
        *,
        tree_renderer: TreeRenderer | None = None,
        markup_processor: MarkupProcessor = process_example_markup,
        templates_dir: Path | None = None,
        code_stylesheet: str | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        settings : RenderSettings, optional
            Site-wide rendering values; defaults to a production build without
            analytics.
        tree_renderer : Callable[[PageModel], str], optional
            Produces the server-rendered documentation UI. Defaults to
            :class:`PageTreeRenderer` using the same templates directory.
        markup_processor : Callable[[str, Modifier | None], str], optional
            Turns an example markup template into HTML for one modifier.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        code_stylesheet : str, optional
            CSS embedded in documentation pages for highlighted code. Taken
            from the tree renderer when it is a :class:`PageTreeRenderer`.
        """
        self.settings = settings or RenderSettings()
        self.templates_dir = (
            templates_dir or Path(__file__).resolve().parents[1] / "templates"
        )
        self.tree_renderer = tree_renderer or PageTreeRenderer(
            templates_dir=self.templates_dir, markup_processor=markup_processor
        )
        if code_stylesheet is None and isinstance(self.tree_renderer, PageTreeRenderer):
            code_stylesheet = self.tree_renderer.stylesheet
        self.code_stylesheet = code_stylesheet or ""
        self.markup_processor = markup_processor
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.doc_template = self.env.get_template("doc_page.jinja")
        self.example_template = self.env.get_template("example_page.jinja")

    def render(
        self,
        page: PageModel,
        root_path: str,
        mode: RenderMode,
        *,
        routes: object = (),
    ) -> list[RenderTarget]:
        """Render ``page`` in ``mode``.

        Parameters
        ----------
        page : PageModel
            Catalog entry to render.
        root_path : str
            Sub-path the site is hosted under; normalized to end in ``/``.
        mode : RenderMode
            Which page flavour to produce.
        routes : object, optional
            Route tree embedded in documentation pages.

        Returns
        -------
        list[RenderTarget]
            For ``MARKUP_ONLY``, the base example followed by one target per
            modifier. For ``FULL_DOC``, a single target, or none when the page
            has no ``reference_uri``.
        """
        root = normalize_root_path(root_path)
        match mode:
            case RenderMode.MARKUP_ONLY:
                return self._render_markup_pages(page, root)
            case RenderMode.FULL_DOC:
                if page.reference_uri is None:
                    return []
                return [self._render_doc_page(page, root, routes)]
            case _:  # pragma: no cover - exhaustive over RenderMode
                msg = f"Unsupported render mode: {mode!r}"
                raise ValueError(msg)

    def _render_doc_page(
        self, page: PageModel, root: str, routes: object
    ) -> RenderTarget:
        uri = typ.cast("str", page.reference_uri)
        component_html = "" if self.settings.development else self.tree_renderer(page)
        context = {
            **self._common_context(root),
            "is_homepage": is_homepage_uri(uri, root),
            "header": page.header,
            "site_name": self.settings.site_name,
            "homepage_title": self.settings.homepage_title,
            "homepage_description": self.settings.homepage_description,
            "component_html": component_html,
            "code_stylesheet": self.code_stylesheet,
            "page_json": serialize_for_script(page.to_payload()),
            "routes_json": serialize_for_script(_as_json_value(routes)),
        }
        html = self.doc_template.render(**context)
        return RenderTarget(uri=uri, html=_with_newline(html), reference=page.reference)

    def _render_markup_pages(self, page: PageModel, root: str) -> list[RenderTarget]:
        targets = [self._render_markup_page(page, None, root)]
        targets.extend(
            self._render_markup_page(page, modifier, root) for modifier in page.modifiers
        )
        return targets

    def _render_markup_page(
        self, page: PageModel, modifier: Modifier | None, root: str
    ) -> RenderTarget:
        # ie. components.button or components.button.ds-c-button--primary
        example_id = page.reference + (modifier.name if modifier else "")
        context = {
            **self._common_context(root),
            "reference": page.reference,
            "markup": self.markup_processor(page.markup, modifier),
        }
        html = self.example_template.render(**context)
        return RenderTarget(
            uri=f"{root}{EXAMPLE_DIR}/{example_id}",
            html=_with_newline(html),
            reference=page.reference,
        )

    def _common_context(self, root: str) -> dict[str, typ.Any]:
        return {
            "root_path": root,
            "analytics": self.settings.analytics,
            "analytics_env": self.settings.analytics_env,
        }


def _as_json_value(value: object) -> object:
    if isinstance(value, tuple):
        return list(value)
    return value


def _with_newline(html: str) -> str:
    return html if html.endswith("\n") else html + "\n"


__all__ = [
    "MarkupProcessor",
    "PageRenderer",
    "TreeRenderer",
    "is_homepage_uri",
    "serialize_for_script",
]
