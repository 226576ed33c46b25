"""Server-side rendering of the documentation component tree.

:class:`PageTreeRenderer` is the default ``tree_renderer`` collaborator of
:class:`~ds_pages.generator.renderer.PageRenderer`. It turns a
:class:`~ds_pages.catalog.PageModel` into the markup the client application
hydrates: a page header followed by either a single body or, for nested pages
(depth 2 and deeper with child sections), ``Usage`` and ``Guidance`` tabs.
Sections whose reference ends in ``.guidance`` (optionally suffixed, such as
``.guidance-forms``) are grouped into the Guidance tab.
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .content import HtmlContentRenderer
from .markup import process_example_markup

if typ.TYPE_CHECKING:
    from ds_pages.catalog import Modifier, PageModel

GUIDANCE_PATTERN = re.compile(r"\.guidance([a-z-_]+)?$", re.IGNORECASE)
TABS_MIN_DEPTH = 2


def is_guidance_section(section: PageModel) -> bool:
    """Return ``True`` when ``section`` belongs in the Guidance tab."""
    return GUIDANCE_PATTERN.search(section.reference) is not None


class PageTreeRenderer:
    """Render a page model into the documentation UI markup."""

    def __init__(
        self,
        *,
        templates_dir: Path | None = None,
        content_renderer: HtmlContentRenderer | None = None,
        markup_processor: typ.Callable[
            [str, Modifier | None], str
        ] = process_example_markup,
    ) -> None:
        self.templates_dir = templates_dir or Path(__file__).resolve().parents[1] / "templates"
        self.content = content_renderer or HtmlContentRenderer()
        self.markup_processor = markup_processor
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page_tree.jinja")

    def __call__(self, page: PageModel) -> str:
        return self.render(page)

    @property
    def stylesheet(self) -> str:
        """Return the CSS for the highlighted code blocks in rendered trees."""
        return self.content.stylesheet

    def render(self, page: PageModel) -> str:
        """Return the component tree markup for ``page``."""
        has_tabs = bool(page.sections) and page.depth >= TABS_MIN_DEPTH
        usage = [s for s in page.sections if not is_guidance_section(s)]
        guidance = [s for s in page.sections if is_guidance_section(s)]
        context = {
            "page": self._block(page),
            "has_tabs": has_tabs,
            "usage_blocks": [self._block(section) for section in usage],
            "guidance_blocks": [self._block(section) for section in guidance],
        }
        return self.template.render(**context).strip()

    def _block(self, page: PageModel) -> dict[str, typ.Any]:
        """Build the template context for one page block."""
        example_html = ""
        code_html = ""
        if page.markup.strip():
            example_html = self.markup_processor(page.markup, None)
            code_html = self.content.code_block(example_html, "html")
        return {
            "reference": page.reference,
            "anchor": page.reference_uri or page.reference,
            "header": page.header,
            "description_html": self.content.markdown(page.description),
            "example_html": example_html,
            "code_html": code_html,
            "modifiers": [
                {
                    "name": modifier.name,
                    "description_html": self.content.markdown(modifier.description),
                    "example_html": self.markup_processor(page.markup, modifier)
                    if page.markup.strip()
                    else "",
                }
                for modifier in page.modifiers
            ],
        }


__all__ = ["GUIDANCE_PATTERN", "PageTreeRenderer", "is_guidance_section"]
