"""High-level orchestration for incremental documentation page generation.

This module coordinates rendering every catalog page, comparing the result
with what is already on disk, and writing only the files that changed. It
exposes :class:`PageGenerator`, which consumes a
:class:`~ds_pages.config.SiteConfig` and a :class:`~ds_pages.catalog.Catalog`
and returns a :class:`~ds_pages.generator.models.GenerationReport`.

Pages are generated concurrently on a thread pool. A failure in one page is
recorded in the report and does not stop the others, except for
:class:`~ds_pages.generator.errors.DirectoryCreateError`, which means the
output tree itself is unusable and aborts the run.

Example
-------
>>> from pathlib import Path
>>> from ds_pages.catalog import load_catalog
>>> from ds_pages.config import load_site_config
>>> from ds_pages.generator import PageGenerator
>>> config = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> catalog = load_catalog(Path("build/catalog.json"))  # doctest: +SKIP
>>> report = PageGenerator(config).generate(catalog)  # doctest: +SKIP
>>> report.written_paths  # doctest: +SKIP
[PosixPath('docs/components/button/index.html'), ...]
"""

from __future__ import annotations

import logging
import typing as typ
from concurrent.futures import ThreadPoolExecutor

from .cache import check_cache
from .content import HtmlContentRenderer
from .errors import DirectoryCreateError
from .models import GenerationReport, PageFailure, RenderMode, TargetOutcome
from .page_tree import PageTreeRenderer
from .paths import DocsPathResolver
from .renderer import PageRenderer
from .writer import DirectoryWriter

if typ.TYPE_CHECKING:
    from concurrent.futures import Future

    from ds_pages.catalog import Catalog, PageModel
    from ds_pages.config import SiteConfig

    from .models import RenderTarget

logger = logging.getLogger(__name__)


def select_mode(page: PageModel, without_ui: bool) -> RenderMode | None:
    """Return the render mode for ``page`` or ``None`` when it is skipped.

    Markup-only generation applies to every page. Documentation pages require
    a ``reference_uri``.
    """
    if without_ui:
        return RenderMode.MARKUP_ONLY
    if page.reference_uri is not None:
        return RenderMode.FULL_DOC
    return None


class PageGenerator:
    """Render catalog pages and persist the ones whose content changed."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        renderer: PageRenderer | None = None,
        resolver: DocsPathResolver | None = None,
        writer: DirectoryWriter | None = None,
    ) -> None:
        """Initialize the generator with configuration and collaborators.

        Parameters
        ----------
        config : SiteConfig
            Site configuration providing the docs root, root path, worker
            count, and rendering settings.
        renderer : PageRenderer, optional
            Override for the page renderer; built from ``config`` by default.
        resolver : DocsPathResolver, optional
            Override for URI to path resolution; rooted at
            ``config.docs_root`` by default.
        writer : DirectoryWriter, optional
            Override for the directory writer.
        """
        self.config = config
        self.renderer = renderer or self._build_renderer(config)
        self.resolver = resolver or DocsPathResolver(config.docs_root)
        self.writer = writer or DirectoryWriter()

    def generate(
        self,
        catalog: Catalog,
        root_path: str | None = None,
        without_ui: bool = False,
    ) -> GenerationReport:
        """Generate every page in ``catalog``.

        Parameters
        ----------
        catalog : Catalog
            Pages and routes supplied by the catalog builder.
        root_path : str, optional
            Sub-path the site is hosted under; defaults to
            ``config.root_path``.
        without_ui : bool, optional
            Generate markup-only example pages instead of documentation pages.

        Returns
        -------
        GenerationReport
            ``results`` holds one flag per render target in catalog order,
            ``True`` when the file was written. Skipped pages contribute a
            single ``False``. Failed pages are listed in ``failures`` and
            contribute only the targets handled before the error.

        Raises
        ------
        DirectoryCreateError
            If an output directory could not be created after retrying.
        """
        root = self.config.root_path if root_path is None else root_path
        report = GenerationReport()
        with ThreadPoolExecutor(
            max_workers=self.config.max_workers, thread_name_prefix="ds-pages"
        ) as executor:
            completed: list[list[TargetOutcome]] = [[] for _ in catalog.pages]
            futures: list[Future[list[TargetOutcome] | None]] = [
                executor.submit(
                    self.generate_page,
                    page,
                    root,
                    without_ui,
                    catalog.routes,
                    completed=page_completed,
                )
                for page, page_completed in zip(catalog.pages, completed, strict=True)
            ]
            try:
                for page, future, page_completed in zip(
                    catalog.pages, futures, completed, strict=True
                ):
                    self._collect(report, page, future, page_completed)
            except DirectoryCreateError:
                for pending in futures:
                    pending.cancel()
                raise

        logger.info(
            "Generated %d page(s): %d written, %d unchanged, %d skipped, %d failed",
            len(catalog.pages),
            len(report.written_paths),
            len(report.outcomes) - len(report.written_paths),
            len(report.skipped),
            len(report.failures),
        )
        return report

    def generate_page(
        self,
        page: PageModel,
        root_path: str,
        without_ui: bool,
        routes: object = (),
        *,
        completed: list[TargetOutcome] | None = None,
    ) -> list[TargetOutcome] | None:
        """Render and persist a single page.

        Parameters
        ----------
        page : PageModel
            Catalog entry to generate.
        root_path : str
            Sub-path the site is hosted under.
        without_ui : bool
            Generate markup-only example pages instead of the documentation
            page.
        routes : object, optional
            Route tree embedded in documentation pages.
        completed : list[TargetOutcome], optional
            Receives each outcome as soon as its target is handled, so callers
            still see the targets finished before a later target raises.

        Returns
        -------
        list[TargetOutcome] or None
            One outcome per render target, or ``None`` when the page has no
            targets in the selected mode.
        """
        mode = select_mode(page, without_ui)
        if mode is None:
            return None
        targets = self.renderer.render(page, root_path, mode, routes=routes)
        if not targets:
            return None
        outcomes = [] if completed is None else completed
        for target in targets:
            outcomes.append(self.update_file(target))
        return outcomes

    def update_file(self, target: RenderTarget) -> TargetOutcome:
        """Write ``target`` if it is new or its content changed."""
        docs_path = self.resolver.resolve(target.uri)
        decision = check_cache(target.html, docs_path.path)
        written = False
        if decision.changed:
            written = self.writer.persist(docs_path.path, docs_path.directory, target.html)
        else:
            logger.debug("Unchanged %s", docs_path.path)
        return TargetOutcome(
            reference=target.reference,
            uri=target.uri,
            path=docs_path.path,
            written=written,
            reason=decision.reason,
        )

    @staticmethod
    def _collect(
        report: GenerationReport,
        page: PageModel,
        future: Future[list[TargetOutcome] | None],
        completed: list[TargetOutcome],
    ) -> None:
        """Fold one page's result into ``report``."""
        try:
            outcomes = future.result()
        except DirectoryCreateError:
            raise
        except Exception as exc:  # noqa: BLE001 - isolate per-page failures
            logger.warning(
                "Failed to generate page %s: %s", page.reference, exc, exc_info=exc
            )
            report.outcomes.extend(completed)
            report.results.extend(outcome.written for outcome in completed)
            report.failures.append(
                PageFailure(
                    reference=page.reference, error=exc, outcomes=tuple(completed)
                )
            )
            return

        if outcomes is None:
            report.skipped.append(page.reference)
            report.results.append(False)
            return
        report.outcomes.extend(outcomes)
        report.results.extend(outcome.written for outcome in outcomes)

    @staticmethod
    def _build_renderer(config: SiteConfig) -> PageRenderer:
        tree_renderer = PageTreeRenderer(
            templates_dir=config.templates_dir,
            content_renderer=HtmlContentRenderer(config.pygments_style),
        )
        return PageRenderer(
            config.render_settings(),
            tree_renderer=tree_renderer,
            templates_dir=config.templates_dir,
        )


__all__ = ["PageGenerator", "select_mode"]
