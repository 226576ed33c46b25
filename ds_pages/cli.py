"""Cyclopts CLI entrypoint for generating design-system documentation pages.

The ``pages`` console script defined here renders the catalog produced by the
upstream documentation builder into ``docs/``. Only pages whose content
changed since the previous run are rewritten. Typical usage runs
``pages generate --catalog build/catalog.json`` for the documentation UI and
``pages generate --catalog build/catalog.json --without-ui`` for the isolated
markup examples.

Examples
--------
Generate documentation pages with the default configuration:

>>> from ds_pages.cli import main
>>> main()  # doctest: +SKIP

Generate markup examples for a site hosted under a sub-path:

>>> from ds_pages.cli import app
>>> app(
...     ["generate", "--catalog", "catalog.json", "--without-ui",
...      "--root-path", "design-system"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .catalog import load_catalog
from .config import SiteConfig, load_site_config, normalize_root_path
from .generator import PageGenerator

DEFAULT_CONFIG = Path("config/pages.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(config: Path) -> SiteConfig:
    """Load ``config``, falling back to defaults when the default file is absent."""
    if config == DEFAULT_CONFIG and not config.exists():
        return SiteConfig()
    return load_site_config(config)


@app.command(help="Generate static HTML pages from the component catalog.")
def generate(
    *,
    catalog: typ.Annotated[
        Path, Parameter(help="Path to the catalog JSON", env_var="INPUT_CATALOG")
    ],
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    root_path: typ.Annotated[
        str | None,
        Parameter(help="Sub-path the site is hosted under", env_var="INPUT_ROOT_PATH"),
    ] = None,
    without_ui: typ.Annotated[
        bool,
        Parameter(
            help="Only generate markup example pages", env_var="INPUT_WITHOUT_UI"
        ),
    ] = False,
    environment: typ.Annotated[
        str | None,
        Parameter(
            help="Build environment; 'development' skips server rendering",
            env_var="INPUT_ENVIRONMENT",
        ),
    ] = None,
    docs_root: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_DOCS_ROOT"),
    ] = None,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="INPUT_LOG_LEVEL")
    ] = "WARNING",
) -> None:
    """Generate documentation or example pages for the catalog.

    Parameters
    ----------
    catalog : Path
        Catalog JSON produced by the documentation builder.
    config : Path, optional
        Path to the ``pages.yaml`` configuration file. When the default path
        does not exist, built-in defaults are used.
    root_path : str or None, optional
        Override the configured hosting sub-path.
    without_ui : bool, optional
        Generate markup-only example pages instead of documentation pages.
    environment : str or None, optional
        Override the configured build environment.
    docs_root : Path or None, optional
        Override the configured output directory.
    log_level : str, optional
        Threshold passed to :func:`logging.basicConfig`.

    Raises
    ------
    GenerationError
        If any page failed; pages that succeeded are still written.
    DirectoryCreateError
        If an output directory could not be created.
    """
    logging.basicConfig(
        level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s"
    )
    site_config = _load_config(config)
    overrides: dict[str, typ.Any] = {}
    if root_path is not None:
        overrides["root_path"] = normalize_root_path(root_path)
    if environment:
        overrides["environment"] = environment
    if docs_root is not None:
        overrides["docs_root"] = docs_root
    if overrides:
        site_config = dc.replace(site_config, **overrides)

    report = PageGenerator(site_config).generate(
        load_catalog(catalog), without_ui=without_ui
    )
    for path in report.written_paths:
        print(f"wrote {_format_path(path)}")
    unchanged = len(report.outcomes) - len(report.written_paths)
    print(
        f"{len(report.written_paths)} written, {unchanged} unchanged, "
        f"{len(report.skipped)} skipped, {len(report.failures)} failed"
    )
    report.raise_for_failures()


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
