"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ds_pages._constants import (
    DEFAULT_HOMEPAGE_DESCRIPTION,
    DEFAULT_HOMEPAGE_TITLE,
    DEFAULT_SITE_NAME,
    PRODUCTION_ENVIRONMENT,
)

from .helpers import (
    _build_analytics_config,
    _optional_str,
    _parse_max_workers,
    normalize_root_path,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the docs site build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/pages.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for omitted keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a value has the wrong shape (for example, a negative
        ``max_workers``).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from ds_pages.config import load_site_config
    >>> config = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
    >>> config.docs_root  # doctest: +SKIP
    PosixPath('docs')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return build_site_config(raw, base_dir=path.parent)


def build_site_config(
    raw: typ.Mapping[str, typ.Any], *, base_dir: Path | None = None
) -> SiteConfig:
    """Build a SiteConfig from an already parsed mapping.

    Relative ``templates_dir`` values are resolved against ``base_dir``.
    """
    site = raw.get("site", {}) or {}
    if not isinstance(site, dict):
        msg = "'site' must be a mapping."
        raise SiteConfigError(msg)

    templates_dir = _optional_str(raw.get("templates_dir"))
    resolved_templates: Path | None = None
    if templates_dir:
        resolved_templates = Path(templates_dir)
        if base_dir is not None and not resolved_templates.is_absolute():
            resolved_templates = base_dir / resolved_templates

    return SiteConfig(
        docs_root=Path(raw.get("docs_root", "docs")),
        root_path=normalize_root_path(_optional_str(raw.get("root_path"))),
        site_name=_optional_str(site.get("name")) or DEFAULT_SITE_NAME,
        homepage_title=_optional_str(site.get("homepage_title"))
        or DEFAULT_HOMEPAGE_TITLE,
        homepage_description=_optional_str(site.get("homepage_description"))
        or DEFAULT_HOMEPAGE_DESCRIPTION,
        environment=_optional_str(raw.get("environment")) or PRODUCTION_ENVIRONMENT,
        max_workers=_parse_max_workers(raw.get("max_workers")),
        templates_dir=resolved_templates,
        pygments_style=_optional_str(raw.get("pygments_style")) or "default",
        analytics=_build_analytics_config(raw.get("analytics")),
    )


__all__ = ["build_site_config", "load_site_config"]
