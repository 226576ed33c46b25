"""Typed dataclasses describing ds_pages site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from ds_pages._constants import (
    DEFAULT_HOMEPAGE_DESCRIPTION,
    DEFAULT_HOMEPAGE_TITLE,
    DEFAULT_SITE_NAME,
    DEVELOPMENT_ENVIRONMENT,
    PRODUCTION_ENVIRONMENT,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class AnalyticsConfig:
    """Tag manager snippet injected into the ``<head>`` of every page."""

    script_url: str


@dc.dataclass(frozen=True, slots=True)
class RenderSettings:
    """Values that influence rendered HTML, passed explicitly to the renderer.

    Attributes
    ----------
    development : bool
        When ``True`` documentation pages skip server rendering and leave
        the component tree to client-side hydration.
    site_name : str
        Suffix used in documentation page titles.
    homepage_title : str
        ``<title>`` of the site root page.
    homepage_description : str
        Meta description of the site root page.
    analytics : AnalyticsConfig or None
        Analytics snippet configuration; ``None`` disables it.
    analytics_env : str
        Environment label exposed to the analytics snippet.
    """

    development: bool = False
    site_name: str = DEFAULT_SITE_NAME
    homepage_title: str = DEFAULT_HOMEPAGE_TITLE
    homepage_description: str = DEFAULT_HOMEPAGE_DESCRIPTION
    analytics: AnalyticsConfig | None = None
    analytics_env: str = "dev"


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved site definition sourced from YAML config."""

    docs_root: Path = Path("docs")
    root_path: str = ""
    site_name: str = DEFAULT_SITE_NAME
    homepage_title: str = DEFAULT_HOMEPAGE_TITLE
    homepage_description: str = DEFAULT_HOMEPAGE_DESCRIPTION
    environment: str = PRODUCTION_ENVIRONMENT
    max_workers: int | None = None
    templates_dir: Path | None = None
    pygments_style: str = "default"
    analytics: AnalyticsConfig | None = None

    @property
    def development(self) -> bool:
        """Return ``True`` when building for interactive development."""
        return self.environment == DEVELOPMENT_ENVIRONMENT

    def render_settings(self) -> RenderSettings:
        """Return the rendering-relevant subset of this configuration."""
        return RenderSettings(
            development=self.development,
            site_name=self.site_name,
            homepage_title=self.homepage_title,
            homepage_description=self.homepage_description,
            analytics=self.analytics,
            analytics_env="prod" if self.environment == PRODUCTION_ENVIRONMENT else "dev",
        )


__all__ = ["AnalyticsConfig", "RenderSettings", "SiteConfig", "SiteConfigError"]
