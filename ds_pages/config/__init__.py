"""Load and validate site configuration YAML for ds_pages builds.

This subpackage parses the project's ``pages.yaml`` file, applies defaults,
and produces typed dataclasses (:class:`SiteConfig`, :class:`RenderSettings`)
that the generator consumes. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from ds_pages.config import load_site_config
>>> site = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> site.render_settings().development  # doctest: +SKIP
False
"""

from .helpers import normalize_root_path
from .loader import build_site_config, load_site_config
from .models import AnalyticsConfig, RenderSettings, SiteConfig, SiteConfigError

__all__ = [
    "AnalyticsConfig",
    "RenderSettings",
    "SiteConfig",
    "SiteConfigError",
    "build_site_config",
    "load_site_config",
    "normalize_root_path",
]
