"""Unit tests for loading the site configuration YAML."""

from __future__ import annotations

from pathlib import Path

import pytest

from ds_pages._constants import DEFAULT_HOMEPAGE_TITLE, DEFAULT_SITE_NAME
from ds_pages.config import (
    AnalyticsConfig,
    SiteConfig,
    SiteConfigError,
    build_site_config,
    load_site_config,
    normalize_root_path,
)


def test_load_site_config_reads_values(tmp_path: Path) -> None:
    config_path = tmp_path / "pages.yaml"
    config_path.write_text(
        """
docs_root: build/docs
root_path: /design-system
environment: development
max_workers: 3
templates_dir: templates
site:
  name: Example DS
analytics:
  script_url: //tags.example/utag.js
""".strip()
        + "\n",
        encoding="utf-8",
    )

    config = load_site_config(config_path)

    assert config.docs_root == Path("build/docs")
    assert config.root_path == "design-system/"
    assert config.development
    assert config.max_workers == 3
    assert config.templates_dir == tmp_path / "templates"
    assert config.site_name == "Example DS"
    assert config.homepage_title == DEFAULT_HOMEPAGE_TITLE
    assert config.analytics == AnalyticsConfig(script_url="//tags.example/utag.js")


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "pages.yaml"
    config_path.write_text("", encoding="utf-8")
    config = load_site_config(config_path)
    assert config == SiteConfig()


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")


def test_render_settings_follow_environment() -> None:
    production = SiteConfig().render_settings()
    development = SiteConfig(environment="development").render_settings()
    staging = SiteConfig(environment="staging").render_settings()

    assert not production.development
    assert production.analytics_env == "prod"
    assert development.development
    assert development.analytics_env == "dev"
    assert not staging.development
    assert staging.analytics_env == "dev"
    assert production.site_name == DEFAULT_SITE_NAME


def test_analytics_accepts_bare_url() -> None:
    config = build_site_config({"analytics": "//tags.example/utag.js"})
    assert config.analytics is not None
    assert config.analytics.script_url == "//tags.example/utag.js"


@pytest.mark.parametrize(
    "raw",
    [
        {"max_workers": 0},
        {"max_workers": "many"},
        {"max_workers": True},
        {"analytics": ["not", "valid"]},
        {"site": "CMS"},
    ],
)
def test_invalid_values_rejected(raw: dict[str, object]) -> None:
    with pytest.raises(SiteConfigError):
        build_site_config(raw)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", ""),
        (None, ""),
        ("/", ""),
        ("design-system", "design-system/"),
        ("design-system/", "design-system/"),
        ("/nested/design-system//", "nested/design-system/"),
    ],
)
def test_normalize_root_path(value: str | None, expected: str) -> None:
    assert normalize_root_path(value) == expected
