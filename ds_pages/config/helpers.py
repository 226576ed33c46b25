"""Utility helpers shared by the ds_pages configuration loader."""

from __future__ import annotations

import typing as typ

from .models import AnalyticsConfig, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_root_path(value: str | None) -> str:
    """Return ``value`` with exactly one trailing ``/``, or ``""`` when empty.

    Examples
    --------
    >>> normalize_root_path("design-system")
    'design-system/'
    >>> normalize_root_path("/design-system/")
    'design-system/'
    >>> normalize_root_path(None)
    ''
    """
    trimmed = (value or "").strip().strip("/")
    return f"{trimmed}/" if trimmed else ""


def _build_analytics_config(payload: object) -> AnalyticsConfig | None:
    """Build an AnalyticsConfig from a mapping or bare URL string."""
    match payload:
        case None:
            return None
        case str():
            url = _optional_str(payload)
        case dict():
            url = _optional_str(typ.cast("dict[str, typ.Any]", payload).get("script_url"))
        case _:
            msg = "'analytics' must be a mapping or a script URL."
            raise SiteConfigError(msg)
    return AnalyticsConfig(script_url=url) if url else None


def _parse_max_workers(value: object) -> int | None:
    """Return a positive worker count or None to use the executor default."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"'max_workers' must be a positive integer, got {value!r}."
        raise SiteConfigError(msg)
    return value


__all__ = [
    "_build_analytics_config",
    "_optional_str",
    "_parse_max_workers",
    "normalize_root_path",
]
