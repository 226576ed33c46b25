"""Incremental static page generation for the design-system documentation site.

This package exposes the CLI entry points used by ``pages generate`` to render
the component catalog into documentation pages and isolated markup examples.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from ds_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
