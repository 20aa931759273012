"""Resolve documentation site configuration for static-site builds.

This package exposes the CLI entry points used by ``uv run siteconfig`` to
check and print a site's resolved configuration, and re-exports the resolver
API for build scripts that consume the configuration directly.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``ConfigResolver`` / ``ResolvedSiteConfig``: the resolution API.

Examples
--------
>>> from docsite_config import main
>>> main()  # doctest: +SKIP
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main
from .config import ConfigResolver, ConfigValidationError, ResolvedSiteConfig

__all__ = [
    "ConfigResolver",
    "ConfigValidationError",
    "ResolvedSiteConfig",
    "app",
    "main",
]
