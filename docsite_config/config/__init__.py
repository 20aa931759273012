"""Validate and resolve documentation site configuration.

This subpackage turns the as-authored site configuration (title, URLs,
navigation links, users showcase, theming and social images) into an
immutable :class:`ResolvedSiteConfig`. :class:`ConfigResolver` checks
required fields, applies defaults for optional ones and derives the
copyright line; :func:`load_site_config` reads a YAML, TOML or JSON file
and resolves it in one step.

Examples
--------
>>> from pathlib import Path
>>> from docsite_config.config import load_site_config
>>> site = load_site_config(Path("website/siteConfig.yaml"))  # doctest: +SKIP
>>> site.get_header_link("Docs").doc  # doctest: +SKIP
'introduction'
"""

from .export import dump_site_config, to_raw_mapping
from .loader import load_raw_site_config, load_site_config
from .models import (
    ColorPalette,
    ConfigValidationError,
    HeaderLink,
    HighlightConfig,
    ResolvedSiteConfig,
    UserShowcase,
)
from .resolver import ConfigResolver, ResolverDefaults, resolve_site_config

__all__ = [
    "ColorPalette",
    "ConfigResolver",
    "ConfigValidationError",
    "HeaderLink",
    "HighlightConfig",
    "ResolvedSiteConfig",
    "ResolverDefaults",
    "UserShowcase",
    "dump_site_config",
    "load_raw_site_config",
    "load_site_config",
    "resolve_site_config",
    "to_raw_mapping",
]
