"""Load site configuration files into raw mappings and resolved records."""

from __future__ import annotations

import json
import typing as typ

import tomlkit
from ruamel.yaml import YAML

from .resolver import ConfigResolver

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import ResolvedSiteConfig

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
TOML_SUFFIXES = frozenset({".toml"})
JSON_SUFFIXES = frozenset({".json"})


def load_raw_site_config(path: Path) -> dict[str, typ.Any]:
    """Read the as-authored site configuration from ``path``.

    The format is chosen from the file suffix: ``.yaml``/``.yml`` files are
    parsed with ``ruamel.yaml`` (YAML 1.2, safe loader), ``.toml`` files with
    ``tomlkit`` and ``.json`` files with the standard library.

    Raises
    ------
    FileNotFoundError
        If no file exists at ``path``.
    ValueError
        If the suffix is not a supported configuration format.
    TypeError
        If the top-level document is not a mapping.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in YAML_SUFFIXES:
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        loaded = loader.load(text)
    elif suffix in TOML_SUFFIXES:
        loaded = tomlkit.parse(text).unwrap()
    elif suffix in JSON_SUFFIXES:
        loaded = json.loads(text)
    else:
        supported = ", ".join(
            sorted(YAML_SUFFIXES | TOML_SUFFIXES | JSON_SUFFIXES)
        )
        msg = f"Unsupported configuration format '{suffix}'; expected {supported}."
        raise ValueError(msg)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "Top-level configuration structure must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


def load_site_config(
    path: Path, *, resolver: ConfigResolver | None = None
) -> ResolvedSiteConfig:
    """Load ``path`` and resolve it into a :class:`ResolvedSiteConfig`.

    Parameters
    ----------
    path : Path
        Site configuration file, for example ``website/siteConfig.yaml``.
    resolver : ConfigResolver or None, optional
        Resolver carrying custom defaults or a fixed clock; a default
        :class:`ConfigResolver` is used when omitted.

    Returns
    -------
    ResolvedSiteConfig
        The validated configuration.

    Raises
    ------
    ConfigValidationError
        If the loaded configuration violates the site schema.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docsite_config.config import load_site_config
    >>> config = load_site_config(Path("website/siteConfig.yaml"))  # doctest: +SKIP
    >>> config.site_url  # doctest: +SKIP
    'https://baahu.dev/'
    """
    raw = load_raw_site_config(path)
    return (resolver or ConfigResolver()).resolve(raw)


__all__ = ["load_raw_site_config", "load_site_config"]
