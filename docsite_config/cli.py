"""Cyclopts CLI entrypoint for checking and printing site configuration.

The ``siteconfig`` console script defined here loads the site's
configuration file, resolves it and either reports whether it is valid
(``siteconfig check``) or prints the fully resolved configuration with every
default and derived value filled in (``siteconfig show``). Both commands are
meant to run locally or in CI before the static-site build starts.

Examples
--------
Validate the default configuration file:

>>> from docsite_config.cli import main
>>> main()  # doctest: +SKIP

Print the resolved configuration as JSON:

>>> from docsite_config.cli import app
>>> app.run(["show", "--format", "json"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_CONFIG_PATH, ENV_PREFIX
from .config import ConfigValidationError, dump_site_config, load_site_config
from .config.export import ExportFormat
from .config.models import ResolvedSiteConfig

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_PATH)

app = App(name="siteconfig", config=cyclopts.config.Env(ENV_PREFIX, command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_or_exit(config: Path) -> ResolvedSiteConfig:
    """Resolve ``config``, reporting failures on stderr and exiting with 1."""
    location = _format_path(config)
    try:
        return load_site_config(config)
    except ConfigValidationError as exc:
        print(f"{location}: invalid {exc.field}: {exc.reason}", file=sys.stderr)
        raise SystemExit(1) from exc
    except (FileNotFoundError, TypeError, ValueError, YAMLError) as exc:
        print(f"{location}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


@app.command(help="Validate the site configuration and summarise the result.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Resolve the configuration file and report the outcome.

    Parameters
    ----------
    config : Path, optional
        Path to the site configuration file (overridable via
        ``INPUT_CONFIG``).

    Returns
    -------
    None
        Prints a one-line summary to stdout when the configuration resolves.

    Raises
    ------
    SystemExit
        With status 1 when the file is missing, unreadable or invalid; the
        offending field and reason are printed to stderr.
    """
    site = _load_or_exit(config)
    summary = f"{site.title} at {site.site_url}, {len(site.header_links)} header links"
    print(f"{_format_path(config)}: ok ({summary})")


@app.command(help="Print the resolved site configuration with defaults applied.")
def show(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    format: typ.Annotated[  # noqa: A002 - mirrors the --format flag
        ExportFormat, Parameter(help="Output format", env_var="INPUT_FORMAT")
    ] = "yaml",
) -> None:
    """Print the resolved configuration using the authored field names.

    Parameters
    ----------
    config : Path, optional
        Path to the site configuration file (overridable via
        ``INPUT_CONFIG``).
    format : {"yaml", "json"}, optional
        Serialization used for stdout; defaults to YAML.

    Raises
    ------
    SystemExit
        With status 1 when the configuration cannot be loaded or resolved.
    """
    site = _load_or_exit(config)
    dump_site_config(site, sys.stdout, fmt=format)


def main() -> None:
    """Invoke the Cyclopts application that powers the `siteconfig` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
