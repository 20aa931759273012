"""Serialize resolved site configuration back to its authored field names.

Downstream builders key off the camelCase names used in ``siteConfig``
(``baseUrl``, ``headerLinks``, ``colors.primaryColor``...), so the export
keeps those names stable regardless of the Python attribute names on
:class:`~docsite_config.config.models.ResolvedSiteConfig`.

Examples
--------
>>> from docsite_config.config import resolve_site_config, to_raw_mapping
>>> config = resolve_site_config(
...     {
...         "title": "Docs",
...         "url": "https://example.org",
...         "baseUrl": "/",
...         "headerLinks": [{"blog": True, "label": "Blog"}],
...     }
... )
>>> to_raw_mapping(config)["headerLinks"]
[{'blog': True, 'label': 'Blog'}]
"""

from __future__ import annotations

import collections.abc as cabc
import json
import typing as typ

from ruamel.yaml import YAML

if typ.TYPE_CHECKING:
    from .models import HeaderLink, ResolvedSiteConfig, UserShowcase

ExportFormat = typ.Literal["yaml", "json"]


def to_raw_mapping(config: ResolvedSiteConfig) -> dict[str, typ.Any]:
    """Return ``config`` as a plain mapping using the authored key names.

    Optional identity and branding fields that resolved to ``None`` are
    omitted; custom keys are merged back in at the end.
    """
    data: dict[str, typ.Any] = {
        "title": config.title,
        "tagline": config.tagline,
        "url": config.url,
        "baseUrl": config.base_url,
        "projectName": config.project_name,
        "organizationName": config.organization_name,
        "repoUrl": config.repo_url,
        "headerLinks": [_header_link_mapping(link) for link in config.header_links],
        "users": [_user_mapping(user) for user in config.users],
        "headerIcon": config.header_icon,
        "footerIcon": config.footer_icon,
        "favicon": config.favicon,
        "colors": {
            "primaryColor": config.colors.primary_color,
            "secondaryColor": config.colors.secondary_color,
        },
        "fonts": {name: list(stack) for name, stack in config.fonts.items()},
        "copyright": config.copyright,
        "highlight": {"theme": config.highlight.theme},
        "scripts": list(config.scripts),
        "onPageNav": config.on_page_nav,
        "cleanUrl": config.clean_url,
        "ogImage": config.og_image,
        "twitterImage": config.twitter_image,
        "docsSideNavCollapsible": config.docs_side_nav_collapsible,
        "enableUpdateBy": config.enable_update_by,
        "enableUpdateTime": config.enable_update_time,
    }
    exported = {key: value for key, value in data.items() if value is not None}
    exported.update(_thaw(config.custom_fields))
    return exported


def dump_site_config(
    config: ResolvedSiteConfig, stream: typ.TextIO, *, fmt: ExportFormat = "yaml"
) -> None:
    """Write ``config`` to ``stream`` as YAML or JSON."""
    data = to_raw_mapping(config)
    match fmt:
        case "yaml":
            _build_dump_yaml().dump(data, stream)
        case "json":
            json.dump(data, stream, indent=2, ensure_ascii=False, default=str)
            stream.write("\n")
        case _:
            msg = f"Unsupported export format '{fmt}'; expected 'yaml' or 'json'."
            raise ValueError(msg)


def _build_dump_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.allow_unicode = True
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _header_link_mapping(link: HeaderLink) -> dict[str, typ.Any]:
    match link.kind:
        case "doc":
            return {"doc": link.doc, "label": link.label}
        case "href":
            return {"href": link.href, "label": link.label}
        case _:
            return {"blog": True, "label": link.label}


def _user_mapping(user: UserShowcase) -> dict[str, typ.Any]:
    data: dict[str, typ.Any] = {"caption": user.caption, "image": user.image}
    if user.info_link is not None:
        data["infoLink"] = user.info_link
    data["pinned"] = user.pinned
    return data


def _thaw(value: typ.Any) -> typ.Any:
    """Convert read-only mappings, tuples and frozensets into mutable types."""
    if isinstance(value, cabc.Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_thaw(item) for item in value]
    if isinstance(value, frozenset):
        return set(value)
    return value


__all__ = ["ExportFormat", "dump_site_config", "to_raw_mapping"]
