"""Resolve raw site configuration mappings into typed, immutable records."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import datetime as dt
import typing as typ
from types import MappingProxyType

from .helpers import (
    _as_mapping,
    _as_sequence,
    _check_base_url,
    _check_site_url,
    _format_copyright,
    _optional_bool,
    _optional_nonblank_str,
    _optional_str,
    _require_str,
    _string_tuple,
)
from .models import (
    ColorPalette,
    ConfigValidationError,
    HeaderLink,
    HighlightConfig,
    OnPageNav,
    ResolvedSiteConfig,
    UserShowcase,
)

ON_PAGE_NAV_CHOICES: tuple[OnPageNav, ...] = ("separate", "none")
KNOWN_KEYS = frozenset(
    {
        "title",
        "tagline",
        "url",
        "baseUrl",
        "projectName",
        "organizationName",
        "repoUrl",
        "headerLinks",
        "users",
        "headerIcon",
        "footerIcon",
        "favicon",
        "ogImage",
        "twitterImage",
        "colors",
        "fonts",
        "copyright",
        "highlight",
        "scripts",
        "onPageNav",
        "cleanUrl",
        "docsSideNavCollapsible",
        "enableUpdateBy",
        "enableUpdateTime",
    }
)
_DESTINATION_KEYS = ("doc", "href", "blog")


@dc.dataclass(frozen=True, slots=True)
class ResolverDefaults:
    """Fallback values applied to optional fields missing from the raw config.

    The palette and highlight theme are placeholders; pass values matching
    the consuming build tool's theme where they differ.
    """

    primary_color: str = "#2E8555"
    secondary_color: str = "#205C3B"
    highlight_theme: str = "default"
    on_page_nav: OnPageNav = "separate"
    clean_url: bool = True


class ConfigResolver:
    """Validate a raw site configuration and build a :class:`ResolvedSiteConfig`.

    Parameters
    ----------
    defaults : ResolverDefaults or None, optional
        Fallback values for optional fields. ``None`` uses
        :class:`ResolverDefaults` as-is.
    today : callable, optional
        Returns the current date; read once per :meth:`resolve` call to
        derive the copyright year.

    Examples
    --------
    >>> import datetime as dt
    >>> resolver = ConfigResolver(today=lambda: dt.date(2024, 5, 1))
    >>> config = resolver.resolve(
    ...     {
    ...         "title": "Baahu",
    ...         "url": "https://baahu.dev",
    ...         "baseUrl": "/",
    ...         "organizationName": "baahu",
    ...         "headerLinks": [{"doc": "introduction", "label": "Docs"}],
    ...     }
    ... )
    >>> config.copyright
    'Copyright © 2024 baahu'
    """

    def __init__(
        self,
        *,
        defaults: ResolverDefaults | None = None,
        today: cabc.Callable[[], dt.date] = dt.date.today,
    ) -> None:
        self.defaults = defaults or ResolverDefaults()
        self._today = today

    def resolve(self, raw: cabc.Mapping[str, typ.Any]) -> ResolvedSiteConfig:
        """Return the resolved configuration for ``raw``.

        Parameters
        ----------
        raw : Mapping[str, Any]
            The site configuration as authored, keyed by camelCase field
            names such as ``baseUrl`` and ``headerLinks``.

        Returns
        -------
        ResolvedSiteConfig
            Immutable record with defaults applied and copyright derived.

        Raises
        ------
        ConfigValidationError
            For the first violation found. Required identity fields are
            checked first, then ``url``, ``baseUrl``, ``headerLinks``,
            ``users`` and finally the remaining optional fields.
        """
        if not isinstance(raw, cabc.Mapping):
            msg = f"must be a mapping, got {type(raw).__name__}"
            raise ConfigValidationError("config", msg)
        year = self._today().year

        title = _require_str(raw, "title", field="title")
        url = _require_str(raw, "url", field="url")
        base_url = _require_str(raw, "baseUrl", field="baseUrl")
        _check_site_url(url)
        _check_base_url(base_url)
        header_links = _build_header_links(raw.get("headerLinks"))
        users = _build_users(raw.get("users"))

        project_name = _optional_str(raw, "projectName", field="projectName")
        organization_name = _optional_str(
            raw, "organizationName", field="organizationName"
        )
        copyright_text = _optional_nonblank_str(raw, "copyright", field="copyright")
        if copyright_text is None:
            owner = organization_name or project_name or title
            copyright_text = _format_copyright(year, owner)

        on_page_nav = raw.get("onPageNav")
        if on_page_nav is None:
            on_page_nav = self.defaults.on_page_nav
        if on_page_nav not in ON_PAGE_NAV_CHOICES:
            choices = ", ".join(repr(choice) for choice in ON_PAGE_NAV_CHOICES)
            msg = f"must be one of {choices}, got {on_page_nav!r}"
            raise ConfigValidationError("onPageNav", msg)

        return ResolvedSiteConfig(
            title=title,
            url=url,
            base_url=base_url,
            header_links=header_links,
            copyright=copyright_text,
            colors=self._build_colors(raw.get("colors")),
            highlight=self._build_highlight(raw.get("highlight")),
            tagline=_optional_str(raw, "tagline", field="tagline"),
            project_name=project_name,
            organization_name=organization_name,
            repo_url=_optional_str(raw, "repoUrl", field="repoUrl"),
            users=users,
            header_icon=_optional_str(raw, "headerIcon", field="headerIcon"),
            footer_icon=_optional_str(raw, "footerIcon", field="footerIcon"),
            favicon=_optional_str(raw, "favicon", field="favicon"),
            og_image=_optional_str(raw, "ogImage", field="ogImage"),
            twitter_image=_optional_str(raw, "twitterImage", field="twitterImage"),
            fonts=_build_fonts(raw.get("fonts")),
            scripts=_build_scripts(raw.get("scripts")),
            on_page_nav=on_page_nav,
            clean_url=_optional_bool(
                raw, "cleanUrl", field="cleanUrl", default=self.defaults.clean_url
            ),
            docs_side_nav_collapsible=_optional_bool(
                raw,
                "docsSideNavCollapsible",
                field="docsSideNavCollapsible",
                default=False,
            ),
            enable_update_by=_optional_bool(
                raw, "enableUpdateBy", field="enableUpdateBy", default=False
            ),
            enable_update_time=_optional_bool(
                raw, "enableUpdateTime", field="enableUpdateTime", default=False
            ),
            custom_fields=_collect_custom_fields(raw),
        )

    def _build_colors(self, payload: object | None) -> ColorPalette:
        """Merge authored colors over the fallback palette, field by field."""
        if payload is None:
            payload = {}
        colors = _as_mapping(payload, field="colors")
        primary = _optional_nonblank_str(
            colors, "primaryColor", field="colors.primaryColor"
        )
        secondary = _optional_nonblank_str(
            colors, "secondaryColor", field="colors.secondaryColor"
        )
        if primary is None:
            primary = self.defaults.primary_color
        if secondary is None:
            secondary = self.defaults.secondary_color
        return ColorPalette(primary_color=primary, secondary_color=secondary)

    def _build_highlight(self, payload: object | None) -> HighlightConfig:
        """Build highlight options, falling back to the default theme."""
        if payload is None:
            payload = {}
        highlight = _as_mapping(payload, field="highlight")
        theme = _optional_nonblank_str(highlight, "theme", field="highlight.theme")
        if theme is None:
            theme = self.defaults.highlight_theme
        return HighlightConfig(theme=theme)


def resolve_site_config(
    raw: cabc.Mapping[str, typ.Any],
    *,
    defaults: ResolverDefaults | None = None,
    today: cabc.Callable[[], dt.date] | None = None,
) -> ResolvedSiteConfig:
    """Resolve ``raw`` with a one-off :class:`ConfigResolver`."""
    if today is None:
        resolver = ConfigResolver(defaults=defaults)
    else:
        resolver = ConfigResolver(defaults=defaults, today=today)
    return resolver.resolve(raw)


def _build_header_links(entries: object | None) -> tuple[HeaderLink, ...]:
    """Build navigation bar links, enforcing a single destination per entry."""
    if entries is None:
        msg = "is required"
        raise ConfigValidationError("headerLinks", msg)
    items = _as_sequence(entries, field="headerLinks")
    if not items:
        msg = "must contain at least one link"
        raise ConfigValidationError("headerLinks", msg)

    links: list[HeaderLink] = []
    for index, entry in enumerate(items):
        field = f"headerLinks[{index}]"
        data = _as_mapping(entry, field=field)
        blog = _optional_bool(data, "blog", field=f"{field}.blog", default=False)
        chosen = [
            key
            for key in _DESTINATION_KEYS
            if (blog if key == "blog" else data.get(key) is not None)
        ]
        if len(chosen) != 1:
            options = ", ".join(f"'{key}'" for key in _DESTINATION_KEYS)
            if chosen:
                given = " and ".join(f"'{key}'" for key in chosen)
                msg = f"sets {given}; exactly one of {options} is allowed"
            else:
                msg = f"must set exactly one of {options}"
            raise ConfigValidationError(field, msg)
        label = _require_str(data, "label", field=f"{field}.label")
        match chosen[0]:
            case "doc":
                doc = _require_str(data, "doc", field=f"{field}.doc")
                links.append(HeaderLink(label=label, doc=doc))
            case "href":
                href = _require_str(data, "href", field=f"{field}.href")
                links.append(HeaderLink(label=label, href=href))
            case _:
                links.append(HeaderLink(label=label, blog=True))
    return tuple(links)


def _build_users(entries: object | None) -> tuple[UserShowcase, ...]:
    """Build the users showcase; an absent list resolves to an empty tuple."""
    if entries is None:
        return ()
    users: list[UserShowcase] = []
    for index, entry in enumerate(_as_sequence(entries, field="users")):
        field = f"users[{index}]"
        data = _as_mapping(entry, field=field)
        users.append(
            UserShowcase(
                caption=_require_str(data, "caption", field=f"{field}.caption"),
                image=_require_str(data, "image", field=f"{field}.image"),
                info_link=_optional_str(data, "infoLink", field=f"{field}.infoLink"),
                pinned=_optional_bool(
                    data, "pinned", field=f"{field}.pinned", default=False
                ),
            )
        )
    return tuple(users)


def _build_fonts(payload: object | None) -> typ.Mapping[str, tuple[str, ...]]:
    """Build the read-only font stack mapping."""
    if payload is None:
        return MappingProxyType({})
    fonts: dict[str, tuple[str, ...]] = {}
    for name, families in _as_mapping(payload, field="fonts").items():
        if not isinstance(name, str) or not name.strip():
            msg = f"font names must be non-empty strings, got {name!r}"
            raise ConfigValidationError("fonts", msg)
        field = f"fonts.{name}"
        stack = _string_tuple(families, field=field)
        if not stack:
            msg = "must list at least one font family"
            raise ConfigValidationError(field, msg)
        fonts[name] = stack
    return MappingProxyType(fonts)


def _build_scripts(payload: object | None) -> tuple[str, ...]:
    """Build the ordered tuple of script URLs."""
    if payload is None:
        return ()
    return _string_tuple(payload, field="scripts")


def _collect_custom_fields(
    raw: cabc.Mapping[str, typ.Any],
) -> typ.Mapping[str, typ.Any]:
    """Return a read-only copy of keys this resolver does not interpret."""
    extras = {
        key: _freeze(value)
        for key, value in raw.items()
        if key not in KNOWN_KEYS
    }
    return MappingProxyType(extras)


def _freeze(value: typ.Any) -> typ.Any:
    """Copy ``value`` into read-only mappings, tuples and frozensets."""
    if isinstance(value, cabc.Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, set | frozenset):
        return frozenset(_freeze(item) for item in value)
    return value


__all__ = [
    "KNOWN_KEYS",
    "ON_PAGE_NAV_CHOICES",
    "ConfigResolver",
    "ResolverDefaults",
    "resolve_site_config",
]
