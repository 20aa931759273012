"""Typed dataclasses describing a resolved documentation site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from types import MappingProxyType

HeaderLinkKind = typ.Literal["doc", "href", "blog"]
OnPageNav = typ.Literal["separate", "none"]


def _empty_mapping() -> typ.Mapping[str, typ.Any]:
    return MappingProxyType({})


class ConfigValidationError(ValueError):
    """Raised when a raw site configuration is invalid or incomplete.

    Attributes
    ----------
    field : str
        Dotted path of the offending field as authored, for example
        ``"title"``, ``"headerLinks[2]"`` or ``"colors.primaryColor"``.
    reason : str
        Human-readable explanation of the violation.
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason

    def __reduce__(self) -> tuple[type[ConfigValidationError], tuple[str, str]]:
        return (type(self), (self.field, self.reason))


@dc.dataclass(frozen=True, slots=True)
class HeaderLink:
    """Navigation bar entry pointing to a doc, an external page, or the blog."""

    label: str
    doc: str | None = None
    href: str | None = None
    blog: bool = False

    @property
    def kind(self) -> HeaderLinkKind:
        """Return which destination this link targets."""
        if self.doc is not None:
            return "doc"
        if self.href is not None:
            return "href"
        return "blog"


@dc.dataclass(frozen=True, slots=True)
class UserShowcase:
    """Project or organisation listed on the users page."""

    caption: str
    image: str
    info_link: str | None = None
    pinned: bool = False


@dc.dataclass(frozen=True, slots=True)
class ColorPalette:
    """Primary and secondary site colors."""

    primary_color: str
    secondary_color: str


@dc.dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Syntax highlighting options passed through to the renderer."""

    theme: str


@dc.dataclass(frozen=True, slots=True)
class ResolvedSiteConfig:
    """A validated, defaulted and immutable site configuration.

    Instances are produced by :class:`~docsite_config.config.ConfigResolver`
    and handed to the page, navigation and feed builders as a read-only
    value. Every nested collection is a tuple or a read-only mapping, so a
    record can be shared freely between threads.
    """

    title: str
    url: str
    base_url: str
    header_links: tuple[HeaderLink, ...]
    copyright: str
    colors: ColorPalette
    highlight: HighlightConfig
    tagline: str | None = None
    project_name: str | None = None
    organization_name: str | None = None
    repo_url: str | None = None
    users: tuple[UserShowcase, ...] = ()
    header_icon: str | None = None
    footer_icon: str | None = None
    favicon: str | None = None
    og_image: str | None = None
    twitter_image: str | None = None
    fonts: typ.Mapping[str, tuple[str, ...]] = dc.field(
        default_factory=_empty_mapping, hash=False
    )
    scripts: tuple[str, ...] = ()
    on_page_nav: OnPageNav = "separate"
    clean_url: bool = True
    docs_side_nav_collapsible: bool = False
    enable_update_by: bool = False
    enable_update_time: bool = False
    custom_fields: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=_empty_mapping, hash=False
    )

    @property
    def site_url(self) -> str:
        """Return the absolute root of the published site."""
        return self.url.rstrip("/") + self.base_url

    @property
    def pinned_users(self) -> tuple[UserShowcase, ...]:
        """Return the pinned users in authored order."""
        return tuple(user for user in self.users if user.pinned)

    @property
    def doc_links(self) -> tuple[HeaderLink, ...]:
        """Return header links that point at documentation pages."""
        return tuple(link for link in self.header_links if link.kind == "doc")

    def get_header_link(self, label: str) -> HeaderLink:
        """Return the header link with the given label."""
        for link in self.header_links:
            if link.label == label:
                return link
        available = ", ".join(link.label for link in self.header_links)
        msg = f"Unknown header link '{label}'. Known links: {available}"
        raise KeyError(msg)

    def asset_url(self, path: str) -> str:
        """Return ``path`` as served from the site's base URL.

        Absolute URLs are returned unchanged; root-relative and relative
        paths are placed under :attr:`base_url`.

        Examples
        --------
        >>> from docsite_config.config import resolve_site_config
        >>> config = resolve_site_config(
        ...     {
        ...         "title": "Docs",
        ...         "url": "https://example.org",
        ...         "baseUrl": "/site/",
        ...         "headerLinks": [{"doc": "intro", "label": "Docs"}],
        ...     }
        ... )
        >>> config.asset_url("/img/logo.svg")
        '/site/img/logo.svg'
        """
        if "://" in path or path.startswith("//"):
            return path
        return self.base_url + path.lstrip("/")


__all__ = [
    "ColorPalette",
    "ConfigValidationError",
    "HeaderLink",
    "HeaderLinkKind",
    "HighlightConfig",
    "OnPageNav",
    "ResolvedSiteConfig",
    "UserShowcase",
]
