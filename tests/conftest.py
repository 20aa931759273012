"""Shared fixtures for the site configuration test suite."""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from docsite_config.config import ConfigResolver

FIXED_TODAY = dt.date(2024, 6, 1)


@pytest.fixture
def raw_config() -> dict[str, typ.Any]:
    """Return a minimal valid raw configuration modelled on a real site."""
    return {
        "title": "Baahu",
        "tagline": "Fast Moore machine-based UI framework",
        "url": "https://baahu.dev",
        "baseUrl": "/",
        "projectName": "baahu",
        "organizationName": "baahu",
        "headerLinks": [
            {"doc": "introduction", "label": "Docs"},
            {"doc": "cheatsheet", "label": "API"},
            {"href": "https://github.com/tjkandala/baahu", "label": "Github"},
            {"blog": True, "label": "Blog"},
        ],
    }


@pytest.fixture
def resolver() -> ConfigResolver:
    """Return a resolver whose clock is pinned to :data:`FIXED_TODAY`."""
    return ConfigResolver(today=lambda: FIXED_TODAY)


@pytest.fixture
def fixed_year() -> int:
    """Return the calendar year the pinned resolver clock reports."""
    return FIXED_TODAY.year
