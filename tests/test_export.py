"""Unit tests for exporting resolved configuration."""

from __future__ import annotations

import io
import json
import typing as typ

import pytest
from ruamel.yaml import YAML

from docsite_config.config import dump_site_config, to_raw_mapping

if typ.TYPE_CHECKING:
    from docsite_config.config import ConfigResolver


def test_export_uses_authored_names_and_defaults(
    resolver: ConfigResolver, raw_config: dict[str, typ.Any], fixed_year: int
) -> None:
    """Exported keys keep the camelCase names consumers look up."""
    exported = to_raw_mapping(resolver.resolve(raw_config))

    assert exported["baseUrl"] == "/", f"unexpected baseUrl {exported.get('baseUrl')!r}"
    assert exported["headerLinks"][2] == {
        "href": "https://github.com/tjkandala/baahu",
        "label": "Github",
    }
    assert exported["colors"] == {
        "primaryColor": "#2E8555",
        "secondaryColor": "#205C3B",
    }
    assert exported["highlight"] == {"theme": "default"}
    assert exported["copyright"] == f"Copyright © {fixed_year} baahu"
    assert exported["users"] == [], "expected empty users list"
    assert "favicon" not in exported, "unset optional paths should be omitted"


def test_export_round_trips_through_resolver(
    resolver: ConfigResolver, raw_config: dict[str, typ.Any]
) -> None:
    """Resolving an exported mapping should reproduce the same record."""
    raw_config["users"] = [{"caption": "User1", "image": "/img/u.svg"}]
    raw_config["fonts"] = {"myFont": ["Times New Roman", "Serif"]}
    raw_config["algolia"] = {"indexName": "baahu"}
    config = resolver.resolve(raw_config)

    assert resolver.resolve(to_raw_mapping(config)) == config


def test_dump_yaml(resolver: ConfigResolver, raw_config: dict[str, typ.Any]) -> None:
    """YAML output should parse back into the exported mapping."""
    config = resolver.resolve(raw_config)
    stream = io.StringIO()
    dump_site_config(config, stream)

    parsed = YAML(typ="safe").load(stream.getvalue())
    assert parsed == to_raw_mapping(config)
    assert "Copyright ©" in stream.getvalue(), "expected unicode to be kept as-is"


def test_dump_json(resolver: ConfigResolver, raw_config: dict[str, typ.Any]) -> None:
    """JSON output should contain the same mapping."""
    config = resolver.resolve(raw_config)
    stream = io.StringIO()
    dump_site_config(config, stream, fmt="json")
    assert json.loads(stream.getvalue()) == to_raw_mapping(config)


def test_dump_rejects_unknown_format(
    resolver: ConfigResolver, raw_config: dict[str, typ.Any]
) -> None:
    """Only YAML and JSON are supported."""
    config = resolver.resolve(raw_config)
    with pytest.raises(ValueError, match="Unsupported export format"):
        dump_site_config(config, io.StringIO(), fmt="xml")  # type: ignore[arg-type]
