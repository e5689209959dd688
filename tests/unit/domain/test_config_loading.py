from __future__ import annotations

"""
Unit tests for configuration defaults and JSON configuration files.
"""

import json

from singleinclude.domain.config import get_default_config, load_config
from singleinclude.domain.constants import DEFAULT_HEADER, DEFAULT_MAX_DEPTH


def test_defaults_shape():
    cfg = get_default_config()

    assert cfg["include_paths"] == []
    assert cfg["expand_all"] is False
    assert cfg["max_depth"] == DEFAULT_MAX_DEPTH
    assert cfg["header"] == DEFAULT_HEADER


def test_default_header_is_bit_exact():
    assert DEFAULT_HEADER.splitlines() == [
        "// This file is generated automatically by SingleInclude",
        "// It's suggested not to edit anything below",
        "// If you found any issue, please report to "
        "https://github.com/dragon-archer/SingleInclude/issues",
    ]
    assert DEFAULT_HEADER.endswith("\n")


def test_load_config_without_path_returns_defaults():
    assert load_config(None) == get_default_config()


def test_load_config_merges_known_keys(tmp_path):
    path = tmp_path / "si.json"
    path.write_text(json.dumps({
        "include_paths": ["inc"],
        "expand_all": True,
        "unknown_key": 1,
    }), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["include_paths"] == ["inc"]
    assert cfg["expand_all"] is True
    assert "unknown_key" not in cfg


def test_load_config_malformed_falls_back(tmp_path, caplog):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level("WARNING"):
        cfg = load_config(str(path))

    assert cfg == get_default_config()
    assert "Failed to load configuration" in caplog.text


def test_load_config_non_object_falls_back(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert load_config(str(path)) == get_default_config()


def test_load_config_missing_file_falls_back(tmp_path):
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()
