"""Tests for configuration loading and merging."""

import logging
from pathlib import Path

import pytest
import yaml

from doclinks.deep_merge import deep_merge
from doclinks.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}
    assert base == {"nested": {"x": 1, "y": 2}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3, 4]})
    assert merged == {"arr": [3, 4]}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["doc_host"] == "docs.rs"
    assert config["doc_roots"]["std"] == "https://doc.rust-lang.org/nightly/"
    assert config["logging"]["level"] == "WARNING"


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "missing.yml")) == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "doc_host": "docs.example",
        "doc_roots": {"gears": "https://gears.example/"},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["doc_host"] == "docs.example"
    assert loaded["doc_roots"]["gears"] == "https://gears.example/"  # Added
    assert loaded["doc_roots"]["core"] == "https://doc.rust-lang.org/nightly/"
    assert loaded["logging"]["level"] == "WARNING"  # Default
    assert "gears" not in DEFAULT_CONFIG["doc_roots"]


def test_deep_merge_leaves_inputs_untouched() -> None:
    """Verify that merged nested mappings are not shared with the inputs."""
    base = {"nested": {"x": 1}}
    update = {"other": {"y": [1]}}
    merged = deep_merge(base, update)
    merged["nested"]["x"] = 2
    merged["other"]["y"].append(2)
    assert base == {"nested": {"x": 1}}
    assert update == {"other": {"y": [1]}}


def test_load_config_result_is_independent() -> None:
    """Verify that changing a loaded config does not change the defaults."""
    config = load_config(None)
    config["doc_roots"]["std"] = "https://elsewhere.example/"
    assert DEFAULT_CONFIG["doc_roots"]["std"] == "https://doc.rust-lang.org/nightly/"


def test_load_config_null_removes_doc_root(tmp_path: Path) -> None:
    """Verify that a null doc root disables the default for that crate."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("doc_roots:\n  std: null\n", encoding="utf-8")

    loaded = load_config(config_file)
    assert "std" not in loaded["doc_roots"]
    assert loaded["doc_roots"]["core"] == "https://doc.rust-lang.org/nightly/"


def test_load_config_missing_file_warns(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a missing config file is reported."""
    with caplog.at_level(logging.WARNING):
        load_config(tmp_path / "missing.yml")
    assert "missing.yml not found, using defaults" in caplog.text


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a config file must hold a mapping."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- docs.rs\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="must contain a mapping"):
        load_config(config_file)
