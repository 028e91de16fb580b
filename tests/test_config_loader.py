"""Tests for YAML configuration loading."""

import pytest

from brickset.config import loader
from brickset.config.loader import (
    DEFAULT_QUERIES,
    default_config,
    get_dataset_path,
    load_config,
    resolve_config,
)


def test_load_config_applies_defaults(tmp_path):
    """Test that missing sections are filled with defaults."""
    cfg = tmp_path / "brickset.config.yaml"
    cfg.write_text("dataset:\n  path: sets.json\n", encoding="utf-8")

    config = load_config(cfg)

    assert config["dataset"]["path"] == "sets.json"
    assert config["queries"] == DEFAULT_QUERIES
    assert get_dataset_path(config).name == "sets.json"


def test_load_config_keeps_overrides(tmp_path):
    cfg = tmp_path / "brickset.config.yaml"
    cfg.write_text("queries:\n  names_limit: 3\n  subtheme: Trains\n", encoding="utf-8")

    config = load_config(cfg)

    assert config["queries"]["names_limit"] == 3
    assert config["queries"]["subtheme"] == "Trains"
    assert config["queries"]["pieces_threshold"] == 230
    assert config["queries"]["below_threshold"] == 450
    assert config["dataset"]["path"] == "data/brickset.json"


def test_load_config_empty_file_uses_defaults(tmp_path):
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("", encoding="utf-8")
    assert load_config(cfg) == default_config()


def test_load_config_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(tmp_path / "nope.yaml")


def test_load_config_rejects_non_mapping(tmp_path):
    cfg = tmp_path / "list.yaml"
    cfg.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must be a dictionary"):
        load_config(cfg)


@pytest.mark.parametrize(
    "body,message",
    [
        ("queries:\n  names_limit: -1\n", "names_limit' must be >= 0"),
        ("queries:\n  pieces_threshold: lots\n", "pieces_threshold' must be an integer"),
        ("queries:\n  below_threshold: true\n", "below_threshold' must be an integer"),
        ("queries:\n  subtheme: 42\n", "subtheme' must be a string"),
        ("queries: []\n", "'queries' must be a dictionary"),
    ],
)
def test_load_config_validates_queries(tmp_path, body, message):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_config(cfg)


def test_default_config_is_a_fresh_copy():
    first = default_config()
    first["queries"]["names_limit"] = 99
    assert default_config()["queries"]["names_limit"] == 10


def test_resolve_config_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", tmp_path / "absent.yaml")
    assert resolve_config() == default_config()


def test_resolve_config_prefers_default_file(tmp_path, monkeypatch):
    cfg = tmp_path / "brickset.config.yaml"
    cfg.write_text("queries:\n  names_limit: 2\n", encoding="utf-8")
    monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", cfg)
    assert resolve_config()["queries"]["names_limit"] == 2


def test_resolve_config_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        resolve_config(tmp_path / "missing.yaml")
