"""Tests for configuration loading."""
import json
import os

import pytest

from armory.infrastructure.config import ConfigError, DEFAULT_PORT, load_config


def _write_config(tmp_path, data) -> str:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestLoadConfig:
    def test_reads_realms_and_world(self, tmp_path):
        path = _write_config(tmp_path, {
            "worldDatabase": "sqlite:///world.db",
            "realms": [{"name": "Icecrown", "database": "sqlite:///chars.db"}],
        })
        config = load_config(path)
        assert [r.name for r in config.realms] == ["Icecrown"]
        assert config.realms[0].database_url == "sqlite:///chars.db"
        assert config.world_database_url == "sqlite:///world.db"
        assert config.port == DEFAULT_PORT

    def test_relative_data_dir_resolved_next_to_config(self, tmp_path):
        path = _write_config(tmp_path, {"realms": [], "dataDir": "dbc"})
        assert load_config(path).data_dir == os.path.join(str(tmp_path), "dbc")

    def test_env_overrides_world_database(self, tmp_path, monkeypatch):
        path = _write_config(tmp_path, {"worldDatabase": "sqlite:///a.db", "realms": []})
        monkeypatch.setenv("WORLD_DATABASE_URL", "sqlite:///b.db")
        assert load_config(path).world_database_url == "sqlite:///b.db"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(str(tmp_path / "nope.json"))

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{bad json", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_realm_without_database(self, tmp_path):
        path = _write_config(tmp_path, {"realms": [{"name": "Icecrown"}]})
        with pytest.raises(ConfigError):
            load_config(path)

    def test_duplicate_realm_names(self, tmp_path):
        path = _write_config(tmp_path, {"realms": [
            {"name": "Icecrown", "database": "sqlite://"},
            {"name": "ICECROWN", "database": "sqlite://"},
        ]})
        with pytest.raises(ConfigError, match="Duplicate"):
            load_config(path)
