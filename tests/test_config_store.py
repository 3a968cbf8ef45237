"""Tests for e2ekit.tools.config_store."""
import json
from pathlib import Path

import pytest

from e2ekit.errors import ConfigError
from e2ekit.tools.config_store import ConfigStore, ensure_config, update_config


def test_ensure_config_creates_default(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    config = ensure_config(path)
    assert config.jwt == ""
    assert json.loads(path.read_text()) == {"jwt": ""}
    assert not path.with_suffix(".tmp").exists()


def test_ensure_config_empty_file_reads_as_empty_object(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("")
    assert ensure_config(path).jwt == ""


def test_ensure_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError) as exc_info:
        ensure_config(path)
    assert exc_info.value.path == str(path)


def test_update_config_merges_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"jwt": "old", "team": "qa"}))

    config = update_config(path, jwt="new")

    assert config.jwt == "new"
    assert json.loads(path.read_text()) == {"jwt": "new", "team": "qa"}


def test_config_store_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    store = ConfigStore(path)
    store.update(jwt="abc", region="eu")

    reloaded = ConfigStore(path)
    assert reloaded.jwt == "abc"
    assert reloaded.get("region") == "eu"
    assert reloaded.get("missing", 1) == 1
