"""Tests for e2ekit.tools.session with a fake Playwright page."""
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from e2ekit.settings import Settings
from e2ekit.tools.config_store import ConfigStore
from e2ekit.tools.session import ensure_authenticated

SETTINGS = Settings(base_url="https://app.test", username="qa@app.test", password="secret")
FAR_FUTURE = 32503680000  # year 3000


def storage_state(token: str) -> dict:
    return {
        "cookies": [],
        "origins": [
            {"origin": "https://app.test", "localStorage": [{"name": "TOKEN", "value": token}]}
        ],
    }


@pytest.fixture
def fresh_token(make_jwt) -> str:
    return make_jwt({"exp": FAR_FUTURE, "user_id": "qa", "roles": []})


@pytest.fixture
def page(fresh_token: str) -> MagicMock:
    """Fake page whose context writes a storage state holding fresh_token."""
    page = MagicMock()

    def save_state(path: str) -> None:
        Path(path).write_text(json.dumps(storage_state(fresh_token)))

    page.context.storage_state.side_effect = save_state
    return page


def test_reuses_valid_session(tmp_path: Path, page: MagicMock, fresh_token: str) -> None:
    auth_file = tmp_path / "user.json"
    auth_file.write_text(json.dumps(storage_state(fresh_token)))
    tmp_dir = tmp_path / ".tmp"
    tmp_dir.mkdir()

    assert ensure_authenticated(page, auth_file, SETTINGS, tmp_dir=tmp_dir) is False
    page.goto.assert_not_called()
    assert not tmp_dir.exists()


def test_logs_in_when_session_missing(tmp_path: Path, page: MagicMock, fresh_token: str) -> None:
    auth_file = tmp_path / ".auth" / "user.json"
    store = ConfigStore(tmp_path / "config.json")

    performed = ensure_authenticated(
        page, auth_file, SETTINGS, tmp_dir=tmp_path / ".tmp", config_store=store
    )

    assert performed is True
    page.goto.assert_called_once_with("https://app.test/login")
    page.get_by_role.assert_any_call("textbox", name="Email")
    page.get_by_role.assert_any_call("textbox", name="Password")
    page.get_by_role.assert_any_call("button", name="Login")
    page.wait_for_url.assert_called_once_with("https://app.test/home")
    assert auth_file.exists()
    assert store.jwt == fresh_token
    assert ConfigStore(tmp_path / "config.json").jwt == fresh_token


def test_logs_in_when_session_expired(tmp_path: Path, page: MagicMock, make_jwt) -> None:
    auth_file = tmp_path / "user.json"
    auth_file.write_text(json.dumps(storage_state(make_jwt({"exp": 1}))))

    assert ensure_authenticated(page, auth_file, SETTINGS, tmp_dir=tmp_path / ".tmp") is True
    page.context.storage_state.assert_called_once_with(path=str(auth_file))
