"""Tests for loading the client configuration from TOML and the environment."""

from __future__ import annotations

from pathlib import Path

import pytest

from config.loader import load_config
from domain.errors import ConfigurationError
from tests.conftest import CLIENT_ID, CLIENT_SECRET, REDIRECT_URI

ENV_VARS = (
    "BNET_BLIZZARD__CLIENT_ID",
    "BNET_BLIZZARD__CLIENT_SECRET",
    "BNET_BLIZZARD__REGION",
    "BNET_BLIZZARD__LOCALE",
    "BNET_BLIZZARD__REDIRECT_URI",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the caller's environment and any local .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_load_config_from_toml(tmp_path: Path) -> None:
    path = write_config(
        tmp_path,
        f"""
[blizzard]
client_id = "{CLIENT_ID}"
client_secret = "{CLIENT_SECRET}"
region = "eu"
locale = "de_DE"
redirect_uri = "{REDIRECT_URI}"
""",
    )

    config = load_config(path)

    assert config.blizzard.client_id == CLIENT_ID
    assert config.blizzard.client_secret.get_secret_value() == CLIENT_SECRET
    assert config.blizzard.region == "eu"
    assert config.blizzard.locale == "de_DE"
    assert config.blizzard.redirect_uri == REDIRECT_URI


def test_environment_supplies_missing_keys(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = write_config(
        tmp_path,
        f"""
[blizzard]
client_id = "{CLIENT_ID}"
region = "us"
""",
    )
    monkeypatch.setenv("BNET_BLIZZARD__CLIENT_SECRET", CLIENT_SECRET)

    config = load_config(path)

    assert config.blizzard.client_secret.get_secret_value() == CLIENT_SECRET
    assert config.blizzard.locale is None


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")


def test_invalid_value_raises_configuration_error(tmp_path: Path) -> None:
    path = write_config(
        tmp_path,
        f"""
[blizzard]
client_id = "{CLIENT_ID}"
client_secret = "{CLIENT_SECRET}"
region = "sea"
""",
    )

    with pytest.raises(ConfigurationError) as exc_info:
        load_config(path)

    assert exc_info.value.field == "region"
