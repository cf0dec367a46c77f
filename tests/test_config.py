"""Tests for connector configuration."""

from unittest.mock import patch

import pytest

from dockerhub_sync.config import DEFAULT_BASE_URL, ConnectorConfig, load_config, parse_orgs
from dockerhub_sync.exceptions import ConfigurationError

ENV_VARS = (
    "DOCKERHUB_USERNAME",
    "DOCKERHUB_PASSWORD",
    "DOCKERHUB_ACCESS_TOKEN",
    "DOCKERHUB_ORGS",
    "DOCKERHUB_BASE_URL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    with patch("dockerhub_sync.config.load_dotenv"):
        yield monkeypatch


@pytest.mark.parametrize(
    "config",
    [
        ConnectorConfig(username="alice", password="hunter2"),
        ConnectorConfig(username="alice", access_token="dckr_pat_x"),
    ],
)
def test_valid_config(config: ConnectorConfig) -> None:
    config.validate()


@pytest.mark.parametrize(
    "config, message",
    [
        (ConnectorConfig(username="", password="hunter2"), "username"),
        (ConnectorConfig(username="alice"), "either"),
        (
            ConnectorConfig(username="alice", password="hunter2", access_token="dckr_pat_x"),
            "mutually exclusive",
        ),
    ],
)
def test_invalid_config(config: ConnectorConfig, message: str) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        config.validate()

    assert message in exc_info.value.message


def test_secret_prefers_access_token() -> None:
    assert ConnectorConfig(username="a", access_token="pat").secret == "pat"
    assert ConnectorConfig(username="a", password="pw").secret == "pw"


def test_secrets_not_in_repr() -> None:
    config = ConnectorConfig(username="alice", password="hunter2", access_token="dckr_pat_x")

    assert "hunter2" not in repr(config)
    assert "dckr_pat_x" not in repr(config)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", []),
        ("acme", ["acme"]),
        (" acme , globex ,, ", ["acme", "globex"]),
    ],
)
def test_parse_orgs(raw: str, expected: list[str]) -> None:
    assert parse_orgs(raw) == expected


def test_load_config_from_env(clean_env) -> None:
    clean_env.setenv("DOCKERHUB_USERNAME", "alice")
    clean_env.setenv("DOCKERHUB_ACCESS_TOKEN", "dckr_pat_x")
    clean_env.setenv("DOCKERHUB_ORGS", "acme,globex")

    config = load_config()

    assert config == ConnectorConfig(
        username="alice",
        access_token="dckr_pat_x",
        orgs=["acme", "globex"],
    )
    assert config.base_url == DEFAULT_BASE_URL


def test_load_config_empty_env(clean_env) -> None:
    config = load_config()

    assert config.username == ""
    assert config.password is None
    assert config.access_token is None
    assert config.orgs == []
    with pytest.raises(ConfigurationError):
        config.validate()
