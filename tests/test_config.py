import unittest.mock as mock
from pathlib import Path

import tomllib

from hubdb_client import Configurator

builtin_open = open


# Mock custom config.toml with specific REQUEST_TIMEOUT value
def mock_open_with_custom_config_toml(*args, **kwargs):
    if Path(args[0]).name == "config.toml":
        # mocked open for path "config.toml"
        return mock.mock_open(read_data=b"REQUEST_TIMEOUT = 60")(*args, **kwargs)
    # unpatched version for every other path
    return builtin_open(*args, **kwargs)


def test_default_config():
    config = Configurator()

    assert config.REQUEST_TIMEOUT == 15
    assert config.HUBSPOT_API_BASE_URL == "https://api.hubapi.com"

    # Make sure all config keys are defined
    with open(Path(__file__).parent.parent / "hubdb_client/config_default.toml", "rb") as f:
        assert config.configuration.keys() == tomllib.load(f).keys()


@mock.patch("pathlib.Path.exists", lambda self: True)
@mock.patch("builtins.open", mock_open_with_custom_config_toml)
def test_custom_config_file_override():
    config = Configurator()

    assert config.REQUEST_TIMEOUT == 60


def test_env_override(monkeypatch):
    monkeypatch.setenv("HUBSPOT_API_BASE_URL", "hubapi.example.com/")
    monkeypatch.setenv("REQUEST_TIMEOUT", "30")
    monkeypatch.setenv("SENTRY_SAMPLE_RATE", "0.5")
    config = Configurator()

    assert config.HUBSPOT_API_BASE_URL == "https://hubapi.example.com"
    assert config.REQUEST_TIMEOUT == 30
    assert config.SENTRY_SAMPLE_RATE == 0.5


def test_override():
    config = Configurator()
    config.override(HUBSPOT_API_BASE_URL="http://localhost:8000/")

    assert config.HUBSPOT_API_BASE_URL == "http://localhost:8000"


def test_unknown_key_is_none():
    assert Configurator().NOT_A_SETTING is None
