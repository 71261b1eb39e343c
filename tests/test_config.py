import pytest

from src.utils.config import DEFAULT_ENDPOINT, ConfigError, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("STATUS_CHECK_ENDPOINT", "STATUS_CHECK_TIMEOUT", "STATUS_HISTORY_SIZE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = load_config()
    assert str(config.endpoint) == DEFAULT_ENDPOINT
    assert config.timeout == 30.0
    assert config.history_size == 5


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STATUS_CHECK_ENDPOINT", "http://localhost:9000/check")
    monkeypatch.setenv("STATUS_CHECK_TIMEOUT", "2.5")
    monkeypatch.setenv("STATUS_HISTORY_SIZE", "10")

    config = load_config()

    assert str(config.endpoint) == "http://localhost:9000/check"
    assert config.timeout == 2.5
    assert config.history_size == 10


def test_fallback_used_when_env_missing(monkeypatch):
    monkeypatch.setenv("STATUS_CHECK_TIMEOUT", "3")

    config = load_config(fallback={"STATUS_CHECK_ENDPOINT": "http://secrets/check", "STATUS_CHECK_TIMEOUT": "99"})

    assert str(config.endpoint) == "http://secrets/check"
    assert config.timeout == 3.0


@pytest.mark.parametrize("name,value", [
    ("STATUS_CHECK_ENDPOINT", "not a url"),
    ("STATUS_CHECK_ENDPOINT", "ftp://example.com/check"),
    ("STATUS_CHECK_TIMEOUT", "soon"),
    ("STATUS_CHECK_TIMEOUT", "0"),
    ("STATUS_HISTORY_SIZE", "0"),
])
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigError):
        load_config()


def test_zero_from_secrets_is_not_ignored():
    with pytest.raises(ConfigError):
        load_config(fallback={"STATUS_HISTORY_SIZE": 0})


def test_empty_env_value_falls_back(monkeypatch):
    monkeypatch.setenv("STATUS_HISTORY_SIZE", "")

    config = load_config(fallback={"STATUS_HISTORY_SIZE": 7})

    assert config.history_size == 7
