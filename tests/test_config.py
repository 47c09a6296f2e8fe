import logging

from modules.config import (
    CONFIRMATION_PAGE,
    DEFAULT_IBGE_MUNICIPIOS_URL,
    DEFAULT_WEBHOOK_URL,
    load_config,
)


def test_load_config_defaults(monkeypatch):
    for var in ("MENTORIA_WEBHOOK_URL", "MENTORIA_IBGE_URL", "MENTORIA_HTTP_TIMEOUT", "MENTORIA_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    config = load_config()
    assert config.webhook.url == DEFAULT_WEBHOOK_URL
    assert config.cities.url == DEFAULT_IBGE_MUNICIPIOS_URL
    assert config.webhook.timeout is None
    assert config.logging.level == logging.INFO
    assert config.confirmation_page == CONFIRMATION_PAGE


def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv("MENTORIA_WEBHOOK_URL", "https://hooks.test/x")
    monkeypatch.setenv("MENTORIA_HTTP_TIMEOUT", "7.5")
    monkeypatch.setenv("MENTORIA_LOG_LEVEL", "debug")
    config = load_config()
    assert config.webhook.url == "https://hooks.test/x"
    assert config.webhook.timeout == 7.5
    assert config.cities.timeout == 7.5
    assert config.logging.level == logging.DEBUG


def test_invalid_timeout_is_ignored(monkeypatch):
    monkeypatch.setenv("MENTORIA_HTTP_TIMEOUT", "abc")
    assert load_config().webhook.timeout is None
