"""Configuração da landing page da Mentoria RW MasterClass."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import logging
import os

DEFAULT_WEBHOOK_URL = "https://n8n-n8n-start.ym5qed.easypanel.host/webhook/mentoria"
DEFAULT_IBGE_MUNICIPIOS_URL = "https://servicodados.ibge.gov.br/api/v1/localidades/municipios"
CONFIRMATION_PAGE = "pages/01_Parabens.py"


@dataclass
class WebhookConfig:
    """Destino das inscrições (fluxo de automação externo)."""

    url: str = DEFAULT_WEBHOOK_URL
    timeout: Optional[float] = None


@dataclass
class CityDirectoryConfig:
    """Diretório de municípios usado no autocomplete de cidade."""

    url: str = DEFAULT_IBGE_MUNICIPIOS_URL
    timeout: Optional[float] = None


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: int = logging.INFO
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class AppConfig:
    """Consolidated application configuration."""

    webhook: WebhookConfig = field(default_factory=WebhookConfig)
    cities: CityDirectoryConfig = field(default_factory=CityDirectoryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    confirmation_page: str = CONFIRMATION_PAGE


def _resolve_timeout(env_var: str) -> Optional[float]:
    """Lê um timeout opcional em segundos; vazio significa sem timeout."""

    raw = (os.getenv(env_var) or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logging.getLogger(__name__).warning("%s inválido (%r); ignorando.", env_var, raw)
        return None
    return value if value > 0 else None


def _resolve_level(raw: Optional[str]) -> int:
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(logging_config: LoggingConfig) -> None:
    """Configure global logging for the application."""

    logging.basicConfig(
        level=logging_config.level,
        format=logging_config.fmt,
        datefmt=logging_config.datefmt,
        handlers=[logging.StreamHandler()],
    )


def load_config() -> AppConfig:
    """Load application configuration from environment variables and defaults."""

    timeout = _resolve_timeout("MENTORIA_HTTP_TIMEOUT")
    return AppConfig(
        webhook=WebhookConfig(
            url=os.getenv("MENTORIA_WEBHOOK_URL", DEFAULT_WEBHOOK_URL),
            timeout=timeout,
        ),
        cities=CityDirectoryConfig(
            url=os.getenv("MENTORIA_IBGE_URL", DEFAULT_IBGE_MUNICIPIOS_URL),
            timeout=timeout,
        ),
        logging=LoggingConfig(level=_resolve_level(os.getenv("MENTORIA_LOG_LEVEL"))),
    )


__all__ = [
    "AppConfig",
    "CityDirectoryConfig",
    "LoggingConfig",
    "WebhookConfig",
    "CONFIRMATION_PAGE",
    "configure_logging",
    "load_config",
]
