"""Autocomplete de cidades a partir do diretório de municípios do IBGE."""
from __future__ import annotations

import logging
import unicodedata
from typing import Any, Iterable, List, Optional

import requests

from .config import DEFAULT_IBGE_MUNICIPIOS_URL

log = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
MAX_SUGGESTIONS = 8


class CityDirectoryError(RuntimeError):
    """Erro ao consultar o diretório de municípios."""

    def __init__(self, message: str, response: Optional[requests.Response] = None):
        super().__init__(message)
        self.response = response


def _fold(text: str) -> str:
    """Minúsculas sem acentos ("São" -> "sao")."""

    decomposed = unicodedata.normalize("NFKD", text.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def filter_city_names(names: Iterable[str], query: str, limit: int = MAX_SUGGESTIONS) -> List[str]:
    """Nomes cujo início coincide com ``query``, na ordem do diretório.

    A comparação ignora maiúsculas e acentos ("sa" encontra "São Paulo").
    """

    prefix = _fold(query)
    matches: List[str] = []
    for name in names:
        if len(matches) >= limit:
            break
        if _fold(name).startswith(prefix):
            matches.append(name)
    return matches


class CityDirectoryClient:
    """Leitura da lista completa de municípios (sem parâmetros de busca)."""

    def __init__(
        self,
        url: str = DEFAULT_IBGE_MUNICIPIOS_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout

    def list_names(self) -> List[str]:
        try:
            response = self.session.get(self.url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise CityDirectoryError(f"Falha ao consultar municípios: {exc}") from exc

        if not response.ok:
            raise CityDirectoryError(
                f"Requisição falhou ({response.status_code})", response
            )
        try:
            records: Any = response.json()
        except ValueError as exc:
            raise CityDirectoryError("Resposta do diretório não é JSON", response) from exc
        if not isinstance(records, list):
            raise CityDirectoryError("Resposta do diretório não é uma lista", response)

        return [str(r["nome"]) for r in records if isinstance(r, dict) and r.get("nome")]


def suggest_cities(query: str, client: CityDirectoryClient) -> List[str]:
    """Sugestões para o texto digitado; qualquer falha resulta em lista vazia."""

    if len((query or "").strip()) < MIN_QUERY_LENGTH:
        return []
    try:
        names = client.list_names()
    except Exception as exc:  # noqa: BLE001
        log.warning("cities.fetch.fail query=%s exc=%s", query, exc)
        return []
    suggestions = filter_city_names(names, query)
    log.info("cities.fetch.ok query=%s total=%s matches=%s", query, len(names), len(suggestions))
    return suggestions


__all__ = [
    "CityDirectoryClient",
    "CityDirectoryError",
    "MAX_SUGGESTIONS",
    "MIN_QUERY_LENGTH",
    "filter_city_names",
    "suggest_cities",
]
