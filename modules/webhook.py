"""Cliente do webhook que recebe as inscrições da mentoria."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .config import DEFAULT_WEBHOOK_URL

log = logging.getLogger(__name__)


class WebhookError(RuntimeError):
    """Falha de transporte ao enviar a inscrição para o webhook."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class WebhookClient:
    """POST de JSON para um endpoint fixo, sem retry e sem autenticação.

    O status HTTP da resposta não é interpretado: qualquer requisição que
    complete sem exceção é considerada entregue.
    """

    def __init__(
        self,
        url: str = DEFAULT_WEBHOOK_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout

    def post_json(self, payload: Dict[str, Any]) -> requests.Response:
        try:
            response = self.session.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise WebhookError(f"Falha ao enviar webhook: {exc}", exc) from exc
        log.info("webhook.post status=%s", getattr(response, "status_code", None))
        return response


__all__ = ["WebhookClient", "WebhookError"]
