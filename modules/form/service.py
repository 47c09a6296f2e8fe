"""Service layer for the mentorship application submission."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from modules.config import CONFIRMATION_PAGE
from modules.webhook import WebhookClient

from .dto import FormState
from .mapper import draft_to_webhook_payload
from .normalization import only_digits
from .validators import validate_form

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """Mensagem transitória exibida ao usuário."""

    title: str
    description: str
    variant: str = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


VALIDATION_FAILED = Notification(
    title="Campos obrigatórios",
    description="Por favor, preencha todos os campos obrigatórios e confirme os compromissos.",
    variant="destructive",
)
SUBMISSION_FAILED = Notification(
    title="Erro",
    description="Falha ao enviar a inscrição. Tente novamente mais tarde.",
    variant="destructive",
)
SUBMISSION_SENT = Notification(
    title="Inscrição enviada!",
    description=(
        "Sua candidatura para a mentoria foi enviada com sucesso. "
        "Entraremos em contato em breve!"
    ),
)


class SubmissionService:
    """Valida o rascunho, envia ao webhook e decide o próximo passo da UI.

    ``notify`` recebe uma :class:`Notification`; ``navigate`` recebe o destino
    da página de confirmação. Ambos são injetados pela camada Streamlit.
    """

    def __init__(
        self,
        client: WebhookClient,
        *,
        notify: Callable[[Notification], None],
        navigate: Callable[[str], None],
        clock: Optional[Callable[[], datetime]] = None,
        confirmation_page: str = CONFIRMATION_PAGE,
    ) -> None:
        self._client = client
        self._notify = notify
        self._navigate = navigate
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._confirmation_page = confirmation_page

    def handle_submit(self, state: FormState) -> bool:
        """Return ``True`` when the application was handed to the webhook."""

        if state.is_loading:
            log.info("submit.skip reason=in_flight")
            return False

        errors = validate_form(state.draft)
        if errors:
            log.info("submit.validate.fail count=%s", len(errors))
            self._notify(VALIDATION_FAILED)
            return False

        state.is_loading = True
        try:
            payload = draft_to_webhook_payload(state.draft, submitted_at=self._clock())
            log.info(
                "submit.start phone=%s city=%s",
                only_digits(state.draft.telefone_whatsapp)[-4:],
                state.draft.cidade,
            )
            self._client.post_json(payload)
        except Exception:  # noqa: BLE001
            log.exception("submit.fail")
            self._notify(SUBMISSION_FAILED)
            return False
        else:
            log.info("submit.ok")
            self._notify(SUBMISSION_SENT)
            state.reset_draft()
            state.city_suggestions = []
            state.show_city_suggestions = False
            self._navigate(self._confirmation_page)
            return True
        finally:
            state.is_loading = False
