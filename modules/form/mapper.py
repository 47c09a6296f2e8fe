"""Mapping utilities for the form."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .dto import ApplicationDraft


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 em UTC com milissegundos e sufixo ``Z``."""

    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def draft_to_webhook_payload(
    draft: ApplicationDraft, *, submitted_at: Optional[datetime] = None
) -> Dict[str, Any]:
    """Prepare the JSON body expected by the webhook."""

    return {
        "timestamp": iso_timestamp(submitted_at),
        "mentorship_application": {
            "nome": draft.nome,
            "telefone_whatsapp": draft.telefone_whatsapp,
            "interesse_mentoria": draft.interesse_mentoria,
            "trabalho_atual": draft.trabalho_atual,
            "tipo_trabalho": draft.tipo_trabalho,
            "dono_empresa": draft.dono_empresa,
            "cidade": draft.cidade,
            "motivacao": draft.motivacao,
            "aceita_frequencia": bool(draft.aceita_frequencia),
            "aceita_tempo_comprometimento": bool(draft.aceita_tempo_comprometimento),
            "aceita_grupo": bool(draft.aceita_grupo),
        },
    }
