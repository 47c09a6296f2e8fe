"""Validation rules for the form."""

from __future__ import annotations

from typing import Any, List, Mapping, Union

from .dto import CONSENT_FIELDS, TEXT_FIELDS, ApplicationDraft

FIELD_LABELS = {
    "nome": "Nome Completo",
    "telefone_whatsapp": "WhatsApp",
    "interesse_mentoria": "Nível de interesse",
    "trabalho_atual": "Trabalho Atual",
    "tipo_trabalho": "Como pretende trabalhar",
    "dono_empresa": "Situação empresarial",
    "cidade": "Cidade onde mora",
    "motivacao": "Motivação",
    "aceita_frequencia": "Frequência de 2 vezes por semana",
    "aceita_tempo_comprometimento": "1 hora por encontro",
    "aceita_grupo": "Participação no grupo",
}


def _as_mapping(data: Union[ApplicationDraft, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(data, ApplicationDraft):
        return data.to_dict()
    return data


def validate_form(data: Union[ApplicationDraft, Mapping[str, Any]]) -> List[str]:
    """Return a list of validation errors (empty when the draft is submittable)."""

    values = _as_mapping(data)
    errors: List[str] = []

    for name in TEXT_FIELDS:
        if not str(values.get(name) or "").strip():
            errors.append(f"{FIELD_LABELS[name]} é obrigatório.")

    for name in CONSENT_FIELDS:
        if values.get(name) is not True:
            errors.append(f"Confirme o compromisso: {FIELD_LABELS[name]}.")

    return errors


def is_form_valid(data: Union[ApplicationDraft, Mapping[str, Any]]) -> bool:
    return not validate_form(data)
