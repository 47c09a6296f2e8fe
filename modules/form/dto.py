"""Data objects for the mentorship application form."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

TEXT_FIELDS = (
    "nome",
    "telefone_whatsapp",
    "interesse_mentoria",
    "trabalho_atual",
    "tipo_trabalho",
    "dono_empresa",
    "cidade",
    "motivacao",
)

CONSENT_FIELDS = (
    "aceita_frequencia",
    "aceita_tempo_comprometimento",
    "aceita_grupo",
)


@dataclass
class ApplicationDraft:
    """Rascunho em memória da inscrição; nunca é persistido."""

    nome: str = ""
    telefone_whatsapp: str = ""
    interesse_mentoria: str = ""
    trabalho_atual: str = ""
    tipo_trabalho: str = ""
    dono_empresa: str = ""
    cidade: str = ""
    motivacao: str = ""
    aceita_frequencia: bool = False
    aceita_tempo_comprometimento: bool = False
    aceita_grupo: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class FormState:
    """Estado local do formulário: rascunho, envio em andamento e sugestões."""

    draft: ApplicationDraft = field(default_factory=ApplicationDraft)
    is_loading: bool = False
    city_suggestions: List[str] = field(default_factory=list)
    show_city_suggestions: bool = False

    def update(self, field_name: str, value: Any) -> None:
        if field_name not in TEXT_FIELDS and field_name not in CONSENT_FIELDS:
            raise KeyError(f"campo desconhecido: {field_name}")
        setattr(self.draft, field_name, bool(value) if field_name in CONSENT_FIELDS else value)

    def reset_draft(self) -> None:
        self.draft = ApplicationDraft()
