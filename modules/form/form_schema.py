"""Opções fixas do formulário de inscrição e seus rótulos."""

from __future__ import annotations

from typing import Dict, List, Tuple

INTEREST_OPTIONS: List[Tuple[str, str]] = [
    ("muito_alto", "Muito Alto - Extremamente interessado"),
    ("alto", "Alto - Muito interessado"),
    ("medio", "Médio - Interessado"),
    ("baixo", "Baixo - Pouco interessado"),
]

WORK_TYPE_OPTIONS: List[Tuple[str, str]] = [
    ("freelancer", "Freelancer"),
    ("agencia", "Abrir agência"),
    ("aprender_sem_fins_lucrativos", "Só quero aprender sem fins lucrativos"),
    ("desenvolver_para_empresa", "Quero desenvolver pra minha empresa"),
]

BUSINESS_OWNER_OPTIONS: List[Tuple[str, str]] = [
    ("dono_empresa", "Já sou dono de empresa"),
    ("aprender_profissao", "Quero aprender a profissão para renda principal"),
]

COMMITMENTS: List[Dict[str, str]] = [
    {
        "id": "aceita_frequencia",
        "titulo": "Aceito participar da mentoria 2 vezes por semana durante 3 meses",
        "descricao": "Total de 24 sessões ao longo do programa",
    },
    {
        "id": "aceita_tempo_comprometimento",
        "titulo": "Aceito disponibilizar 1 hora do meu tempo para cada encontro",
        "descricao": "Compromisso de participação ativa e pontualidade",
    },
    {
        "id": "aceita_grupo",
        "titulo": "Aceito participar do grupo de no máximo 6 a 10 mentorados",
        "descricao": "Ambiente colaborativo para networking, ideias de projetos e dúvidas",
    },
]


def option_values(options: List[Tuple[str, str]]) -> List[str]:
    return [value for value, _ in options]


def option_label(options: List[Tuple[str, str]], value: str) -> str:
    for key, label in options:
        if key == value:
            return label
    return value
