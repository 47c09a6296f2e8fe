"""Streamlit UI sections for the mentorship landing page and form."""

from __future__ import annotations

from typing import List, Tuple

import streamlit as st

from .dto import FormState
from .form_schema import (
    BUSINESS_OWNER_OPTIONS,
    COMMITMENTS,
    INTEREST_OPTIONS,
    WORK_TYPE_OPTIONS,
    option_label,
    option_values,
)
from .state import bind_widget, on_city_change, on_city_selected, on_field_change, on_phone_change

FORM_ANCHOR = "formulario-inscricao"

PRIMARY = "#4F46E5"
PURPLE = "#9333EA"
MUTED = "#64748B"

BENEFITS: List[Tuple[str, str, str]] = [
    ("🏆", "Expertise Avançada", "Domine prospecção, reuniões, análise de necessidades e precificação premium"),
    ("👥", "Network Exclusivo", "Grupo seleto de 6-10 mentorados para networking e troca de experiências"),
    ("⭐", "Bônus Exclusivos", "Se for aluno, ganha mais um ano grátis; se não for, ganha 1 ano de acesso ao curso"),
]


def inject_styles() -> None:
    st.markdown(
        f"""
        <style>
        .main {{ background: linear-gradient(135deg, #eff6ff, #eef2ff 45%, #faf5ff); }}
        .hero-title {{
            text-align: center;
            font-size: clamp(2rem, 4vw, 2.6rem);
            font-weight: 800;
            background: linear-gradient(90deg, #2563EB, {PURPLE});
            -webkit-background-clip: text;
            -webkit-text-fill-color: transparent;
            margin-bottom: .6rem;
        }}
        .hero-text {{ text-align: center; color: {MUTED}; font-size: 1.15rem; line-height: 1.6; }}
        .cta {{
            display: inline-block;
            background: linear-gradient(90deg, #2563EB, {PURPLE});
            color: #fff !important;
            font-weight: 700;
            padding: .75rem 1.5rem;
            border-radius: 999px;
            text-decoration: none;
            box-shadow: 0 12px 30px rgba(79, 70, 229, .25);
        }}
        .cta-wrap {{ text-align: center; margin: 1rem 0 1.5rem 0; }}
        .event-card, .benefit-card {{
            border-radius: 18px;
            padding: 1.4rem;
            background: linear-gradient(135deg, #eff6ff, #eef2ff 50%, #dbeafe);
            box-shadow: 0 18px 35px rgba(0,0,0,.06);
            text-align: center;
            height: 100%;
        }}
        .event-card h3 {{ color: #1E40AF; margin-bottom: .25rem; }}
        .event-card .date {{ color: #1D4ED8; font-weight: 600; }}
        .benefit-card .icon {{ font-size: 1.8rem; }}
        .benefit-card h4 {{ margin: .5rem 0 .35rem 0; color: #1E293B; }}
        .benefit-card p {{ color: {MUTED}; font-size: .95rem; }}
        .step-title {{ font-size: 1.25rem; font-weight: 700; color: #1F2937; margin-top: .5rem; }}
        .form-header {{
            background: linear-gradient(90deg, #2563EB, {PRIMARY}, {PURPLE});
            color: #fff;
            border-radius: 16px 16px 0 0;
            padding: 1.2rem;
            text-align: center;
        }}
        .form-header p {{ color: #DBEAFE; margin: 0; }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def _cta_button() -> None:
    st.markdown(
        f"<div class='cta-wrap'><a class='cta' href='#{FORM_ANCHOR}'>Preencher Formulário</a></div>",
        unsafe_allow_html=True,
    )


def hero_section() -> None:
    st.markdown("<div class='hero-title'>🧠 Mentoria RW MasterClass</div>", unsafe_allow_html=True)
    st.markdown(
        "<p class='hero-text'>O futuro é de quem domina a IA! Empresas buscam gestores de fluxo para "
        "automatizar processos e liderar com inteligência. Participe da mentoria gratuita nesta "
        "quinta-feira e descubra como conquistar oportunidades e se destacar no mercado. "
        "Garanta sua vaga!</p>",
        unsafe_allow_html=True,
    )
    _cta_button()


def event_section() -> None:
    st.markdown("## Encontro Exclusivo")
    _, center, _ = st.columns([0.15, 0.7, 0.15])
    with center:
        st.markdown(
            "<div class='event-card'>"
            "<div class='icon'>🕒</div>"
            "<h3>Encontro Exclusivo</h3>"
            "<p class='date'>Encontro dia 12/06/2025 (quinta-feira) - Mentoria gratuita</p>"
            "<p>Venha participar do nosso encontro exclusivo e descubra como transformar sua carreira!</p>"
            "<small>Não perca esta oportunidade única!</small>"
            "</div>",
            unsafe_allow_html=True,
        )
    _cta_button()


def benefits_section() -> None:
    cols = st.columns(3)
    for col, (icon, titulo, descricao) in zip(cols, BENEFITS):
        with col:
            st.markdown(
                "<div class='benefit-card'>"
                f"<div class='icon'>{icon}</div>"
                f"<h4>{titulo}</h4>"
                f"<p>{descricao}</p>"
                "</div>",
                unsafe_allow_html=True,
            )


def _step_title(marker: str, title: str) -> None:
    st.markdown(f"<div class='step-title'>{marker} {title}</div>", unsafe_allow_html=True)


def personal_data_section(state: FormState) -> None:
    _step_title("1.", "Dados Pessoais")
    col1, col2 = st.columns(2)
    with col1:
        st.text_input(
            "Nome Completo *",
            key=bind_widget("nome"),
            placeholder="Seu nome completo",
            on_change=on_field_change,
            args=("nome",),
        )
        st.text_input(
            "Cidade onde mora",
            key=bind_widget("cidade"),
            placeholder="Sua cidade",
            autocomplete="off",
            on_change=on_city_change,
        )
        if state.show_city_suggestions and state.city_suggestions:
            for idx, city in enumerate(state.city_suggestions):
                st.button(
                    city,
                    key=f"city_suggestion_{idx}_{city}",
                    on_click=on_city_selected,
                    args=(city,),
                    use_container_width=True,
                )
    with col2:
        st.text_input(
            "WhatsApp *",
            key=bind_widget("telefone_whatsapp"),
            placeholder="(00) 00000-0000",
            max_chars=15,
            on_change=on_phone_change,
        )
        st.text_input(
            "Trabalho Atual",
            key=bind_widget("trabalho_atual"),
            placeholder="Descreva sua ocupação atual",
            on_change=on_field_change,
            args=("trabalho_atual",),
        )


def professional_profile_section() -> None:
    _step_title("2.", "Perfil Profissional")
    st.radio(
        "Como pretende trabalhar?",
        option_values(WORK_TYPE_OPTIONS),
        format_func=lambda value: option_label(WORK_TYPE_OPTIONS, value),
        key=bind_widget("tipo_trabalho"),
        on_change=on_field_change,
        args=("tipo_trabalho",),
    )
    st.radio(
        "Situação empresarial",
        option_values(BUSINESS_OWNER_OPTIONS),
        format_func=lambda value: option_label(BUSINESS_OWNER_OPTIONS, value),
        key=bind_widget("dono_empresa"),
        on_change=on_field_change,
        args=("dono_empresa",),
    )


def interest_section() -> None:
    _step_title("3.", "Interesse e Motivação")
    st.selectbox(
        "Nível de interesse em participar da mentoria",
        option_values(INTEREST_OPTIONS),
        format_func=lambda value: option_label(INTEREST_OPTIONS, value),
        placeholder="Selecione seu nível de interesse",
        key=bind_widget("interesse_mentoria"),
        on_change=on_field_change,
        args=("interesse_mentoria",),
    )
    st.text_area(
        "Por que gostaria de participar desta mentoria durante 3 meses?",
        key=bind_widget("motivacao"),
        placeholder="Descreva suas motivações, objetivos e expectativas...",
        height=120,
        on_change=on_field_change,
        args=("motivacao",),
    )


def commitments_section() -> None:
    _step_title("🕒", "Compromissos da Mentoria")
    with st.container(border=True):
        for item in COMMITMENTS:
            st.checkbox(
                f"**{item['titulo']}**",
                key=bind_widget(item["id"]),
                on_change=on_field_change,
                args=(item["id"],),
            )
            st.caption(item["descricao"])


def form_header() -> None:
    st.markdown(f"<a id='{FORM_ANCHOR}'></a>", unsafe_allow_html=True)
    st.markdown(
        "<div class='form-header'><h2>Formulário de Inscrição</h2>"
        "<p>Preencha suas informações para se candidatar à mentoria</p></div>",
        unsafe_allow_html=True,
    )


def submit_button(state: FormState, is_valid: bool) -> bool:
    return st.button(
        "Enviar Inscrição para Mentoria",
        key="submit_application",
        type="primary",
        disabled=state.is_loading or not is_valid,
        use_container_width=True,
    )


def confirmation_card() -> None:
    st.markdown(
        "<div class='event-card' style='background:#fff'>"
        "<h1 style='color:#16A34A'>Parabéns pela inscrição!</h1>"
        "<p style='font-size:1.1rem;color:#374151'>"
        "Recebemos sua inscrição com sucesso.<br/>"
        "Em breve você receberá mais informações no seu WhatsApp.<br/><br/>"
        "Prepare-se para transformar sua carreira com IA!"
        "</p>"
        "<span style='font-size:2rem'>🎉</span>"
        "</div>",
        unsafe_allow_html=True,
    )
