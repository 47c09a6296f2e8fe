"""Landing page da Mentoria RW MasterClass com o formulário de inscrição."""

from __future__ import annotations

import logging

import streamlit as st

from modules.config import configure_logging
from modules.form.state import build_submission_service, initialize_session
from modules.form.ui_sections import (
    benefits_section,
    commitments_section,
    event_section,
    form_header,
    hero_section,
    inject_styles,
    interest_section,
    personal_data_section,
    professional_profile_section,
    submit_button,
)
from modules.form.validators import is_form_valid

log = logging.getLogger(__name__)


def main() -> None:
    """Configurações globais e conteúdo da página."""
    st.set_page_config(page_title="Mentoria RW MasterClass", page_icon="🧠", layout="centered")

    state = initialize_session()
    if not st.session_state.get("_logging_ready"):
        configure_logging(st.session_state.config.logging)
        st.session_state["_logging_ready"] = True

    inject_styles()
    hero_section()
    event_section()
    benefits_section()
    st.divider()

    form_header()
    personal_data_section(state)
    st.divider()
    professional_profile_section()
    st.divider()
    interest_section()
    st.divider()
    commitments_section()

    if submit_button(state, is_form_valid(state.draft)):
        with st.spinner("Enviando..."):
            build_submission_service().handle_submit(state)


if __name__ == "__main__":
    main()
