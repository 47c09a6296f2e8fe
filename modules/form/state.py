"""Session helpers for the form page."""

from __future__ import annotations

import logging
from typing import Any, Optional

import streamlit as st

from modules.cities import CityDirectoryClient, suggest_cities
from modules.config import AppConfig, load_config
from modules.webhook import WebhookClient

from .dto import FormState
from .normalization import mask_phone
from .service import Notification, SubmissionService

log = logging.getLogger(__name__)

_FLASH_KEY = "_flash_notification"

CHOICE_FIELDS = ("interesse_mentoria", "tipo_trabalho", "dono_empresa")


def initialize_session() -> FormState:
    if "config" not in st.session_state:
        st.session_state.config = load_config()
    st.session_state.setdefault("form_state", FormState())
    st.session_state.setdefault("form_version", 0)
    return st.session_state.form_state


def get_form_state() -> FormState:
    return st.session_state.form_state


def _config() -> AppConfig:
    return st.session_state.config


def widget_key(field_name: str) -> str:
    """Chave do widget; muda de versão quando o rascunho é zerado."""

    return f"{field_name}_{st.session_state.form_version}"


def bind_widget(field_name: str) -> str:
    """Garante que o widget comece com o valor atual do rascunho."""

    key = widget_key(field_name)
    if key not in st.session_state:
        value = getattr(get_form_state().draft, field_name)
        # selectbox/radio sem seleção usam None, não string vazia
        if field_name in CHOICE_FIELDS and not value:
            value = None
        st.session_state[key] = value
    return key


def on_field_change(field_name: str) -> None:
    value: Any = st.session_state[widget_key(field_name)]
    if value is None:
        value = ""
    get_form_state().update(field_name, value)


def on_phone_change() -> None:
    key = widget_key("telefone_whatsapp")
    masked = mask_phone(st.session_state[key])
    st.session_state[key] = masked
    get_form_state().update("telefone_whatsapp", masked)


def on_city_change() -> None:
    state = get_form_state()
    text = st.session_state[widget_key("cidade")]
    state.update("cidade", text)
    state.show_city_suggestions = True
    client = CityDirectoryClient(_config().cities.url, timeout=_config().cities.timeout)
    state.city_suggestions = suggest_cities(text, client)


def on_city_selected(city: str) -> None:
    state = get_form_state()
    state.update("cidade", city)
    st.session_state[widget_key("cidade")] = city
    state.show_city_suggestions = False


def show_notification(notification: Notification) -> None:
    icon = "⚠️" if notification.is_error else "✅"
    st.toast(f"**{notification.title}**\n\n{notification.description}", icon=icon)


def flash(notification: Notification) -> None:
    """Guarda a notificação para a próxima página (sobrevive ao switch_page)."""

    st.session_state[_FLASH_KEY] = notification


def consume_flash() -> Optional[Notification]:
    notification = st.session_state.pop(_FLASH_KEY, None)
    if notification is not None:
        show_notification(notification)
    return notification


def _notify(notification: Notification) -> None:
    if notification.is_error:
        show_notification(notification)
    else:
        flash(notification)


def _navigate(page: str) -> None:
    # Novo conjunto de chaves: os widgets voltam vazios ao retornar à página.
    st.session_state.form_version += 1
    log.info("navigate page=%s", page)
    st.switch_page(page)


def build_submission_service() -> SubmissionService:
    config = _config()
    client = WebhookClient(config.webhook.url, timeout=config.webhook.timeout)
    return SubmissionService(
        client,
        notify=_notify,
        navigate=_navigate,
        confirmation_page=config.confirmation_page,
    )
