from datetime import datetime, timezone

import pytest

from modules.form.dto import ApplicationDraft, FormState
from modules.form.service import (
    SUBMISSION_FAILED,
    SUBMISSION_SENT,
    VALIDATION_FAILED,
    SubmissionService,
)
from modules.webhook import WebhookError


class FakeWebhook:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def post_json(self, payload):
        self.sent.append(payload)
        if self.error is not None:
            raise self.error
        return object()


class Recorder:
    def __init__(self):
        self.notifications = []
        self.pages = []

    def notify(self, notification):
        self.notifications.append(notification)

    def navigate(self, page):
        self.pages.append(page)


def _valid_draft() -> ApplicationDraft:
    return ApplicationDraft(
        nome="Joana Lima",
        telefone_whatsapp="(11) 98888-7777",
        interesse_mentoria="alto",
        trabalho_atual="Vendedora",
        tipo_trabalho="desenvolver_para_empresa",
        dono_empresa="dono_empresa",
        cidade="Santos",
        motivacao="Automatizar minha loja.",
        aceita_frequencia=True,
        aceita_tempo_comprometimento=True,
        aceita_grupo=True,
    )


@pytest.fixture
def recorder():
    return Recorder()


def _service(client, recorder):
    return SubmissionService(
        client,
        notify=recorder.notify,
        navigate=recorder.navigate,
        clock=lambda: datetime(2025, 6, 10, 12, 0, tzinfo=timezone.utc),
        confirmation_page="pages/01_Parabens.py",
    )


def test_successful_submission_posts_once_resets_and_navigates(recorder):
    client = FakeWebhook()
    draft = _valid_draft()
    state = FormState(draft=draft, city_suggestions=["Santos"], show_city_suggestions=True)

    assert _service(client, recorder).handle_submit(state) is True

    assert len(client.sent) == 1
    assert client.sent[0]["timestamp"] == "2025-06-10T12:00:00.000Z"
    assert client.sent[0]["mentorship_application"] == draft.to_dict()
    assert state.draft == ApplicationDraft()
    assert state.is_loading is False
    assert state.city_suggestions == []
    assert recorder.pages == ["pages/01_Parabens.py"]
    assert recorder.notifications == [SUBMISSION_SENT]


def test_invalid_draft_never_reaches_the_webhook(recorder):
    client = FakeWebhook()
    draft = _valid_draft()
    draft.aceita_grupo = False
    state = FormState(draft=draft)

    assert _service(client, recorder).handle_submit(state) is False

    assert client.sent == []
    assert recorder.notifications == [VALIDATION_FAILED]
    assert recorder.pages == []
    assert state.draft.nome == "Joana Lima"


@pytest.mark.parametrize("error", [WebhookError("dns"), ConnectionError("reset"), ValueError("boom")])
def test_failed_submission_keeps_draft_for_retry(recorder, error):
    client = FakeWebhook(error=error)
    state = FormState(draft=_valid_draft())

    assert _service(client, recorder).handle_submit(state) is False

    assert state.draft == _valid_draft()
    assert state.is_loading is False
    assert recorder.notifications == [SUBMISSION_FAILED]
    assert recorder.pages == []

    client.error = None
    assert _service(client, recorder).handle_submit(state) is True
    assert len(client.sent) == 2
    assert recorder.pages == ["pages/01_Parabens.py"]


def test_submission_in_flight_is_not_duplicated(recorder):
    client = FakeWebhook()
    state = FormState(draft=_valid_draft(), is_loading=True)

    assert _service(client, recorder).handle_submit(state) is False
    assert client.sent == []
    assert recorder.notifications == []


def test_loading_flag_is_set_while_posting(recorder):
    seen = []
    state = FormState(draft=_valid_draft())

    class ObservingWebhook:
        def post_json(self, payload):
            seen.append(state.is_loading)

    _service(ObservingWebhook(), recorder).handle_submit(state)
    assert seen == [True]
    assert state.is_loading is False


def test_form_state_update_rejects_unknown_fields():
    state = FormState()
    state.update("cidade", "Salvador")
    state.update("aceita_frequencia", 1)
    assert state.draft.cidade == "Salvador"
    assert state.draft.aceita_frequencia is True
    with pytest.raises(KeyError):
        state.update("email", "x@example.com")
