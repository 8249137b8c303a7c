"""Mailer — template rendering and SMTP delivery with absorbed failures.

Tests cover:
    - each template renders its payload
    - send() talks to SMTP_SSL (login + send_message) when a host is configured
    - STARTTLS path when SSL is off
    - SMTP and template failures are logged, never raised
    - disabled transport (no host) sends nothing
"""

import logging
import smtplib
from unittest.mock import MagicMock

import pytest

from bootcamp.core.domain_types import MailTemplate
from bootcamp.core.errors import DeliveryError
from bootcamp.core.notifications import MailMessage
from bootcamp.infrastructure.mailer import Mailer


def _message(template=MailTemplate.ADMISSION):
    return MailMessage(
        to="ada@example.com",
        subject="Congratulations! You have been admitted",
        template=template,
        data={
            "applicant_name": "Ada Obi",
            "track": "Backend",
            "enrollment_deadline": "Thursday, 22 October 2026",
            "start_date": "Monday, 02 November 2026",
            "orientation_date": "Friday, 30 October 2026",
            "duration": "12 weeks",
            "confirmation_link": "http://front/enrollments/1/confirm",
            "review_period": "two weeks",
            "next_cohort_date": "January 2027",
        },
    )


def _mailer(**overrides):
    options = {
        "host": "smtp.example.com", "port": 465,
        "sender": "Admissions <no-reply@example.com>",
        "username": "mailer", "password": "secret",
    }
    options.update(overrides)
    return Mailer(**options)


@pytest.fixture
def smtp_ssl(monkeypatch):
    server = MagicMock()
    server.__enter__.return_value = server
    factory = MagicMock(return_value=server)
    monkeypatch.setattr(smtplib, "SMTP_SSL", factory)
    return factory, server


@pytest.mark.parametrize("template, expected", [
    (MailTemplate.REGISTRATION, "two weeks"),
    (MailTemplate.ADMISSION, "http://front/enrollments/1/confirm"),
    (MailTemplate.REJECTION, "January 2027"),
])
def test_templates_render_payload(template, expected):
    html = _mailer().render(_message(template))
    assert "Ada Obi" in html
    assert "Backend" in html
    assert expected in html


def test_render_escapes_html():
    message = MailMessage(
        to="x@example.com", subject="s", template=MailTemplate.REJECTION,
        data={"applicant_name": "<script>", "track": "T", "next_cohort_date": "soon"},
    )
    html = _mailer().render(message)
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_build_sets_headers():
    email = _mailer().build(_message())
    assert email["To"] == "ada@example.com"
    assert email["From"] == "Admissions <no-reply@example.com>"
    assert email["Subject"] == "Congratulations! You have been admitted"


def test_send_uses_ssl_transport(smtp_ssl):
    factory, server = smtp_ssl
    assert _mailer().send(_message()) is True
    factory.assert_called_once_with("smtp.example.com", 465, timeout=30)
    server.login.assert_called_once_with("mailer", "secret")
    server.send_message.assert_called_once()
    server.starttls.assert_not_called()


def test_send_uses_starttls_without_ssl(monkeypatch):
    server = MagicMock()
    server.__enter__.return_value = server
    factory = MagicMock(return_value=server)
    monkeypatch.setattr(smtplib, "SMTP", factory)
    assert _mailer(port=587, use_ssl=False).send(_message()) is True
    server.starttls.assert_called_once()
    server.send_message.assert_called_once()


def test_send_skips_login_without_username(smtp_ssl):
    _, server = smtp_ssl
    _mailer(username="").send(_message())
    server.login.assert_not_called()


def test_smtp_failure_is_absorbed(smtp_ssl, caplog):
    _, server = smtp_ssl
    server.send_message.side_effect = smtplib.SMTPRecipientsRefused({})
    with caplog.at_level(logging.ERROR):
        assert _mailer().send(_message()) is False
    assert "Error sending email" in caplog.text


def test_connection_failure_is_absorbed(monkeypatch):
    monkeypatch.setattr(
        smtplib, "SMTP_SSL", MagicMock(side_effect=ConnectionRefusedError()),
    )
    assert _mailer().send(_message()) is False


def test_deliver_raises_delivery_error(monkeypatch):
    monkeypatch.setattr(smtplib, "SMTP_SSL", MagicMock(side_effect=OSError("down")))
    with pytest.raises(DeliveryError) as exc_info:
        _mailer().deliver(_message())
    assert exc_info.value.template == "admission.html"


def test_missing_template_is_absorbed(tmp_path):
    assert _mailer(template_dir=tmp_path).send(_message()) is False


def test_disabled_transport_sends_nothing(smtp_ssl):
    factory, _ = smtp_ssl
    mailer = _mailer(host="")
    assert not mailer.enabled
    assert mailer.send(_message()) is False
    factory.assert_not_called()
