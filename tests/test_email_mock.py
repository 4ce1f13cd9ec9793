from unittest.mock import patch, MagicMock

import pytest
import smtplib

from eportal.core.config import settings
from eportal.services.email_service import get_template, send_password_reset_email, send_welcome_email


@pytest.fixture
def smtp_settings(monkeypatch):
    monkeypatch.setattr(settings, "SMTP_HOST", "smtp.eportal.edu.ng")
    monkeypatch.setattr(settings, "SMTP_PORT", 587)
    monkeypatch.setattr(settings, "SMTP_USER", "mailer")
    monkeypatch.setattr(settings, "SMTP_PASSWORD", "secret")


@pytest.mark.asyncio
async def test_send_welcome_email(smtp_settings):
    with patch("eportal.services.email_service.smtplib.SMTP") as mock_smtp:
        # Setup mock
        mock_server_instance = MagicMock()
        mock_smtp.return_value.__enter__.return_value = mock_server_instance

        sent = send_welcome_email({
            "name": "Test Student",
            "email": "test.student@eportal.edu.ng",
            "user_type": "student",
        })

    assert sent is True
    mock_smtp.assert_called_once_with("smtp.eportal.edu.ng", 587)
    mock_server_instance.starttls.assert_called()
    mock_server_instance.login.assert_called_with("mailer", "secret")

    recipient = mock_server_instance.sendmail.call_args[0][1]
    assert recipient == "test.student@eportal.edu.ng"


@pytest.mark.asyncio
async def test_password_reset_email(smtp_settings):
    with patch("eportal.services.email_service.smtplib.SMTP") as mock_smtp:
        mock_server_instance = MagicMock()
        mock_smtp.return_value.__enter__.return_value = mock_server_instance

        assert send_password_reset_email("jane@eportal.edu.ng", "482913", "Jane Doe") is True

    assert mock_server_instance.sendmail.call_args[0][1] == "jane@eportal.edu.ng"


@pytest.mark.asyncio
async def test_password_reset_template_shows_otp():
    html = get_template("password_reset.html").render(
        name="Jane", otp="482913", expires_minutes=15, reset_url="http://localhost/reset", year=2025
    )
    assert "482913" in html
    assert "15" in html


@pytest.mark.asyncio
async def test_smtp_failure_is_reported_not_raised(smtp_settings):
    with patch("eportal.services.email_service.smtplib.SMTP") as mock_smtp:
        mock_smtp.return_value.__enter__.side_effect = smtplib.SMTPConnectError(421, "busy")

        sent = send_welcome_email({"name": "X", "email": "x@eportal.edu.ng", "user_type": "student"})

    assert sent is False


@pytest.mark.asyncio
async def test_no_smtp_host_skips_sending(monkeypatch):
    monkeypatch.setattr(settings, "SMTP_HOST", None)

    with patch("eportal.services.email_service.smtplib.SMTP") as mock_smtp:
        sent = send_welcome_email({"name": "X", "email": "x@eportal.edu.ng", "user_type": "student"})

    assert sent is False
    mock_smtp.assert_not_called()
