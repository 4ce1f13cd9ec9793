import smtplib
from datetime import datetime
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger

from eportal.core.config import settings

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
)


# Helper to get template
def get_template(template_name: str):
    return _env.get_template(template_name)


# Helper to send email via SMTP
def send_email_via_smtp(to_email: str, subject: str, html_content: str) -> bool:
    # only HOST is required; user/pass are optional (Mailpit)
    if not settings.SMTP_HOST:
        logger.warning("⚠️ SMTP host not configured. Skipping email.")
        return False

    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = f"{settings.EMAILS_FROM_NAME} <{settings.EMAILS_FROM_EMAIL}>"
    msg["To"] = to_email
    msg.attach(MIMEText(html_content, "html"))

    logger.debug(f"📧 Connecting to SMTP: {settings.SMTP_HOST}:{settings.SMTP_PORT}")
    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT) as server:
            server.ehlo()

            # TLS on submission ports; Mailpit on 1025 runs plain
            if settings.SMTP_PORT in [587, 2525]:
                server.starttls()
                server.ehlo()

            if settings.SMTP_USER and settings.SMTP_PASSWORD:
                server.login(settings.SMTP_USER, settings.SMTP_PASSWORD)

            server.sendmail(settings.EMAILS_FROM_EMAIL, to_email, msg.as_string())
    except (smtplib.SMTPException, OSError):
        # background task: log and move on
        logger.exception(f"❌ Failed to send email to {to_email}")
        return False

    logger.info(f"✅ Email sent to {to_email}")
    return True


# ---------------------------------------------------------
# 1. PASSWORD RESET OTP
# ---------------------------------------------------------
def send_password_reset_email(email: str, otp: str, name: str | None = None) -> bool:
    html_content = get_template("password_reset.html").render(
        name=name or email,
        otp=otp,
        expires_minutes=settings.PASSWORD_RESET_OTP_MINUTES,
        reset_url=f"{settings.FRONTEND_URL}/reset-password",
        year=datetime.now().year,
    )
    return send_email_via_smtp(email, "Password Reset Code - University E-Portal", html_content)


# ---------------------------------------------------------
# 2. WELCOME EMAIL (accounts created by staff)
# ---------------------------------------------------------
def send_welcome_email(data: dict) -> bool:
    """data requires: name, email, user_type; optional: temporary_password"""
    html_content = get_template("welcome.html").render(
        name=data.get("name"),
        email=data.get("email"),
        user_type=data.get("user_type"),
        temporary_password=data.get("temporary_password"),
        login_url=f"{settings.FRONTEND_URL}/login",
        year=datetime.now().year,
    )
    return send_email_via_smtp(data.get("email"), "Welcome to the University E-Portal", html_content)
