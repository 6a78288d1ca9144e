from __future__ import annotations

import smtplib
from collections.abc import Sequence
from email.message import EmailMessage

from student_records.core.logging import get_logger
from student_records.core.settings import settings


def build_message(
    subject: str, to: Sequence[str], html: str, text: str | None = None
) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = f"{settings.MAIL_FROM_NAME} <{settings.MAIL_FROM}>"
    msg["To"] = ", ".join(to)
    # always carry a plain-text part for clients without HTML
    msg.set_content(text or "Open this e-mail in an HTML capable client.")
    msg.add_alternative(html, subtype="html")
    return msg


def send_email(
    subject: str, to: Sequence[str], html: str, text: str | None = None
) -> None:
    """Sends through the configured SMTP relay. SMTP errors propagate to the caller."""
    msg = build_message(subject, to, html, text)
    with smtplib.SMTP(settings.MAIL_HOST, settings.MAIL_PORT, timeout=10) as s:
        if settings.MAIL_TLS:
            s.starttls()
        if settings.MAIL_USER:
            s.login(settings.MAIL_USER, settings.MAIL_PASS)
        s.send_message(msg)
    get_logger().info("mail.sent", subject=subject, recipients=len(to))
