from __future__ import annotations

from student_records.core.security import create_verification_token
from student_records.core.settings import settings
from student_records.email.render import render
from student_records.services.mailer import send_email

SUBJECT = "Verify your account"


def _normalize_base(url: str | None) -> str:
    if not url or not url.strip():
        return "http://localhost:3000"
    url = url.strip()
    if not (url.startswith("http://") or url.startswith("https://")):
        # host[:port] without scheme
        url = "http://" + url
    return url.rstrip("/")


def build_verification_link(token: str) -> str:
    return f"{_normalize_base(settings.APP_PUBLIC_BASE_URL)}/auth/verify-account/{token}"


def send_account_verification_email(*, user_id: int, user_email: str) -> None:
    """Mails a signed verification link to a newly created account.

    Raises whatever the template rendering or SMTP layer raises.
    """
    token = create_verification_token(user_id, user_email)
    ctx = {
        "school_name": settings.MAIL_FROM_NAME,
        "verify_url": build_verification_link(token),
        "expires_hours": settings.VERIFY_TOKEN_EXPIRE_HOURS,
    }
    html = render("verify_account.html").render(ctx)
    text = render("verify_account.txt").render(ctx)
    send_email(SUBJECT, [user_email], html, text=text)
