from datetime import datetime
from html import escape

from ..models.contact import Submission

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


def _html(value: str) -> str:
    # Telegram's HTML parse mode rejects bare "&"
    return escape(value, quote=False)


def format_telegram_message(submission: Submission, received_at: datetime, business_name: str) -> str:
    phone_line: str = f"\n📞 <b>Phone:</b> {_html(submission.phone)}" if submission.phone else ""

    return (
        f"🔥 <b>New Contact Form Submission - {_html(business_name)}</b>\n"
        "\n"
        f"👤 <b>Name:</b> {_html(submission.name)}\n"
        f"📧 <b>Email:</b> {_html(submission.email)}{phone_line}\n"
        "\n"
        "💬 <b>Message:</b>\n"
        f"{_html(submission.message)}\n"
        "\n"
        "---\n"
        f"<i>Received at: {received_at.strftime(TIMESTAMP_FORMAT).strip()}</i>"
    )
