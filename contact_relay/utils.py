import datetime
import logging

import httpx

from .models.contact import RelayOutcome

logger = logging.getLogger(__name__)

# httpx logs every request URL at INFO, and the Bot API URL carries the bot token
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

TELEGRAM_API_URL = "https://api.telegram.org"


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.UTC)


async def send_telegram_message(
    message: str,
    bot_token: str,
    chat_id: str,
    parse_mode: str = "HTML",
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RelayOutcome:
    """
    Post a single message to a Telegram chat through the Bot API ``sendMessage`` method.

    The call is made once, without retries. Delivery only counts when Telegram answers with ``"ok": true``;
    timeouts, transport errors, error statuses and ``ok: false`` replies all come back as an undelivered
    outcome. The reason is logged here and kept on the outcome for the caller's logs, never for end users.
    """
    url: str = f"{TELEGRAM_API_URL}/bot{bot_token}/sendMessage"
    payload: dict[str, str] = {"chat_id": chat_id, "text": message, "parse_mode": parse_mode}

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response: httpx.Response = await client.post(url, json=payload)
    except httpx.TimeoutException as exc:
        logger.error("Telegram API timed out after %ss: %r", timeout, exc)
        return RelayOutcome(delivered=False, reason="timeout")
    except httpx.HTTPError as exc:
        logger.error("Telegram API request failed: %r", exc)
        return RelayOutcome(delivered=False, reason=f"transport error: {exc.__class__.__name__}")

    try:
        data: dict = response.json()
    except ValueError:
        logger.error("Telegram API returned a non-JSON body (status %s): %s", response.status_code, response.text)
        return RelayOutcome(delivered=False, reason=f"invalid response (status {response.status_code})")

    if not isinstance(data, dict):
        data = {}

    if response.is_success and data.get("ok") is True:
        return RelayOutcome(delivered=True)

    description: str = data.get("description") or "Telegram API returned error"
    logger.error("Telegram API error (status %s): %s", response.status_code, data)
    return RelayOutcome(delivered=False, reason=description)
