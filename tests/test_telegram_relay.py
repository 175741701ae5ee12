import json
import logging

import httpx
import pytest

from contact_relay.models.contact import RelayOutcome
from contact_relay.utils import send_telegram_message


def transport_returning(status_code: int, body: dict | str, seen: list[httpx.Request] | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)


def transport_raising(exc: Exception) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_delivered_when_telegram_acknowledges() -> None:
    seen: list[httpx.Request] = []
    transport = transport_returning(200, {"ok": True, "result": {"message_id": 1}}, seen)

    outcome: RelayOutcome = await send_telegram_message("<b>hi</b>", "123:abc", "42", transport=transport)

    assert outcome == RelayOutcome(delivered=True)
    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == "https://api.telegram.org/bot123:abc/sendMessage"
    assert json.loads(seen[0].content) == {"chat_id": "42", "text": "<b>hi</b>", "parse_mode": "HTML"}


@pytest.mark.asyncio
async def test_ok_false_is_a_failure_even_with_status_200() -> None:
    transport = transport_returning(200, {"ok": False, "description": "Bad Request: chat not found"})

    outcome: RelayOutcome = await send_telegram_message("hi", "123:abc", "42", transport=transport)

    assert not outcome.delivered
    assert outcome.reason == "Bad Request: chat not found"


@pytest.mark.asyncio
async def test_error_status_is_a_failure() -> None:
    transport = transport_returning(401, {"ok": False, "error_code": 401, "description": "Unauthorized"})

    outcome: RelayOutcome = await send_telegram_message("hi", "bad-token", "42", transport=transport)

    assert not outcome.delivered


@pytest.mark.asyncio
async def test_non_json_body_is_a_failure() -> None:
    transport = transport_returning(502, "<html>Bad Gateway</html>")

    outcome: RelayOutcome = await send_telegram_message("hi", "123:abc", "42", transport=transport)

    assert not outcome.delivered
    assert outcome.reason == "invalid response (status 502)"


@pytest.mark.asyncio
async def test_timeout_is_a_failure_not_an_exception() -> None:
    transport = transport_raising(httpx.ReadTimeout("timed out"))

    outcome: RelayOutcome = await send_telegram_message("hi", "123:abc", "42", transport=transport)

    assert outcome == RelayOutcome(delivered=False, reason="timeout")


@pytest.mark.asyncio
async def test_transport_error_is_a_failure() -> None:
    transport = transport_raising(httpx.ConnectError("connection refused"))

    outcome: RelayOutcome = await send_telegram_message("hi", "123:abc", "42", transport=transport)

    assert not outcome.delivered
    assert outcome.reason == "transport error: ConnectError"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "transport",
    [
        transport_returning(200, {"ok": True, "result": {"message_id": 1}}),
        transport_returning(400, {"ok": False, "description": "Bad Request: chat not found"}),
        transport_raising(httpx.ReadTimeout("timed out")),
    ],
)
async def test_bot_token_never_reaches_the_logs(transport: httpx.MockTransport, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    await send_telegram_message("hi", "123:SECRETTOKEN", "42", transport=transport)

    assert all("SECRETTOKEN" not in record.getMessage() for record in caplog.records)
