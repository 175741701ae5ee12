import logging

import httpx

from .models.contact import FormStatus, ValidationResult
from .services.validation import FIELD_ORDER, validate_field_client

logger = logging.getLogger(__name__)

CORRECT_ERRORS_MESSAGE = "Please correct the errors in the form"
THANK_YOU_MESSAGE = "Thank you! Your message has been sent successfully. We'll get back to you soon."
FALLBACK_ERROR_MESSAGE = "An error occurred. Please try again later."
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and try again."


class ContactFormClient:
    """
    Drives a contact form submission against ``POST /api/contact``.

    It checks the form with the client-side rules first, then posts once and turns the JSON reply into a
    status to show the visitor. ``submitting`` is True only while a request is in flight, which is when the
    submit control should be disabled.

    The checks here only spare the visitor a round trip. The server validates again and its answer wins.
    """

    def __init__(self, base_url: str, timeout: float = 15.0, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.base_url: str = base_url
        self.timeout: float = timeout
        self.transport: httpx.AsyncBaseTransport | None = transport
        self.submitting: bool = False

    @staticmethod
    def validate_field(field: str, value: str | None) -> ValidationResult:
        return validate_field_client(field, value)

    def validate_form(self, values: dict[str, str | None]) -> dict[str, ValidationResult]:
        return {field: self.validate_field(field, values.get(field)) for field in FIELD_ORDER}

    @staticmethod
    def collect(values: dict[str, str | None]) -> dict[str, str | None]:
        return {
            "name": (values.get("name") or "").strip(),
            "email": (values.get("email") or "").strip(),
            "phone": (values.get("phone") or "").strip() or None,
            "message": (values.get("message") or "").strip(),
        }

    async def submit(self, values: dict[str, str | None]) -> FormStatus:
        results: dict[str, ValidationResult] = self.validate_form(values)
        if not all(result.valid for result in results.values()):
            return FormStatus(success=False, message=CORRECT_ERRORS_MESSAGE)

        self.submitting = True
        try:
            async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self.transport) as client:
                response: httpx.Response = await client.post("/api/contact", json=self.collect(values))
            data: dict = response.json()
            if not isinstance(data, dict):
                data = {}

            if response.is_success and data.get("success"):
                return FormStatus(success=True, message=THANK_YOU_MESSAGE)
            return FormStatus(success=False, message=data.get("message") or FALLBACK_ERROR_MESSAGE)
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Contact form submission failed: %r", exc)
            return FormStatus(success=False, message=NETWORK_ERROR_MESSAGE)
        finally:
            self.submitting = False
