import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import get_settings
from ..models.common import ApiResponse, FieldError
from ..models.contact import ContactFormSubmission, RelayOutcome, Submission
from ..models.settings import Settings
from ..services.formatter import format_telegram_message
from ..services.sanitizer import sanitize_input
from ..services.validation import validate_submission
from ..utils import send_telegram_message, utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Contact"])

SUCCESS_MESSAGE = "Your message has been sent successfully!"
VALIDATION_FAILED_MESSAGE = "Validation failed"
MISSING_FIELDS_MESSAGE = "Required fields are missing"
CONFIGURATION_ERROR_MESSAGE = "Server configuration error. Please contact support."
RELAY_FAILED_MESSAGE = "Failed to send message. Please try again later or contact us directly."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def api_response(status_code: int, body: ApiResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def sanitize_submission(contact_form: ContactFormSubmission) -> Submission:
    return Submission(
        name=sanitize_input(contact_form.name),
        email=sanitize_input(contact_form.email),
        phone=sanitize_input(contact_form.phone) if contact_form.phone else None,
        message=sanitize_input(contact_form.message),
    )


@router.post("/contact")
async def contact(contact_form: ContactFormSubmission, settings: Settings = Depends(get_settings)) -> JSONResponse:
    try:
        errors: list[FieldError] = validate_submission(contact_form)
        if errors:
            return api_response(400, ApiResponse(success=False, message=VALIDATION_FAILED_MESSAGE, errors=errors))

        submission: Submission = sanitize_submission(contact_form)
        if not (submission.name and submission.email and submission.message):
            return api_response(400, ApiResponse(success=False, message=MISSING_FIELDS_MESSAGE))

        text: str = format_telegram_message(submission, utc_now(), settings.business_name)

        if not settings.has_telegram_credentials:
            logger.error("Telegram credentials not configured")
            return api_response(500, ApiResponse(success=False, message=CONFIGURATION_ERROR_MESSAGE))

        outcome: RelayOutcome = await send_telegram_message(
            text, settings.telegram_bot_token, settings.telegram_chat_id, timeout=settings.relay_timeout_seconds
        )
        if not outcome.delivered:
            logger.error("Contact form submission was not relayed: %s", outcome.reason)
            return api_response(500, ApiResponse(success=False, message=RELAY_FAILED_MESSAGE))

        logger.info("Relayed contact form submission")
        return api_response(200, ApiResponse(success=True, message=SUCCESS_MESSAGE))

    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.error("Unexpected error while handling contact form: %s", exc, exc_info=True)
        return api_response(500, ApiResponse(success=False, message=UNEXPECTED_ERROR_MESSAGE))
