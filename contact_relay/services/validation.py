"""
Field rules for the contact form.

Two authorities share the same patterns:

* ``validate_field`` / ``validate_submission`` run on the server and decide whether a submission is accepted.
* ``validate_field_client`` mirrors what the browser checks before posting. It is advisory only.

They differ on purpose for ``phone``: the client only enforces a minimum length of 10 while the
server also caps it at 20 characters.
"""

import re
from typing import Callable

from ..models.common import FieldError
from ..models.contact import ContactFormSubmission, ValidationResult

NAME_PATTERN = re.compile(r"^[a-zA-Z\s'-]+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[\d\s\-+()]+$", re.ASCII)

NAME_LENGTH: tuple[int, int] = (2, 100)
MESSAGE_LENGTH: tuple[int, int] = (10, 2000)
SERVER_PHONE_LENGTH: tuple[int, int] = (10, 20)
CLIENT_PHONE_MIN_LENGTH = 10

FIELD_LABELS: dict[str, str] = {"name": "Name", "email": "Email", "phone": "Phone", "message": "Message"}
FIELD_ORDER: tuple[str, ...] = ("name", "email", "phone", "message")

VALID = ValidationResult(valid=True)


def _invalid(error_message: str) -> ValidationResult:
    return ValidationResult(valid=False, error_message=error_message)


def _within(value: str, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= len(value) <= bounds[1]


def _server_name(value: str) -> ValidationResult:
    if not value:
        return _invalid("Name is required")
    if not _within(value, NAME_LENGTH):
        return _invalid("Name must be between 2 and 100 characters")
    if not NAME_PATTERN.match(value):
        return _invalid("Name contains invalid characters")
    return VALID


def _server_email(value: str) -> ValidationResult:
    if not value:
        return _invalid("Email is required")
    if not EMAIL_PATTERN.match(value):
        return _invalid("Please provide a valid email address")
    return VALID


def _server_phone(value: str) -> ValidationResult:
    if not value:
        return VALID
    if not PHONE_PATTERN.match(value):
        return _invalid("Phone number contains invalid characters")
    if not _within(value, SERVER_PHONE_LENGTH):
        return _invalid("Phone number must be between 10 and 20 characters")
    return VALID


def _server_message(value: str) -> ValidationResult:
    if not value:
        return _invalid("Message is required")
    if not _within(value, MESSAGE_LENGTH):
        return _invalid("Message must be between 10 and 2000 characters")
    return VALID


SERVER_RULES: dict[str, Callable[[str], ValidationResult]] = {
    "name": _server_name,
    "email": _server_email,
    "phone": _server_phone,
    "message": _server_message,
}


def validate_field(field: str, value: str | None) -> ValidationResult:
    """Check a single field against the server rules. Fields without a rule are always valid."""
    rule = SERVER_RULES.get(field)
    if rule is None:
        return VALID
    return rule((value or "").strip())


def validate_submission(submission: ContactFormSubmission) -> list[FieldError]:
    """Run every server rule and return one error per invalid field, in form order."""
    errors: list[FieldError] = []
    for field in FIELD_ORDER:
        value: str | None = getattr(submission, field)
        result: ValidationResult = validate_field(field, value)
        if not result.valid:
            errors.append(FieldError(field=field, value=value, message=result.error_message))
    return errors


def validate_field_client(field: str, value: str | None) -> ValidationResult:
    """Check a single field the way the contact form does before submitting."""
    value = (value or "").strip()

    if field in ("name", "email", "message") and not value:
        return _invalid(f"{FIELD_LABELS[field]} is required")

    if field == "name":
        if not _within(value, NAME_LENGTH) or not NAME_PATTERN.match(value):
            return _invalid("Please enter a valid name")
    elif field == "email":
        if not EMAIL_PATTERN.match(value):
            return _invalid("Please enter a valid email address")
    elif field == "phone":
        if value and (not PHONE_PATTERN.match(value) or len(value) < CLIENT_PHONE_MIN_LENGTH):
            return _invalid("Please enter a valid phone number")
    elif field == "message":
        if not _within(value, MESSAGE_LENGTH):
            return _invalid(f"Message must be between {MESSAGE_LENGTH[0]} and {MESSAGE_LENGTH[1]} characters")

    return VALID
