from pydantic import BaseModel, ConfigDict


class ContactFormSubmission(BaseModel):
    """Raw contact form body as posted by the browser, before any validation."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None

    model_config = ConfigDict(extra="ignore")


class Submission(BaseModel):
    name: str
    email: str
    phone: str | None = None
    message: str

    model_config = ConfigDict(frozen=True)


class ValidationResult(BaseModel):
    valid: bool
    error_message: str = ""

    model_config = ConfigDict(frozen=True)


class RelayOutcome(BaseModel):
    delivered: bool
    reason: str | None = None


class FormStatus(BaseModel):
    success: bool
    message: str
