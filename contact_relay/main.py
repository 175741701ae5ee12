import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .dependencies import get_settings
from .models.common import ApiResponse, FieldError, HealthStatus
from .models.settings import Settings
from .routes.contact import VALIDATION_FAILED_MESSAGE, api_response
from .routes.contact import router as contact_router
from .utils import utc_now

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:  # pylint: disable=redefined-outer-name, unused-argument
    settings: Settings = get_settings()
    logger.info("Contact relay starting on port %s (%s)", settings.port, settings.environment)
    if not settings.has_telegram_credentials:
        logger.warning("Telegram credentials not configured, contact submissions will fail")
    yield


app = FastAPI(title="Contact Form Relay", lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(contact_router)


def field_error_from(error: dict) -> FieldError:
    loc: tuple = tuple(error.get("loc", ()))
    # ("body", "name") names a field; ("body",) or ("body", 17) is the body as a whole
    if len(loc) == 2 and loc[0] == "body" and isinstance(loc[1], str):
        value = error.get("input")
        return FieldError(field=loc[1], value=value if isinstance(value, str) else None, message=error.get("msg", "Invalid value"))
    return FieldError(field="body", message=error.get("msg", "Invalid value"))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # pylint: disable=unused-argument
    errors: list[FieldError] = [field_error_from(error) for error in exc.errors()]
    return api_response(400, ApiResponse(success=False, message=VALIDATION_FAILED_MESSAGE, errors=errors))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return api_response(500, ApiResponse(success=False, message="Internal server error"))


@app.get("/api/health")
def health_check() -> HealthStatus:
    return HealthStatus.at(utc_now())
