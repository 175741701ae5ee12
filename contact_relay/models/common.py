from datetime import datetime

from pydantic import BaseModel


class FieldError(BaseModel):
    field: str
    value: str | None = None
    message: str


class ApiResponse(BaseModel):
    success: bool
    message: str
    errors: list[FieldError] | None = None


class HealthStatus(BaseModel):
    status: str = "ok"
    timestamp: str

    @classmethod
    def at(cls, moment: datetime) -> "HealthStatus":
        # Millisecond precision with a trailing Z, e.g. 2024-05-01T12:00:00.000Z
        return cls(timestamp=moment.isoformat(timespec="milliseconds").replace("+00:00", "Z"))
