from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

APP_VERSION = "1.0.0"
RUNTIME_VERSION = "1.21"
WELCOME_MESSAGE = "Welcome to the Kubernetes Routing Experiment"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    detail: str
    trace_id: str


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: datetime = Field(default_factory=utc_now)


class VersionResponse(BaseModel):
    """Version descriptor.

    ``build_time`` is taken at request time, not at build time. Existing
    consumers read it that way, so it stays dynamic.
    """

    model_config = ConfigDict(populate_by_name=True)

    version: str = APP_VERSION
    build_time: datetime = Field(default_factory=utc_now)
    runtime_version: str = Field(default=RUNTIME_VERSION, alias="go_version")


class EchoResponse(BaseModel):
    message: str = WELCOME_MESSAGE
    path: str
    method: str
    headers: dict[str, list[str]]
