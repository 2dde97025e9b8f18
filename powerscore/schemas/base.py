"""Response envelope shared by every endpoint.

Successful responses and domain errors use the same shape::

    {"data": ..., "meta": {"request_id": ..., "timestamp": ...}, "errors": [...]}
"""
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from fastapi import Request
from pydantic import BaseModel, Field

T = TypeVar('T')


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ResponseMeta(BaseModel):
    request_id: str | None = None
    timestamp: str = Field(default_factory=utc_timestamp)
    standards_version: str | None = None

    @classmethod
    def for_request(cls, request: Request | Any, **extra: Any) -> "ResponseMeta":
        return cls(request_id=getattr(request.state, "request_id", None), **extra)


class APIError(BaseModel):
    code: str
    message: str
    details: dict | None = None


class APIResponse(BaseModel, Generic[T]):
    data: T | None = None
    meta: ResponseMeta | None = None
    errors: list[APIError] = Field(default_factory=list)


def error_envelope(request: Request | Any, errors: list[APIError]) -> dict[str, Any]:
    """JSON body for a failed request."""
    return APIResponse[Any](
        data=None,
        meta=ResponseMeta.for_request(request),
        errors=errors,
    ).model_dump(mode="json")
