"""JSON response container with optional pagination headers."""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class ResponsePagination:
    """Total count, offset and limit of a paginated listing."""

    count: int
    offset: int
    limit: int

    def headers(self) -> dict[str, str]:
        return {
            "x-pagination-count": str(self.count),
            "x-pagination-offset": str(self.offset),
            "x-pagination-limit": str(self.limit),
        }


def _encode(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


@dataclass
class CustomResponse(Generic[T]):
    """A response body with its status code and optional pagination."""

    body: T | None = None
    status_code: HTTPStatus = HTTPStatus.OK
    pagination: ResponsePagination | None = None

    def __post_init__(self) -> None:
        self.status_code = HTTPStatus(self.status_code)

    def to_http(self) -> tuple[HTTPStatus, dict[str, str], bytes]:
        """Return the status, headers and body bytes to send."""
        if self.body is None:
            return self.status_code, {}, b""
        try:
            payload = json.dumps(
                self.body, default=_encode, separators=(",", ":")
            ).encode("utf-8")
        except (TypeError, ValueError) as err:
            logger.error("Error serializing response body as JSON: %r", err)
            return HTTPStatus.INTERNAL_SERVER_ERROR, {}, b""
        headers = {"content-type": JSON_CONTENT_TYPE}
        if self.pagination is not None:
            headers.update(self.pagination.headers())
        return self.status_code, headers, payload