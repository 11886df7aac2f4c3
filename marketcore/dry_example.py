"""Reusable response envelope, list parameters and generic CRUD handlers."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Generic, TypeVar

from marketcore.pagination import DEFAULT_LIMIT, DEFAULT_PAGE

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

_STATUS_MAP = {
    400: HTTPStatus.BAD_REQUEST,
    404: HTTPStatus.NOT_FOUND,
    500: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


@dataclass(frozen=True)
class ResourceId:
    """Identifier of a resource taken from a request path."""

    id: int


@dataclass
class ApiResponse(Generic[T]):
    """Envelope carrying either data or an error message with a status code."""

    is_success: bool
    data: T | None = None
    message: str | None = None
    status_code: int = 200

    @classmethod
    def success(cls, data: T) -> ApiResponse[T]:
        return cls(is_success=True, data=data, message=None, status_code=200)

    @classmethod
    def error(cls, message: str, status_code: int) -> ApiResponse[T]:
        return cls(is_success=False, data=None, message=str(message), status_code=status_code)

    @classmethod
    def not_found(cls, resource: str) -> ApiResponse[T]:
        return cls.error(f"{resource} not found", 404)

    @classmethod
    def bad_request(cls, message: str) -> ApiResponse[T]:
        return cls.error(message, 400)

    @classmethod
    def internal_error(cls) -> ApiResponse[T]:
        return cls.error("Internal server error", 500)

    def http_status(self) -> HTTPStatus:
        """HTTP status to send; codes other than 400, 404 and 500 map to 200."""
        return _STATUS_MAP.get(self.status_code, HTTPStatus.OK)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.is_success,
            "data": _plain(self.data),
            "message": self.message,
            "status_code": self.status_code,
        }


@dataclass(frozen=True)
class ListParams:
    """Paging, sorting and filtering parameters for a listing."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str | None = None
    sort_order: str | None = None
    filter: str | None = None


@dataclass
class ListResponse(Generic[T]):
    """A page of items together with paging totals."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    pages: int = 0

    @classmethod
    def from_items(cls, items: list[T], total: int, params: ListParams) -> ListResponse[T]:
        if params.limit <= 0:
            raise ValueError(f"limit must be positive, got {params.limit}")
        pages = -(-total // params.limit)
        return cls(
            items=list(items),
            total=total,
            page=params.page,
            limit=params.limit,
            pages=pages,
        )


def get_resource(
    resource_id: int,
    finder: Callable[[int], T | None],
    resource_name: str,
) -> ApiResponse[T]:
    """Look a resource up; a missing one yields a 404 envelope."""
    logger.debug("Getting %s with ID: %s", resource_name, resource_id)
    resource = finder(resource_id)
    if resource is None:
        logger.error("%s with ID %s not found", resource_name, resource_id)
        return ApiResponse.not_found(resource_name)
    logger.info("Found %s with ID: %s", resource_name, resource_id)
    return ApiResponse.success(resource)


def list_resources(
    params: ListParams,
    lister: Callable[[ListParams], tuple[list[T], int]],
    resource_name: str,
) -> ApiResponse[ListResponse[T]]:
    """List resources and wrap them with paging totals."""
    logger.debug("Listing %ss with params: %r", resource_name, params)
    items, total = lister(params)
    response = ListResponse.from_items(items, total, params)
    logger.info("Listed %d %ss", len(response.items), resource_name)
    return ApiResponse.success(response)


def create_resource(
    data: U,
    creator: Callable[[U], T],
    resource_name: str,
) -> tuple[HTTPStatus, ApiResponse[T]]:
    """Create a resource; any failure of the creator becomes a 400 envelope."""
    logger.debug("Creating %s with data: %r", resource_name, data)
    try:
        resource = creator(data)
    except Exception as err:
        logger.error("Failed to create %s: %s", resource_name, err)
        return HTTPStatus.BAD_REQUEST, ApiResponse.bad_request(str(err))
    logger.info("Created new %s", resource_name)
    return HTTPStatus.CREATED, ApiResponse.success(resource)


def update_resource(
    resource_id: int,
    data: U,
    updater: Callable[[int, U], T],
    resource_name: str,
) -> tuple[HTTPStatus, ApiResponse[T]]:
    """Update a resource; the HTTP status is 200 even when the envelope reports an error."""
    logger.debug("Updating %s with ID: %s and data: %r", resource_name, resource_id, data)
    try:
        resource = updater(resource_id, data)
    except Exception as err:
        logger.error("Failed to update %s with ID %s: %s", resource_name, resource_id, err)
        return HTTPStatus.OK, ApiResponse.bad_request(str(err))
    logger.info("Updated %s with ID: %s", resource_name, resource_id)
    return HTTPStatus.OK, ApiResponse.success(resource)


def delete_resource(
    resource_id: int,
    deleter: Callable[[int], None],
    resource_name: str,
) -> tuple[HTTPStatus, ApiResponse[None]]:
    """Delete a resource; any failure of the deleter becomes a 400 envelope."""
    logger.debug("Deleting %s with ID: %s", resource_name, resource_id)
    try:
        deleter(resource_id)
    except Exception as err:
        logger.error("Failed to delete %s with ID %s: %s", resource_name, resource_id, err)
        return HTTPStatus.BAD_REQUEST, ApiResponse.bad_request(str(err))
    logger.info("Deleted %s with ID: %s", resource_name, resource_id)
    return HTTPStatus.NO_CONTENT, ApiResponse.success(None)