"""Generic handlers that run an operation and wrap its result in a CustomResponse."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from http import HTTPStatus
from typing import Any, TypeVar

from marketcore.custom_response import CustomResponse, ResponsePagination
from marketcore.pagination import DEFAULT_LIMIT

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
Q = TypeVar("Q")


def create_resource(
    body: U,
    creator: Callable[[U], T],
    resource_name: str,
) -> CustomResponse[T]:
    """Create a resource from a request body; errors from the creator propagate."""
    logger.debug("Creating new %s: %r", resource_name, body)
    resource = creator(body)
    logger.info("Created new %s", resource_name)
    return CustomResponse(body=resource, status_code=HTTPStatus.CREATED)


def get_resource_by_id(
    resource_id: Any,
    finder: Callable[[Any], T],
    resource_name: str,
) -> CustomResponse[T]:
    """Fetch one resource by its identifier."""
    logger.debug("Getting %s with ID: %r", resource_name, resource_id)
    resource = finder(resource_id)
    logger.debug("Returning %s", resource_name)
    return CustomResponse(body=resource, status_code=HTTPStatus.OK)


def list_resources(
    query: Q,
    lister: Callable[[Q], tuple[Iterable[T], int]],
    resource_name: str,
) -> CustomResponse[list[T]]:
    """List resources; pagination headers carry the count with offset 0 and the default limit."""
    logger.debug("Listing %ss with query: %r", resource_name, query)
    resources, count = lister(query)
    response = CustomResponse(
        body=list(resources),
        status_code=HTTPStatus.OK,
        pagination=ResponsePagination(count=count, offset=0, limit=DEFAULT_LIMIT),
    )
    logger.debug("Returning %ss", resource_name)
    return response


def update_resource(
    resource_id: Any,
    body: U,
    updater: Callable[[Any, U], T],
    resource_name: str,
) -> CustomResponse[T]:
    """Update one resource by its identifier."""
    logger.debug("Updating %s with ID: %r, body: %r", resource_name, resource_id, body)
    resource = updater(resource_id, body)
    logger.info("Updated %s with ID: %r", resource_name, resource_id)
    return CustomResponse(body=resource, status_code=HTTPStatus.OK)


def delete_resource(
    resource_id: Any,
    deleter: Callable[[Any], None],
    resource_name: str,
) -> HTTPStatus:
    """Delete one resource and return the no-content status."""
    logger.debug("Deleting %s with ID: %r", resource_name, resource_id)
    deleter(resource_id)
    logger.info("Deleted %s with ID: %r", resource_name, resource_id)
    return HTTPStatus.NO_CONTENT