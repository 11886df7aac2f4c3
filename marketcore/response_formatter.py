"""Shortcuts for building CustomResponse objects."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from http import HTTPStatus
from typing import TypeVar

from marketcore.custom_response import CustomResponse, ResponsePagination
from marketcore.error_context import DatabaseError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def format_success(body: T, status_code: HTTPStatus | int) -> CustomResponse[T]:
    logger.debug("Formatting success response with status code: %s", status_code)
    return CustomResponse(body=body, status_code=status_code)


def format_paginated_success(
    body: T,
    status_code: HTTPStatus | int,
    count: int,
    offset: int,
    limit: int,
) -> CustomResponse[T]:
    logger.debug(
        "Formatting paginated success response with status code: %s, "
        "count: %s, offset: %s, limit: %s",
        status_code,
        count,
        offset,
        limit,
    )
    return CustomResponse(
        body=body,
        status_code=status_code,
        pagination=ResponsePagination(count=count, offset=offset, limit=limit),
    )


def format_created(body: T) -> CustomResponse[T]:
    return format_success(body, HTTPStatus.CREATED)


def format_ok(body: T) -> CustomResponse[T]:
    return format_success(body, HTTPStatus.OK)


def format_no_content() -> HTTPStatus:
    return HTTPStatus.NO_CONTENT


async def try_operation(
    operation: Awaitable[T],
    converter: Callable[[T], U],
    status_code: HTTPStatus | int,
) -> CustomResponse[U]:
    """Await an operation and wrap its converted result in a response."""
    result = await operation
    return format_success(converter(result), status_code)


def try_db_operation(
    operation: Callable[[], T],
    converter: Callable[[T], U],
    status_code: HTTPStatus | int,
    error_message: str,
) -> CustomResponse[U]:
    """Run a storage operation; a LookupError becomes NotFoundError, any other failure DatabaseError."""
    try:
        result = operation()
    except LookupError as err:
        raise NotFoundError() from err
    except Exception as err:
        raise DatabaseError(error_message, err) from err
    return format_success(converter(result), status_code)