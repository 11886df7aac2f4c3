import asyncio
from http import HTTPStatus

import pytest

from marketcore.custom_response import ResponsePagination
from marketcore.error_context import DatabaseError, NotFoundError
from marketcore.response_formatter import (
    format_created,
    format_no_content,
    format_ok,
    format_paginated_success,
    format_success,
    try_db_operation,
    try_operation,
)


def test_format_success_keeps_body_and_status():
    response = format_success({"a": 1}, HTTPStatus.ACCEPTED)
    assert response.body == {"a": 1}
    assert response.status_code == HTTPStatus.ACCEPTED
    assert response.pagination is None


def test_format_created_and_ok():
    assert format_created("x").status_code == HTTPStatus.CREATED
    assert format_ok("x").status_code == HTTPStatus.OK
    assert format_ok("x").body == "x"


def test_format_no_content():
    assert format_no_content() == HTTPStatus.NO_CONTENT


def test_paginated_response():
    response = format_paginated_success([1, 2, 3], HTTPStatus.OK, 3, 0, 20)
    assert response.body == [1, 2, 3]
    assert response.pagination == ResponsePagination(count=3, offset=0, limit=20)


def test_try_operation_converts_result():
    async def operation():
        return 21

    response = asyncio.run(try_operation(operation(), lambda v: {"value": v}, HTTPStatus.OK))
    assert response.body == {"value": 21}
    assert response.status_code == HTTPStatus.OK


def test_try_operation_propagates_errors():
    async def operation():
        raise NotFoundError()

    with pytest.raises(NotFoundError):
        asyncio.run(try_operation(operation(), str, HTTPStatus.OK))


def test_try_db_operation_success():
    response = try_db_operation(lambda: [1, 2], len, HTTPStatus.CREATED, "failed")
    assert response.body == 2
    assert response.status_code == HTTPStatus.CREATED


def test_try_db_operation_lookup_becomes_not_found():
    def operation():
        raise KeyError("missing")

    with pytest.raises(NotFoundError) as info:
        try_db_operation(operation, str, HTTPStatus.OK, "failed")
    assert isinstance(info.value.__cause__, KeyError)


def test_try_db_operation_other_failure_becomes_database_error():
    failure = RuntimeError("connection lost")

    def operation():
        raise failure

    with pytest.raises(DatabaseError) as info:
        try_db_operation(operation, str, HTTPStatus.OK, "Failed to list products")
    assert info.value.message == "Failed to list products"
    assert info.value.source is failure