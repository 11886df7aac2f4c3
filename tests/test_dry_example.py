from http import HTTPStatus

import pytest

from marketcore.dry_example import (
    ApiResponse,
    ListParams,
    ListResponse,
    ResourceId,
    create_resource,
    delete_resource,
    get_resource,
    list_resources,
    update_resource,
)


def test_success_envelope():
    response = ApiResponse.success({"id": 7})
    assert response.is_success is True
    assert response.data == {"id": 7}
    assert response.message is None
    assert response.status_code == 200
    assert response.http_status() == HTTPStatus.OK


def test_not_found_envelope():
    response = ApiResponse.not_found("widget")
    assert response.is_success is False
    assert response.data is None
    assert response.message == "widget not found"
    assert response.http_status() == HTTPStatus.NOT_FOUND


def test_internal_error_envelope():
    response = ApiResponse.internal_error()
    assert response.message == "Internal server error"
    assert response.status_code == 500


def test_bad_request_keeps_message():
    response = ApiResponse.bad_request("broken input")
    assert response.message == "broken input"
    assert response.http_status() == HTTPStatus.BAD_REQUEST


@pytest.mark.parametrize(
    "code, expected",
    [
        (400, HTTPStatus.BAD_REQUEST),
        (404, HTTPStatus.NOT_FOUND),
        (500, HTTPStatus.INTERNAL_SERVER_ERROR),
        (401, HTTPStatus.OK),
        (200, HTTPStatus.OK),
    ],
)
def test_http_status_mapping(code, expected):
    assert ApiResponse.error("x", code).http_status() == expected


def test_to_dict_converts_nested_dataclasses():
    response = ApiResponse.success(ResourceId(id=3))
    assert response.to_dict() == {
        "success": True,
        "data": {"id": 3},
        "message": None,
        "status_code": 200,
    }


def test_list_params_defaults():
    params = ListParams()
    assert params.page == 1
    assert params.limit == 20
    assert params.sort_by is None and params.filter is None


@pytest.mark.parametrize("total", [0, 1, 19, 20, 21, 40, 41, 99])
def test_pages_cover_total(total):
    params = ListParams(page=2, limit=20)
    response = ListResponse.from_items([], total, params)
    assert response.pages * params.limit >= total
    assert max(response.pages - 1, 0) * params.limit < total or total == 0
    assert response.page == 2


def test_list_response_zero_limit_rejected():
    with pytest.raises(ValueError):
        ListResponse.from_items([], 5, ListParams(limit=0))


def test_get_resource_found_and_missing():
    store = {1: "one"}
    found = get_resource(1, store.get, "thing")
    assert found.data == "one"
    missing = get_resource(2, store.get, "thing")
    assert missing.message == "thing not found"
    assert missing.status_code == 404


def test_list_resources_wraps_items():
    seen = []

    def lister(params):
        seen.append(params)
        return ["a", "b"], 2

    params = ListParams(limit=5)
    response = list_resources(params, lister, "thing")
    assert seen == [params]
    assert response.data.items == ["a", "b"]
    assert response.data.total == 2
    assert response.data.limit == 5


def test_create_resource_success_and_failure():
    status, response = create_resource("name", lambda data: {"name": data}, "thing")
    assert status == HTTPStatus.CREATED
    assert response.data == {"name": "name"}

    def fail(data):
        raise ValueError("bad name")

    status, response = create_resource("name", fail, "thing")
    assert status == HTTPStatus.BAD_REQUEST
    assert response.message == "bad name"


def test_update_resource_always_http_ok():
    status, response = update_resource(4, "v", lambda rid, data: (rid, data), "thing")
    assert status == HTTPStatus.OK
    assert response.data == (4, "v")

    def fail(rid, data):
        raise ValueError("nope")

    status, response = update_resource(4, "v", fail, "thing")
    assert status == HTTPStatus.OK
    assert response.status_code == 400
    assert response.message == "nope"


def test_delete_resource():
    deleted = []
    status, response = delete_resource(9, deleted.append, "thing")
    assert status == HTTPStatus.NO_CONTENT
    assert deleted == [9]
    assert response.is_success is True

    def fail(rid):
        raise KeyError("gone")

    status, response = delete_resource(9, fail, "thing")
    assert status == HTTPStatus.BAD_REQUEST
    assert response.is_success is False