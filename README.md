# marketcore

Building blocks for the HTTP layer of a marketplace backend. It covers input
validation, pagination, structured application errors, uniform JSON responses,
layered settings, and the data contexts that storefront pages are rendered
from. The package has no third-party dependencies.

## Installation

```
pip install marketcore
```

To run the test suite:

```
pip install "marketcore[test]"
pytest
```

## Modules

### `marketcore.validation`

Each of these functions returns `None` when the input passes. When it fails, the
function raises `ValidationError`, a subclass of `ValueError` that has `field`
and `message` attributes.

- `validate_non_empty_string(value, field_name)` rejects a string that is empty
  or holds only whitespace.
- `validate_password(password)` rejects a password shorter than 8 bytes when
  encoded as UTF-8.
- `validate_email(email)` rejects an address that lacks `@` or `.`.
- `validate_range(value, minimum, maximum, field_name)` rejects a value outside
  the inclusive range.

### `marketcore.pagination`

- `PaginationParams` has `page` (default 1) and `limit` (default 20).
- `PaginationInfo` has `total`, `page`, `limit` and `pages`.
- `calculate_offset(page, limit)` returns `(page - 1) * limit`. It raises
  `ValueError` if `page` is below 1 or `limit` is negative.

### `marketcore.error_context`

This module defines an error hierarchy rooted at `AppError`. Every error class
carries `message`, an optional `source` and an HTTP `status_code`:

- `NotFoundError` (404)
- `ValidationFailed` (400)
- `DatabaseError`, which also carries `code`
- `InternalError`, which also carries `request_id`
- `AuthenticateError` (401), with the subclasses `WrongCredentialsError`,
  `InvalidTokenError`, `TokenCreationError` and `LockedAccountError`.
  `LockedAccountError` also carries `locked_at`.

`ErrorContext` collects what is known about a failure in keyword fields:
`message`, `source`, `request_id`, `code`, `user_id`, `resource_id`,
`resource_type` and `operation`. It turns those fields into an error through
these `build_*` methods:

- `build_database_error`
- `build_validation_error`
- `build_not_found_error`
- `build_internal_error`
- `build_wrong_credentials_error`
- `build_invalid_token_error`
- `build_token_creation_error`
- `build_locked_account_error(locked_at)`

When `message` is not set, each method writes a default message, using the
resource type, operation and id where they are available.

### `marketcore.custom_response`

`CustomResponse(body, status_code, pagination)` holds a response before it is
sent. `to_http()` returns a tuple of status, headers and body bytes:

- With a body, the body is compact JSON, dataclasses are serialised as dicts,
  and `content-type` is `application/json`.
- With no body, it returns the status, no headers and empty bytes.
- If the body cannot be serialised, it returns a 500 status with an empty body.
- With pagination, it adds the `x-pagination-count`, `x-pagination-offset` and
  `x-pagination-limit` headers from `ResponsePagination.headers()`.

### `marketcore.response_formatter`

This module has shortcuts that build a `CustomResponse`: `format_success`,
`format_ok`, `format_created`, `format_paginated_success` and
`format_no_content`.

It also has two wrappers that run an operation and wrap its converted result:

- `try_operation(operation, converter, status_code)` is a coroutine. It awaits
  `operation`, then wraps the converted result.
- `try_db_operation(operation, converter, status_code, error_message)` calls
  `operation`. A `LookupError` becomes `NotFoundError`. Any other exception
  becomes `DatabaseError(error_message)`.

### `marketcore.settings`

`load_settings(config_dir="config", environ=None)` builds a frozen `Settings`.
Its sections are `Server`, `Logger`, `Database`, `Auth` and `Tor`, and it also
has an `environment` string.

It merges these layers in order, with later layers taking precedence:

1. `default` — required.
2. the file named by `RUN_MODE` — optional; `RUN_MODE` defaults to
   `development`.
3. `local` — optional.
4. environment variables, with `__` separating nested keys (for example
   `DATABASE__URL`).
5. `PORT`, which overrides `server.port`.

Each file is looked up as `<name>.toml`, then `<name>.json`, inside
`config_dir`.

Some fields have defaults:

- `logger.format`: `"text"`
- `logger.request_id_header`: `False`
- `tor.enabled`: `False`
- `tor.service_dir`: `"./tor_service"`

A missing required field raises `ValueError`, and so does a value of the wrong
type. A missing `default` file raises `FileNotFoundError`. `str(Server)` gives
`http://localhost:<port>`.

### `marketcore.route_handlers`

These generic handlers wrap the result of a caller-supplied function in a
`CustomResponse`. Exceptions raised by that function propagate unchanged.

- `create_resource` returns status 201.
- `get_resource_by_id` and `update_resource` return status 200.
- `list_resources` returns the list with pagination headers: the count, offset
  0 and limit 20.
- `delete_resource` returns `HTTPStatus.NO_CONTENT`.

### `marketcore.dry_example`

`ApiResponse` is an envelope with `is_success`, `data`, `message` and
`status_code`:

- Its constructors are `success`, `error`, `not_found`, `bad_request` and
  `internal_error`.
- `http_status()` maps 400, 404 and 500 to themselves and every other code to
  200.
- `to_dict()` returns the JSON shape, with the key `success`.

`ListParams` and `ListResponse.from_items` describe a page of items.
`from_items` rounds the page count up.

The module also has these handlers, which return envelopes:

- `get_resource`: 404 envelope when the finder returns `None`.
- `list_resources`.
- `create_resource`: returns `(status, envelope)`, 201 on success and 400 on
  failure.
- `update_resource`: returns `(status, envelope)` with status 200 even on
  failure.
- `delete_resource`: returns `(status, envelope)`, 204 on success and 400 on
  failure.

### `marketcore.templates`

This module holds the dataclass contexts for pages:

- users, categories, products, variants, images and shipping options
- vendors, vendor stats and bonds
- wallets and transactions
- conversations and messages
- orders, order items and order status history
- reviews and login history

It also has the page objects `HomeTemplate`, `LoginTemplate`,
`RegisterTemplate`, `ProductsTemplate` and `ProductDetailTemplate`. Each page
object names its template file in `template_path` and defaults `current_year`
to `current_year()`, which is the current UTC year.

`to_dict(context)` converts a context or page object into nested plain data. It
raises `TypeError` for any other object.

### `marketcore.frontend`, `marketcore.admin`, `marketcore.status`

Each of these modules has a `create_route()` function that returns a dict
mapping `(method, path)` pairs to handler functions.

- **frontend**: the handlers return page objects filled with fixed sample
  catalogue data, built by `mock_product`, `mock_category` and
  `mock_product_detail`. `product_image` returns a 303 status with a `location`
  header pointing to `/static/images/placeholder.svg`.
- **admin**: the handlers take a `TokenUser` and return fixed figures:
  - `AdminDashboard`
  - a three-entry `UserListItem` list
  - `SystemStatus`
- **status**: `get_status()` returns `{"status": "ok"}`.

## Example

```python
from marketcore.response_formatter import format_paginated_success

response = format_paginated_success([{"id": 1}], 200, count=1, offset=0, limit=20)
status, headers, body = response.to_http()
# headers["x-pagination-count"] == "1"; body == b'[{"id":1}]'
```

## What it does not do

- **No HTTP server and no dispatching of requests.** The route tables are plain
  dicts, so you have to connect them to a web framework yourself.
- **No template rendering.** The page objects carry data, but no HTML is
  produced.
- **No database or other storage.** The page and admin handlers return fixed
  sample data.
- **No authentication.** Nothing decodes or checks tokens, and `TokenUser` must
  be supplied by the caller.