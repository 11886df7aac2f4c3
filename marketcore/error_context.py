"""Application error types and a context object that builds them."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


class AppError(Exception):
    """Base class for errors reported to API clients."""

    status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, source: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        if source is not None:
            self.__cause__ = source


class NotFoundError(AppError, LookupError):
    """The requested resource does not exist."""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class DatabaseError(AppError):
    """A storage operation failed."""

    def __init__(
        self,
        message: str,
        source: BaseException | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message, source)
        self.code = code


class ValidationFailed(AppError):
    """A request was rejected because its data is not acceptable."""

    status_code = HTTPStatus.BAD_REQUEST


class InternalError(AppError):
    """An unexpected server-side failure."""

    def __init__(
        self,
        message: str,
        source: BaseException | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message, source)
        self.request_id = request_id


class AuthenticateError(AppError):
    """Base class for authentication failures."""

    status_code = HTTPStatus.UNAUTHORIZED


class WrongCredentialsError(AuthenticateError):
    """The supplied credentials do not match."""


class InvalidTokenError(AuthenticateError):
    """The supplied authentication token is not valid."""


class TokenCreationError(AuthenticateError):
    """An authentication token could not be issued."""


class LockedAccountError(AuthenticateError):
    """The account is locked."""

    def __init__(
        self,
        message: str,
        source: BaseException | None = None,
        locked_at: _dt.datetime | None = None,
    ) -> None:
        super().__init__(message, source)
        self.locked_at = locked_at


@dataclass(kw_only=True)
class ErrorContext:
    """Details gathered about a failure, turned into an AppError on demand."""

    message: str | None = None
    source: BaseException | None = None
    request_id: str | None = None
    code: str | None = None
    user_id: int | None = None
    resource_id: Any = None
    resource_type: str | None = None
    operation: str | None = None

    def _resource_id_text(self) -> str | None:
        return None if self.resource_id is None else repr(self.resource_id)

    def build_database_error(self) -> DatabaseError:
        message = self.message
        if message is None:
            resource_type = self.resource_type or "resource"
            operation = self.operation or "operation"
            resource_id = self._resource_id_text()
            if resource_id is not None:
                message = (
                    f"Database error during {operation} on {resource_type} "
                    f"with ID {resource_id}"
                )
            else:
                message = f"Database error during {operation} on {resource_type}"
        return DatabaseError(message, self.source, self.code)

    def build_validation_error(self) -> ValidationFailed:
        return ValidationFailed(self.message or "Validation error")

    def build_not_found_error(self) -> NotFoundError:
        if self.message is not None:
            return NotFoundError(self.message)
        resource_id = self._resource_id_text()
        if resource_id is None:
            return NotFoundError()
        resource_type = self.resource_type or "Resource"
        return NotFoundError(f"{resource_type} with ID {resource_id} not found")

    def build_internal_error(self) -> InternalError:
        return InternalError(
            self.message or "Internal server error", self.source, self.request_id
        )

    def build_wrong_credentials_error(self) -> WrongCredentialsError:
        return WrongCredentialsError(
            self.message or "Wrong authentication credentials", self.source
        )

    def build_invalid_token_error(self) -> InvalidTokenError:
        return InvalidTokenError(
            self.message or "Invalid authentication credentials", self.source
        )

    def build_token_creation_error(self) -> TokenCreationError:
        return TokenCreationError(
            self.message or "Failed to create authentication token", self.source
        )

    def build_locked_account_error(
        self, locked_at: _dt.datetime | None
    ) -> LockedAccountError:
        return LockedAccountError(
            self.message or "User is locked", self.source, locked_at
        )