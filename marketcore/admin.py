"""Administrative API endpoints."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from marketcore.pagination import DEFAULT_LIMIT, DEFAULT_PAGE
from marketcore.response_formatter import format_ok, format_paginated_success

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


@dataclass(frozen=True)
class TokenUser:
    """The user identified by a request's authentication token."""

    id: int
    username: str
    role: str


@dataclass(frozen=True)
class AdminDashboard:
    total_users: int
    total_products: int
    total_orders: int
    total_revenue: float


@dataclass(frozen=True)
class ListUsersQuery:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    role: str | None = None
    search: str | None = None


@dataclass(frozen=True)
class UserListItem:
    id: int
    username: str
    role: str
    created_at: str


@dataclass(frozen=True)
class SystemStatus:
    status: str
    version: str
    uptime: int
    memory_usage: int
    cpu_usage: float
    database_status: str


def create_route() -> dict[tuple[str, str], Callable[..., Any]]:
    """Map (method, path) pairs to the admin handlers."""
    return {
        ("GET", "/admin/dashboard"): admin_dashboard,
        ("GET", "/admin/users"): list_users,
        ("GET", "/admin/system/status"): system_status,
    }


def admin_dashboard(token_user: TokenUser) -> AdminDashboard:
    logger.debug(
        "Admin accessing dashboard (user_id=%s, username=%s)",
        token_user.id,
        token_user.username,
    )
    dashboard = AdminDashboard(
        total_users=100,
        total_products=500,
        total_orders=1000,
        total_revenue=50000.0,
    )
    return format_ok(dashboard).body


def list_users(
    token_user: TokenUser, query: ListUsersQuery | None = None
) -> list[UserListItem]:
    """Return the user listing; filters in the query are accepted but not yet applied."""
    query = ListUsersQuery() if query is None else query
    logger.debug(
        "Admin listing users (user_id=%s, username=%s, query=%r)",
        token_user.id,
        token_user.username,
        query,
    )
    users = [
        UserListItem(1, "admin", "admin", "2023-01-01T00:00:00Z"),
        UserListItem(2, "vendor1", "vendor", "2023-01-02T00:00:00Z"),
        UserListItem(3, "buyer1", "buyer", "2023-01-03T00:00:00Z"),
    ]
    response = format_paginated_success(users, HTTPStatus.OK, 3, 0, query.limit)
    return response.body


def system_status(token_user: TokenUser) -> SystemStatus:
    logger.debug(
        "Admin checking system status (user_id=%s, username=%s)",
        token_user.id,
        token_user.username,
    )
    status = SystemStatus(
        status="healthy",
        version=APP_VERSION,
        uptime=3600,
        memory_usage=1024 * 1024 * 100,
        cpu_usage=5.0,
        database_status="connected",
    )
    return format_ok(status).body