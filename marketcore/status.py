"""Liveness endpoint."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


def create_route() -> dict[tuple[str, str], Callable[..., Any]]:
    """Map (method, path) pairs to the status handler."""
    return {("GET", "/status"): get_status}


def get_status() -> dict[str, str]:
    logger.debug("Returning status")
    return {"status": "ok"}