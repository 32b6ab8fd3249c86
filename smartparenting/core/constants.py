"""
App-wide constants for route configuration.

This module provides a single source of truth for route prefixes, tags,
and common response definitions for API routes.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints."""

    AUTH = RouteConfig(prefix="/api", tag="auth")
    USER = RouteConfig(prefix="/api", tag="users")
    HEALTH = RouteConfig(prefix="/health", tag="health")


class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    BAD_REQUEST: dict[int, dict[str, Any]] = {
        400: {"description": "Missing or malformed field, or identifier taken"}
    }
    UNAUTHORIZED: dict[int, dict[str, Any]] = {
        401: {"description": "Unknown account or wrong credentials"}
    }
    FORBIDDEN: dict[int, dict[str, Any]] = {
        403: {"description": "Account state or role forbids the operation"}
    }
    SERVER_ERROR: dict[int, dict[str, Any]] = {
        500: {"description": "Store, hashing or signing failure"}
    }
