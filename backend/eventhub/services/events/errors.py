#!/usr/bin/env python3
"""
Error taxonomy for Eventbrite API access.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Failure categories surfaced by the Eventbrite client."""

    INVALID_ARGUMENT = "invalid_argument"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    SERVICE_UNAVAILABLE = "service_unavailable"
    REQUEST_FAILED = "request_failed"
    TIMEOUT = "timeout"
    OFFLINE = "offline"
    NETWORK_ERROR = "network_error"


class EventbriteApiError(Exception):
    """Base error carrying an HTTP-ish status, a message and optional details."""

    kind: ErrorKind = ErrorKind.REQUEST_FAILED

    def __init__(self, status: int, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidArgumentError(EventbriteApiError):
    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(400, message, details)


class UnauthorizedError(EventbriteApiError):
    kind = ErrorKind.UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__(401, "Invalid or expired API token")


class NotFoundError(EventbriteApiError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self) -> None:
        super().__init__(404, "Organization or events not found")


class BadRequestError(EventbriteApiError):
    kind = ErrorKind.BAD_REQUEST

    def __init__(self, details: Optional[str] = None) -> None:
        super().__init__(400, "Invalid request parameters", details)


class ServiceUnavailableError(EventbriteApiError):
    kind = ErrorKind.SERVICE_UNAVAILABLE

    def __init__(self, status: int) -> None:
        super().__init__(
            status,
            "Eventbrite service is temporarily unavailable",
            "Please try again later",
        )


class RequestFailedError(EventbriteApiError):
    kind = ErrorKind.REQUEST_FAILED

    def __init__(self, status: int, details: Optional[str] = None) -> None:
        super().__init__(status, "Failed to fetch events", details)


class RequestTimeoutError(EventbriteApiError):
    kind = ErrorKind.TIMEOUT

    def __init__(self) -> None:
        super().__init__(408, "Request timeout", "The request took too long to complete")


class OfflineError(EventbriteApiError):
    kind = ErrorKind.OFFLINE

    def __init__(self) -> None:
        super().__init__(
            0,
            "No internet connection",
            "Please check your internet connection and try again",
        )


class NetworkError(EventbriteApiError):
    kind = ErrorKind.NETWORK_ERROR

    def __init__(self, details: Optional[str] = None) -> None:
        super().__init__(0, "Network error or service unavailable", details or "Failed to fetch")
