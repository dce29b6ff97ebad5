#!/usr/bin/env python3
"""
HTTP transport for the Eventbrite API.
"""

from __future__ import annotations

import logging
import socket
from typing import Any, Callable, Dict, Optional, Tuple
from urllib.parse import urlsplit

import requests

from .errors import (
    BadRequestError,
    EventbriteApiError,
    NetworkError,
    NotFoundError,
    OfflineError,
    RequestFailedError,
    RequestTimeoutError,
    ServiceUnavailableError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

CONNECTIVITY_TIMEOUT_SECONDS = 1.0


def parse_connectivity_address(value: str, default_port: int = 443) -> Optional[Tuple[str, int]]:
    """Parse ``host`` or ``host:port``; a blank value yields None."""
    value = value.strip()
    if not value:
        return None
    host, sep, port = value.rpartition(":")
    if not sep or not port.isdigit():
        return value, default_port
    return host, int(port)


def check_connectivity(address: Tuple[str, int], timeout: float = CONNECTIVITY_TIMEOUT_SECONDS) -> bool:
    """Return False when no TCP connection to ``address`` can be opened."""
    try:
        with socket.create_connection(address, timeout=timeout):
            return True
    except OSError:
        return False


def address_for_url(url: str) -> Optional[Tuple[str, int]]:
    parts = urlsplit(url)
    if not parts.hostname:
        return None
    return parts.hostname, parts.port or (80 if parts.scheme == "http" else 443)


class EventbriteTransport:
    """Issues single GET requests and maps failures to ``EventbriteApiError``."""

    def __init__(
        self,
        token: Optional[str],
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        is_online: Optional[Callable[[], bool]] = None,
        connectivity_address: Optional[Tuple[str, int]] = None,
    ) -> None:
        self._token = token or ""
        self._timeout = timeout
        self._is_online = is_online
        self._connectivity_address = connectivity_address
        self._session = session or requests.Session()
        self._session.headers.update({
            "Accept": "application/json",
            "User-Agent": "atlantic-events-hub/1.0",
        })

    @property
    def timeout(self) -> float:
        return self._timeout

    def request(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        query = dict(params or {})
        query["token"] = self._token
        response: Optional[requests.Response] = None
        logger.debug("GET %s params=%s", url, sorted(key for key in query if key != "token"))

        try:
            response = self._session.get(
                url,
                params=query,
                timeout=timeout if timeout is not None else self._timeout,
            )
            if not response.ok:
                raise self._error_for(response)
            return response.json()
        except EventbriteApiError:
            raise
        except requests.Timeout as exc:
            raise RequestTimeoutError() from exc
        except (requests.RequestException, ValueError) as exc:
            if not self._check_online(url):
                raise OfflineError() from exc
            raise NetworkError(str(exc)) from exc
        finally:
            if response is not None:
                response.close()

    def _check_online(self, url: str) -> bool:
        if self._is_online is not None:
            return self._is_online()
        # Without a configured address, check the host that just failed.
        address = self._connectivity_address or address_for_url(url)
        if address is None:
            return True
        return check_connectivity(address)

    def _error_for(self, response: requests.Response) -> EventbriteApiError:
        status = response.status_code
        if status == 401:
            return UnauthorizedError()
        if status == 404:
            return NotFoundError()
        if status == 400:
            return BadRequestError(self._error_description(response))
        if status >= 500:
            return ServiceUnavailableError(status)
        return RequestFailedError(status, response.text)

    def _error_description(self, response: requests.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            return body.get("error_description")
        return None

    def close(self) -> None:
        self._session.close()
