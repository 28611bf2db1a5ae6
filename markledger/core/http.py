# markledger/core/http.py
"""
Centralized HTTP client factory for the remote sink.

This module provides one place to create HTTP clients, with standardized
headers, timeouts and error translation.

Usage:
    from markledger.core.http import api_client, check_status

    with api_client(api_key="your-key", timeout=30.0) as client:
        response = client.post("https://example.com/bookmarks", json=payload)
        check_status(response, endpoint="https://example.com/bookmarks")
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

import httpx

from markledger.core.exceptions import RemoteSinkError

logger = logging.getLogger(__name__)


# =============================================================================
# Default Configuration
# =============================================================================

DEFAULT_TIMEOUTS = {
    "default": 30.0,
    "sync": 60.0,
}

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# Characters of a response body kept in error messages
MAX_ERROR_BODY = 500


# =============================================================================
# Client Factory
# =============================================================================


def create_api_client(
    base_url: str = "",
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
    timeout_type: str = "default",
    headers: Optional[Dict[str, str]] = None,
    auth_header: str = "Authorization",
    auth_scheme: str = "Bearer",
    **kwargs: Any,
) -> httpx.Client:
    """
    Create a configured HTTP client.

    Args:
        base_url: Base URL for relative requests (optional)
        api_key: API key sent as "<auth_scheme> <api_key>" (optional)
        timeout: Request timeout in seconds (or use timeout_type)
        timeout_type: Preset timeout type ("default", "sync")
        headers: Additional headers to include
        auth_header: Header name for authentication
        auth_scheme: Authentication scheme
        **kwargs: Additional arguments passed to httpx.Client (e.g. transport)

    Returns:
        Configured httpx.Client instance
    """
    if timeout is None:
        timeout = DEFAULT_TIMEOUTS.get(timeout_type, DEFAULT_TIMEOUTS["default"])

    final_headers = dict(DEFAULT_HEADERS)

    if api_key:
        final_headers[auth_header] = f"{auth_scheme} {api_key}"

    if headers:
        final_headers.update(headers)

    client = httpx.Client(
        base_url=base_url,
        headers=final_headers,
        timeout=timeout,
        **kwargs,
    )

    logger.debug(f"Created HTTP client (timeout={timeout}s)")

    return client


@contextmanager
def api_client(
    base_url: str = "",
    api_key: Optional[str] = None,
    **kwargs: Any,
) -> Generator[httpx.Client, None, None]:
    """
    Context manager for HTTP client with automatic cleanup.

    Usage:
        with api_client(api_key=key) as client:
            response = client.post(url, json=payload)
    """
    client = create_api_client(base_url, api_key, **kwargs)
    try:
        yield client
    finally:
        client.close()


# =============================================================================
# Error Handling
# =============================================================================


def is_success(status_code: int) -> bool:
    """Only 2xx counts as success; redirects are failures."""
    return 200 <= status_code < 300


def check_status(response: httpx.Response, endpoint: str = "") -> None:
    """
    Raise RemoteSinkError unless the response status is 2xx.

    The response body is not parsed, only echoed (truncated) into the message.
    """
    status_code = response.status_code
    if is_success(status_code):
        return

    body = response.text[:MAX_ERROR_BODY] if response.text else ""
    raise RemoteSinkError(
        message=f"API request failed with status {status_code}: {body}",
        status_code=status_code,
        endpoint=endpoint,
        details=body or None,
    )


def handle_api_error(exc: Exception, endpoint: str = "") -> RemoteSinkError:
    """
    Convert an httpx exception to a RemoteSinkError.

    The original exception text is kept verbatim in the message.

    Example:
        try:
            response = client.post(url, json=payload)
        except httpx.HTTPError as exc:
            raise handle_api_error(exc, endpoint=url) from exc
    """
    if isinstance(exc, httpx.TimeoutException):
        return RemoteSinkError(
            message=f"Request to {endpoint} timed out: {exc}",
            endpoint=endpoint,
            details="Consider increasing api.timeout",
            original_error=exc,
        )

    if isinstance(exc, httpx.ConnectError):
        return RemoteSinkError(
            message=f"Failed to connect to {endpoint}: {exc}",
            endpoint=endpoint,
            details=str(exc),
            original_error=exc,
        )

    return RemoteSinkError(
        message=f"Request to {endpoint} failed: {exc}",
        endpoint=endpoint,
        details=str(exc),
        original_error=exc,
    )


__all__ = [
    "DEFAULT_TIMEOUTS",
    "DEFAULT_HEADERS",
    "create_api_client",
    "api_client",
    "is_success",
    "check_status",
    "handle_api_error",
]
