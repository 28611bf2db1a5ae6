# markledger/sync/sink.py
"""
Sinks that receive export payloads.

- ExportSink: Local destination for the serialized payload (stdout, file)
- RemoteSink: HTTP endpoint that must confirm receipt with a 2xx status
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, TextIO, runtime_checkable

import httpx

from markledger.core.http import api_client, check_status, handle_api_error

logger = logging.getLogger(__name__)


@runtime_checkable
class ExportSink(Protocol):
    """Protocol for local export destinations."""

    def write(self, text: str) -> None:
        """Deliver the serialized payload."""
        ...


@runtime_checkable
class RemoteSink(Protocol):
    """
    Protocol for the remote sink.

    `endpoint` and `api_key` are checked before any network call.
    """

    endpoint: str
    api_key: str

    def send(self, payload: Dict[str, Any]) -> int:
        """POST the payload; return the 2xx status or raise RemoteSinkError."""
        ...


class StreamExportSink:
    """Writes the payload to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(text)
        if not text.endswith("\n"):
            stream.write("\n")
        stream.flush()


class FileExportSink:
    """Writes the payload to a file, creating parent directories."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, text: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(text, encoding="utf-8")
        logger.info(f"Wrote export to {self._path}")


class HttpRemoteSink:
    """
    POSTs JSON to the configured URL with a Bearer token.

    Usage:
        remote = HttpRemoteSink(config.api.url, config.api.key, timeout=config.api.timeout)
        status = remote.send(payload.to_dict())
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize the sink.

        Args:
            endpoint: Full URL to POST to
            api_key: Bearer token
            timeout: Request timeout in seconds (None uses the "sync" preset)
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.endpoint = endpoint
        self.api_key = api_key
        self._timeout = timeout
        self._transport = transport

    def send(self, payload: Dict[str, Any]) -> int:
        """
        POST the payload.

        Returns:
            The 2xx status code

        Raises:
            RemoteSinkError: On non-2xx status or transport failure
        """
        kwargs: Dict[str, Any] = {"timeout": self._timeout, "timeout_type": "sync"}
        if self._transport is not None:
            kwargs["transport"] = self._transport

        with api_client(api_key=self.api_key, **kwargs) as client:
            try:
                response = client.post(self.endpoint, json=payload)
            except httpx.HTTPError as exc:
                raise handle_api_error(exc, endpoint=self.endpoint) from exc

        check_status(response, endpoint=self.endpoint)
        logger.debug(f"Remote sink accepted payload (HTTP {response.status_code})")
        return response.status_code


__all__ = [
    "ExportSink",
    "RemoteSink",
    "StreamExportSink",
    "FileExportSink",
    "HttpRemoteSink",
]
