"""Exceptions raised by the Nanopool client."""

from __future__ import annotations

from typing import Optional


class NanopoolError(Exception):
    """Base class for every failure surfaced by the client."""


class FormatMismatch(NanopoolError, TypeError):
    """Arguments do not match the placeholders of an endpoint template."""


class TransportError(NanopoolError):
    """The service could not be reached or the response could not be read."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status_code = status_code


class DecodeError(NanopoolError, ValueError):
    """Response body or one of its fields does not decode into the expected shape."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(f"{field}: {message}" if field else message)
        self.message = message
        self.field = field


class RequestRejected(NanopoolError):
    """The envelope decoded but the service answered with ``status: false``."""

    def __init__(self, url: str, reason: Optional[str] = None) -> None:
        super().__init__(f"Request rejected for {url}: {reason or 'no data'}")
        self.url = url
        self.reason = reason
