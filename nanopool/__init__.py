"""Client for the public Nanopool mining-pool statistics API."""

from .client import NanopoolClient
from .errors import DecodeError, FormatMismatch, NanopoolError, RequestRejected, TransportError
from .reports import HashrateReport, Interval, WorkersHashrateReport

__all__ = [
    "DecodeError",
    "FormatMismatch",
    "HashrateReport",
    "Interval",
    "NanopoolClient",
    "NanopoolError",
    "RequestRejected",
    "TransportError",
    "WorkersHashrateReport",
]
