"""Minimal Nanopool API client."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, StrictBool, TypeAdapter, ValidationError
from requests import RequestException, Response

from .catalog import OPERATIONS
from .config import NanopoolConfig
from .endpoints import API_BASE, resolve
from .errors import DecodeError, FormatMismatch, RequestRejected, TransportError
from .models import (
    BalanceHashrate,
    BlockItem,
    BlockStatItem,
    ChartItem,
    HistoryItem,
    Payment,
    PriceReport,
    ShareItem,
    TopMiner,
    User,
    Worker,
)
from .reports import EarningsReport, HashrateItem, HashrateReport, WorkersHashrateReport

LOGGER = logging.getLogger(__name__)

HttpGet = Callable[..., Response]


class Envelope(BaseModel):
    """Wrapper around every response body: ``{"status": bool, "data": ...}``."""

    model_config = ConfigDict(extra="ignore")

    status: StrictBool
    data: Any = None
    error: Optional[Any] = None


def _decode_error(exc: ValidationError) -> DecodeError:
    first = exc.errors()[0]
    field = ".".join(["data", *(str(part) for part in first["loc"])])
    return DecodeError(first["msg"], field)


class NanopoolClient:
    """Blocking client for the public Nanopool statistics API.

    ``http_get`` replaces :func:`requests.get` as the transport; it is called
    as ``http_get(url, timeout=...)`` and must return a ``requests.Response``.
    """

    def __init__(
        self,
        base_url: str = API_BASE,
        timeout: Optional[float] = None,
        http_get: Optional[HttpGet] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http_get = http_get

    @classmethod
    def from_config(cls, config: NanopoolConfig) -> "NanopoolClient":
        return cls(base_url=config.base_url, timeout=config.nanopool_timeout)

    def url(self, template: str, *args: Any) -> str:
        return resolve(template, *args, base=self.base_url)

    def fetch(self, url: str, shape: Any) -> Any:
        """GET ``url``, unwrap the envelope and validate ``data`` against ``shape``."""

        get = self.http_get or requests.get
        LOGGER.debug("GET %s", url)
        try:
            response = get(url, timeout=self.timeout)
        except RequestException as exc:
            raise TransportError(url, f"GET failed: {exc}") from exc
        LOGGER.debug("GET %s -> %s", url, response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            if response.status_code >= 400:
                raise TransportError(
                    url, f"HTTP {response.status_code}", status_code=response.status_code
                ) from exc
            raise DecodeError(f"response body is not JSON: {exc}") from exc

        try:
            envelope = Envelope.model_validate(body)
        except ValidationError as exc:
            message = exc.errors()[0]["msg"]
            raise DecodeError(f"response is not a status/data envelope: {message}") from exc

        if not envelope.status:
            reason = None if envelope.error is None else str(envelope.error)
            LOGGER.info("Request rejected: %s (%s)", url, reason or "no data")
            raise RequestRejected(url, reason)

        try:
            return TypeAdapter(shape).validate_python(envelope.data)
        except ValidationError as exc:
            raise _decode_error(exc) from exc

    def call(self, name: str, *args: Any) -> Any:
        """Run the catalog operation ``name`` with its positional endpoint arguments."""

        try:
            operation = OPERATIONS[name]
        except KeyError:
            raise FormatMismatch(f"Unknown operation {name!r}") from None
        url = self.url(operation.endpoint, *args)
        return operation.finish(self.fetch(url, operation.shape), args)

    # Account --------------------------------------------------------------

    def balance(self, address: str) -> float:
        return self.call("balance", address)

    def average_hashrate_in(self, address: str, hours: int) -> float:
        return self.call("average_hashrate_in", address, hours)

    def average_hashrate(self, address: str) -> HashrateReport:
        return self.call("average_hashrate", address)

    def hashrate_chart(self, address: str) -> List[ChartItem]:
        return self.call("hashrate_chart", address)

    def account_exists(self, address: str) -> bool:
        """Return ``False`` when the service rejects the address as unknown."""

        try:
            self.call("account_exists", address)
        except RequestRejected:
            return False
        return True

    def current_hashrate(self, address: str) -> float:
        return self.call("current_hashrate", address)

    def user_info(self, address: str) -> User:
        return self.call("user_info", address)

    def hashrate_history(self, address: str) -> List[HistoryItem]:
        return self.call("hashrate_history", address)

    def balance_and_hashrate(self, address: str) -> BalanceHashrate:
        return self.call("balance_and_hashrate", address)

    def reported_hashrate(self, address: str) -> float:
        return self.call("reported_hashrate", address)

    def workers(self, address: str) -> List[Worker]:
        return self.call("workers", address)

    def payments(self, address: str) -> List[Payment]:
        return self.call("payments", address)

    def share_history(self, address: str) -> List[ShareItem]:
        return self.call("share_history", address)

    def workers_average_hashrate_in(self, address: str, hours: int) -> List[HashrateItem]:
        return self.call("workers_average_hashrate_in", address, hours)

    def workers_average_hashrate(self, address: str) -> WorkersHashrateReport:
        return self.call("workers_average_hashrate", address)

    def workers_reported_hashrate(self, address: str) -> List[HashrateItem]:
        return self.call("workers_reported_hashrate", address)

    # Worker ---------------------------------------------------------------

    def worker_average_hashrate_in(self, address: str, worker: str, hours: int) -> float:
        return self.call("worker_average_hashrate_in", address, worker, hours)

    def worker_average_hashrate(self, address: str, worker: str) -> HashrateReport:
        return self.call("worker_average_hashrate", address, worker)

    def worker_hashrate_chart(self, address: str, worker: str) -> List[ChartItem]:
        return self.call("worker_hashrate_chart", address, worker)

    def worker_current_hashrate(self, address: str, worker: str) -> float:
        return self.call("worker_current_hashrate", address, worker)

    def worker_hashrate_history(self, address: str, worker: str) -> List[HistoryItem]:
        return self.call("worker_hashrate_history", address, worker)

    def worker_reported_hashrate(self, address: str, worker: str) -> float:
        return self.call("worker_reported_hashrate", address, worker)

    def worker_share_history(self, address: str, worker: str) -> List[ShareItem]:
        return self.call("worker_share_history", address, worker)

    # Network --------------------------------------------------------------

    def average_blocktime(self) -> float:
        return self.call("average_blocktime")

    def block_stats(self, offset: int, count: int) -> List[BlockStatItem]:
        return self.call("block_stats", offset, count)

    def blocks(self, offset: int, count: int) -> List[BlockItem]:
        return self.call("blocks", offset, count)

    def last_block_number(self) -> int:
        return self.call("last_block_number")

    def time_to_next_epoch(self) -> float:
        return self.call("time_to_next_epoch")

    # Other ----------------------------------------------------------------

    def approximated_earnings(self, hashrate: float) -> EarningsReport:
        return self.call("approximated_earnings", hashrate)

    def prices(self) -> PriceReport:
        return self.call("prices")

    # Pool -----------------------------------------------------------------

    def active_miners(self) -> int:
        return self.call("active_miners")

    def active_workers(self) -> int:
        return self.call("active_workers")

    def pool_hashrate(self) -> float:
        return self.call("pool_hashrate")

    def top_miners(self) -> List[TopMiner]:
        return self.call("top_miners")
