"""Declarative table of the Nanopool operations.

Each entry names the endpoint template, the shape the ``data`` field is
validated against, and an optional function turning the decoded value into
the public result (for example collapsing an interval-keyed mapping into a
fixed report).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import NonNegativeInt

from . import endpoints
from .coerce import DecimalValue
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
from .reports import (
    EarningsItem,
    HashrateItem,
    earnings_report,
    hashrate_report,
    workers_hashrate_report,
)

Reshape = Callable[[Any, Tuple[Any, ...]], Any]


@dataclass(frozen=True)
class Operation:
    endpoint: str
    shape: Any
    reshape: Optional[Reshape] = None
    description: str = ""

    def finish(self, value: Any, args: Tuple[Any, ...]) -> Any:
        return self.reshape(value, args) if self.reshape else value


def _hashrates(value: Dict[str, float], _args: Tuple[Any, ...]) -> Any:
    return hashrate_report(value)


def _workers_hashrates(value: Dict[str, List[HashrateItem]], _args: Tuple[Any, ...]) -> Any:
    return workers_hashrate_report(value)


def _earnings(value: Dict[str, EarningsItem], _args: Tuple[Any, ...]) -> Any:
    return earnings_report(value)


def _stamp_address(user: User, args: Tuple[Any, ...]) -> User:
    return user.model_copy(update={"address": args[0]})


OPERATIONS: Dict[str, Operation] = {
    # Account
    "balance": Operation(endpoints.ACCOUNT_BALANCE, DecimalValue, description="Account balance"),
    "average_hashrate_in": Operation(
        endpoints.AVERAGE_HASHRATE_LIMITED,
        DecimalValue,
        description="Average hashrate over the last N hours",
    ),
    "average_hashrate": Operation(
        endpoints.AVERAGE_HASHRATE,
        Dict[str, DecimalValue],
        _hashrates,
        "Average hashrate for each interval",
    ),
    "hashrate_chart": Operation(endpoints.HASHRATE_CHART, List[ChartItem], description="Hashrate chart"),
    "account_exists": Operation(endpoints.ACCOUNT_EXIST, Any, description="Check that an account exists"),
    "current_hashrate": Operation(endpoints.CURRENT_HASHRATE, DecimalValue, description="Current hashrate"),
    "user_info": Operation(endpoints.USER, User, _stamp_address, "Account details with workers"),
    "hashrate_history": Operation(endpoints.HISTORY, List[HistoryItem], description="Hashrate history"),
    "balance_and_hashrate": Operation(
        endpoints.BALANCE_HASHRATE, BalanceHashrate, description="Current balance and hashrate"
    ),
    "reported_hashrate": Operation(
        endpoints.REPORTED_HASHRATE, DecimalValue, description="Last reported hashrate"
    ),
    "workers": Operation(endpoints.WORKERS, List[Worker], description="Workers of an account"),
    "payments": Operation(endpoints.PAYMENTS, List[Payment], description="Payments to an account"),
    "share_history": Operation(
        endpoints.SHARERATE_HISTORY, List[ShareItem], description="Share rate history"
    ),
    "workers_average_hashrate_in": Operation(
        endpoints.WORKERS_AVERAGE_HASHRATE_LIMITED,
        List[HashrateItem],
        description="Average hashrate of every worker over the last N hours",
    ),
    "workers_average_hashrate": Operation(
        endpoints.WORKERS_AVERAGE_HASHRATE,
        Dict[str, List[HashrateItem]],
        _workers_hashrates,
        "Average hashrate of every worker for each interval",
    ),
    "workers_reported_hashrate": Operation(
        endpoints.WORKERS_REPORTED_HASHRATE,
        List[HashrateItem],
        description="Last reported hashrate of every worker",
    ),
    # Worker
    "worker_average_hashrate_in": Operation(
        endpoints.WORKER_AVERAGE_HASHRATE_LIMITED,
        DecimalValue,
        description="Average worker hashrate over the last N hours",
    ),
    "worker_average_hashrate": Operation(
        endpoints.WORKER_AVERAGE_HASHRATE,
        Dict[str, DecimalValue],
        _hashrates,
        "Average worker hashrate for each interval",
    ),
    "worker_hashrate_chart": Operation(
        endpoints.WORKER_HASHRATE_CHART, List[ChartItem], description="Worker hashrate chart"
    ),
    "worker_current_hashrate": Operation(
        endpoints.WORKER_CURRENT_HASHRATE, DecimalValue, description="Current worker hashrate"
    ),
    "worker_hashrate_history": Operation(
        endpoints.WORKER_HISTORY, List[HistoryItem], description="Worker hashrate history"
    ),
    "worker_reported_hashrate": Operation(
        endpoints.WORKER_REPORTED_HASHRATE, DecimalValue, description="Last reported worker hashrate"
    ),
    "worker_share_history": Operation(
        endpoints.WORKER_SHARERATE_HISTORY, List[ShareItem], description="Worker share rate history"
    ),
    # Network
    "average_blocktime": Operation(
        endpoints.AVERAGE_BLOCKTIME, DecimalValue, description="Average block time [s]"
    ),
    "block_stats": Operation(
        endpoints.BLOCK_STATS, List[BlockStatItem], description="Block statistics (offset, count)"
    ),
    "blocks": Operation(endpoints.BLOCKS, List[BlockItem], description="Latest blocks (offset, count)"),
    "last_block_number": Operation(
        endpoints.LAST_BLOCK_NUMBER, NonNegativeInt, description="Latest block number"
    ),
    "time_to_next_epoch": Operation(
        endpoints.TIME_TO_NEXT_EPOCH, DecimalValue, description="Seconds until the next epoch"
    ),
    # Other
    "approximated_earnings": Operation(
        endpoints.APPROXIMATED_EARNINGS,
        Dict[str, EarningsItem],
        _earnings,
        "Projected earnings for a hashrate [MH/s]",
    ),
    "prices": Operation(endpoints.PRICES, PriceReport, description="Current coin prices"),
    # Pool
    "active_miners": Operation(endpoints.ACTIVE_MINERS, NonNegativeInt, description="Active pool miners"),
    "active_workers": Operation(
        endpoints.ACTIVE_WORKERS, NonNegativeInt, description="Active pool workers"
    ),
    "pool_hashrate": Operation(endpoints.POOL_HASHRATE, DecimalValue, description="Pool hashrate"),
    "top_miners": Operation(endpoints.TOP_MINERS, List[TopMiner], description="Top pool miners"),
}
