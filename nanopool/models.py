"""Typed records returned by the Nanopool endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Tuple

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    field_validator,
    model_validator,
)

from .coerce import DecimalValue, EpochTime
from .reports import HashrateReport, Interval, hashrate_report


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


def _as_hashrate_report(value: Any) -> Any:
    if isinstance(value, Mapping):
        return hashrate_report(value)
    return value


class Worker(_Record):
    """A single mining machine bound to an account."""

    id: str
    hashrate: DecimalValue = 0.0
    last_share: Optional[EpochTime] = Field(
        default=None, validation_alias=AliasChoices("last_share", "lastShare", "lastshare")
    )
    rating: NonNegativeInt = 0
    average_hashrates: HashrateReport = HashrateReport()

    @model_validator(mode="before")
    @classmethod
    def collect_interval_averages(cls, data: Any) -> Any:
        """Fold the flat ``avg_h1`` .. ``avg_h24`` keys into one mapping."""

        if not isinstance(data, Mapping) or "average_hashrates" in data:
            return data
        averages = {}
        for interval in Interval:
            for key in (f"avg_{interval.value}", interval.value):
                if key in data:
                    averages[interval.value] = data[key]
                    break
        if not averages:
            return data
        return {**data, "average_hashrates": averages}

    @field_validator("average_hashrates", mode="before")
    @classmethod
    def shape_average_hashrates(cls, value: Any) -> Any:
        return _as_hashrate_report(value)


class UserWorker(Worker):
    """A worker as embedded in the account details, where hashrate is always sent."""

    hashrate: DecimalValue


class User(_Record):
    """An account, identified by its address, with its workers."""

    address: str = Field(default="", validation_alias=AliasChoices("address", "account"))
    balance: DecimalValue
    unconfirmed_balance: DecimalValue
    hashrate: DecimalValue
    average_hashrates: HashrateReport = Field(
        default=HashrateReport(),
        validation_alias=AliasChoices("average_hashrates", "avghashrate", "avgHashrate"),
    )
    workers: Tuple[UserWorker, ...] = Field(
        default=(), validation_alias=AliasChoices("workers", "worker")
    )

    @field_validator("average_hashrates", mode="before")
    @classmethod
    def shape_average_hashrates(cls, value: Any) -> Any:
        return _as_hashrate_report(value)


class TopMiner(_Record):
    address: str
    hashrate: DecimalValue


class BalanceHashrate(_Record):
    balance: DecimalValue
    hashrate: DecimalValue


class ChartItem(_Record):
    """Hashrate metrics at one point in time."""

    date: EpochTime
    # shares over the last 10 minutes
    shares: NonNegativeInt = 0
    hashrate: DecimalValue = 0.0


class HistoryItem(_Record):
    date: EpochTime
    hashrate: DecimalValue


class ShareItem(_Record):
    date: EpochTime
    shares: NonNegativeInt


class Payment(_Record):
    date: EpochTime
    tx_hash: str = Field(validation_alias=AliasChoices("tx_hash", "txHash", "txhash"))
    amount: DecimalValue
    confirmed: bool = False


class BlockStatItem(_Record):
    date: EpochTime
    difficulty: NonNegativeInt
    block_time: DecimalValue


class BlockItem(_Record):
    number: NonNegativeInt
    hash: str
    date: EpochTime
    difficulty: NonNegativeInt
    miner: str


class PriceReport(_Record):
    """Current exchange rates of the mined coin."""

    us_dollar: DecimalValue = Field(validation_alias=AliasChoices("us_dollar", "price_usd"))
    euro: DecimalValue = Field(validation_alias=AliasChoices("euro", "price_eur"))
    rubles: DecimalValue = Field(validation_alias=AliasChoices("rubles", "price_rur"))
    yuan: DecimalValue = Field(validation_alias=AliasChoices("yuan", "price_cny"))
    bitcoins: DecimalValue = Field(validation_alias=AliasChoices("bitcoins", "price_btc"))

