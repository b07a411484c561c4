"""Fixed-field reports built from interval-keyed payloads."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .coerce import DecimalValue, parse_decimal


class Interval(str, Enum):
    """Averaging windows used by the hashrate endpoints."""

    ONE_HOUR = "h1"
    THREE_HOURS = "h3"
    SIX_HOURS = "h6"
    TWELVE_HOURS = "h12"
    TWENTYFOUR_HOURS = "h24"


_REPORT_FIELDS = {
    Interval.ONE_HOUR: "last_hour",
    Interval.THREE_HOURS: "last_three_hours",
    Interval.SIX_HOURS: "last_six_hours",
    Interval.TWELVE_HOURS: "last_twelve_hours",
    Interval.TWENTYFOUR_HOURS: "last_day",
}

_EARNINGS_FIELDS = {
    "minute": "per_minute",
    "hour": "per_hour",
    "day": "per_day",
    "week": "per_week",
    "month": "per_month",
}


class HashrateItem(BaseModel):
    """A worker together with one of its (averaged) hashrates [MH/s]."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="worker")
    hashrate: DecimalValue


class HashrateReport(BaseModel):
    """Average hashrate [MH/s] for each interval."""

    model_config = ConfigDict(frozen=True)

    last_hour: float = 0.0
    last_three_hours: float = 0.0
    last_six_hours: float = 0.0
    last_twelve_hours: float = 0.0
    last_day: float = 0.0

    def for_interval(self, interval: Interval | str) -> float:
        return getattr(self, _REPORT_FIELDS[Interval(interval)])


class WorkersHashrateReport(BaseModel):
    """Per-worker average hashrates for each interval."""

    model_config = ConfigDict(frozen=True)

    last_hour: Tuple[HashrateItem, ...] = ()
    last_three_hours: Tuple[HashrateItem, ...] = ()
    last_six_hours: Tuple[HashrateItem, ...] = ()
    last_twelve_hours: Tuple[HashrateItem, ...] = ()
    last_day: Tuple[HashrateItem, ...] = ()

    def for_interval(self, interval: Interval | str) -> Tuple[HashrateItem, ...]:
        return getattr(self, _REPORT_FIELDS[Interval(interval)])


class EarningsItem(BaseModel):
    """Projected earnings over one period."""

    model_config = ConfigDict(frozen=True)

    coins: DecimalValue = 0.0
    bitcoins: DecimalValue = 0.0
    dollars: DecimalValue = 0.0
    yuan: DecimalValue = 0.0
    euros: DecimalValue = 0.0
    rubles: DecimalValue = 0.0


class EarningsReport(BaseModel):
    """Projected earnings per minute, hour, day, week and month."""

    model_config = ConfigDict(frozen=True)

    per_minute: EarningsItem = EarningsItem()
    per_hour: EarningsItem = EarningsItem()
    per_day: EarningsItem = EarningsItem()
    per_week: EarningsItem = EarningsItem()
    per_month: EarningsItem = EarningsItem()


def hashrate_report(raw: Mapping[str, Any]) -> HashrateReport:
    """Collapse an ``{h1, h3, h6, h12, h24}`` mapping into a :class:`HashrateReport`.

    Intervals missing from ``raw`` are reported as ``0.0``; unknown keys are
    ignored. Values may still be in their string-encoded wire form.
    """

    values = {}
    for interval, name in _REPORT_FIELDS.items():
        if interval.value in raw:
            values[name] = parse_decimal(raw[interval.value], interval.value)
    return HashrateReport(**values)


def workers_hashrate_report(raw: Mapping[str, Sequence[Any]]) -> WorkersHashrateReport:
    """Same as :func:`hashrate_report` for interval-keyed lists of worker hashrates."""

    return WorkersHashrateReport(
        **{
            name: tuple(raw.get(interval.value) or ())
            for interval, name in _REPORT_FIELDS.items()
        }
    )


def earnings_report(raw: Mapping[str, Any]) -> EarningsReport:
    return EarningsReport(
        **{name: raw[period] for period, name in _EARNINGS_FIELDS.items() if raw.get(period)}
    )
