"""Endpoint templates and URL resolution."""

from __future__ import annotations

import re
from typing import Any, Tuple

from .errors import FormatMismatch

API_BASE = "https://api.nanopool.org/v1/eth"

# Account
ACCOUNT_BALANCE = "%s/balance/%s"
AVERAGE_HASHRATE_LIMITED = "%s/avghashratelimited/%s/%d"
AVERAGE_HASHRATE = "%s/avghashrate/%s"
HASHRATE_CHART = "%s/hashratechart/%s"
ACCOUNT_EXIST = "%s/accountexist/%s"
CURRENT_HASHRATE = "%s/hashrate/%s"
USER = "%s/user/%s"
HISTORY = "%s/history/%s"
BALANCE_HASHRATE = "%s/balance_hashrate/%s"
REPORTED_HASHRATE = "%s/reportedhashrate/%s"
WORKERS = "%s/workers/%s"
PAYMENTS = "%s/payments/%s"
SHARERATE_HISTORY = "%s/shareratehistory/%s"
WORKERS_AVERAGE_HASHRATE_LIMITED = "%s/avghashrateworkers/%s/%d"
WORKERS_AVERAGE_HASHRATE = "%s/avghashrateworkers/%s"
WORKERS_REPORTED_HASHRATE = "%s/reportedhashrates/%s"

# Worker
WORKER_AVERAGE_HASHRATE_LIMITED = "%s/avghashratelimited/%s/%s/%d"
WORKER_AVERAGE_HASHRATE = "%s/avghashrate/%s/%s"
WORKER_HASHRATE_CHART = "%s/hashratechart/%s/%s"
WORKER_CURRENT_HASHRATE = "%s/hashrate/%s/%s"
WORKER_HISTORY = "%s/history/%s/%s"
WORKER_REPORTED_HASHRATE = "%s/reportedhashrate/%s/%s"
WORKER_SHARERATE_HISTORY = "%s/shareratehistory/%s/%s"

# Network
AVERAGE_BLOCKTIME = "%s/network/avgblocktime"
BLOCK_STATS = "%s/block_stats/%d/%d"
BLOCKS = "%s/blocks/%d/%d"
LAST_BLOCK_NUMBER = "%s/network/lastblocknumber"
TIME_TO_NEXT_EPOCH = "%s/network/timetonextepoch"

# Other
APPROXIMATED_EARNINGS = "%s/approximated_earnings/%f"
PRICES = "%s/prices"

# Pool
ACTIVE_MINERS = "%s/pool/activeminers"
ACTIVE_WORKERS = "%s/pool/activeworkers"
POOL_HASHRATE = "%s/pool/hashrate"
TOP_MINERS = "%s/pool/topminers"

_PLACEHOLDER = re.compile(r"%([sdf%])")


def placeholders(template: str) -> Tuple[str, ...]:
    """Return the argument placeholders of ``template``, base address excluded."""

    found = tuple(kind for kind in _PLACEHOLDER.findall(template) if kind != "%")
    if not found or found[0] != "s":
        raise FormatMismatch(f"Template {template!r} has no leading base address slot")
    return found[1:]


def _accepts(kind: str, value: Any) -> bool:
    if kind == "s":
        return isinstance(value, str)
    if isinstance(value, bool):
        return False
    if kind == "d":
        return isinstance(value, int)
    return isinstance(value, (int, float))


def resolve(template: str, *args: Any, base: str = API_BASE) -> str:
    """Substitute ``base`` and ``args`` positionally into ``template``.

    Values are inserted verbatim, without URL escaping. A wrong number of
    arguments or a value of the wrong type raises :class:`FormatMismatch`.
    """

    kinds = placeholders(template)
    if len(args) != len(kinds):
        raise FormatMismatch(
            f"Template {template!r} expects {len(kinds)} argument(s), got {len(args)}"
        )
    for position, (kind, value) in enumerate(zip(kinds, args), start=1):
        if not _accepts(kind, value):
            raise FormatMismatch(
                f"Argument {position} of {template!r} must match %{kind}, "
                f"got {type(value).__name__}"
            )
    return template % ((base.rstrip("/"),) + args)
