"""Coercions for wire values the service encodes as strings."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator

from .errors import DecodeError

_DECIMAL = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_INTEGER = re.compile(r"^[+-]?\d+$")


def parse_decimal(value: Any, field: Optional[str] = None) -> float:
    """Parse a decimal number sent either as a JSON number or as a string.

    Blank strings, ``nan``/``inf`` spellings and booleans are rejected rather
    than read as zero.
    """

    if isinstance(value, bool):
        raise DecodeError(f"expected a decimal number, got boolean {value!r}", field)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and _DECIMAL.match(value.strip()):
        number = float(value.strip())
    else:
        raise DecodeError(f"expected a decimal number, got {value!r}", field)
    if not math.isfinite(number):
        raise DecodeError(f"expected a finite number, got {value!r}", field)
    return number


def parse_epoch(value: Any, field: Optional[str] = None) -> datetime:
    """Decode Unix seconds (JSON integer or integer text) into an aware UTC datetime."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, bool) or isinstance(value, float):
        raise DecodeError(f"expected integer Unix seconds, got {value!r}", field)
    if isinstance(value, int):
        seconds = value
    elif isinstance(value, str) and _INTEGER.match(value.strip()):
        seconds = int(value.strip())
    else:
        raise DecodeError(f"expected integer Unix seconds, got {value!r}", field)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise DecodeError(f"Unix seconds out of range: {seconds}", field) from exc


DecimalValue = Annotated[float, BeforeValidator(lambda value: parse_decimal(value))]
EpochTime = Annotated[datetime, BeforeValidator(lambda value: parse_epoch(value))]
