"""Command line entrypoint."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Any, List, Optional, Sequence

from pydantic import TypeAdapter

from .catalog import OPERATIONS
from .client import NanopoolClient
from .config import NanopoolConfig, load_config
from .endpoints import placeholders
from .errors import FormatMismatch, NanopoolError

LOGGER = logging.getLogger(__name__)

_CONVERTERS = {"s": str, "d": int, "f": float}


def _resolve_log_level(level: str) -> int:
    name = str(level).strip().upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _convert_args(operation: str, raw: Sequence[str]) -> List[Any]:
    """Convert command line strings to the types the endpoint template expects."""

    kinds = placeholders(OPERATIONS[operation].endpoint)
    if len(raw) != len(kinds):
        raise FormatMismatch(f"{operation} expects {len(kinds)} argument(s), got {len(raw)}")
    converted: List[Any] = []
    for kind, value in zip(kinds, raw):
        try:
            converted.append(_CONVERTERS[kind](value))
        except ValueError as exc:
            raise FormatMismatch(f"{operation}: {value!r} is not a valid %{kind} argument") from exc
        if kind == "d" and converted[-1] < 0:
            raise FormatMismatch(f"{operation}: {value!r} must not be negative")
        if kind == "f" and not math.isfinite(converted[-1]):
            raise FormatMismatch(f"{operation}: {value!r} is not a finite number")
    return converted


def _list_operations() -> str:
    width = max(len(name) for name in OPERATIONS)
    return "\n".join(
        f"{name.ljust(width)}  {operation.description}" for name, operation in OPERATIONS.items()
    )


def run(config: NanopoolConfig, operation: str, raw_args: Sequence[str]) -> Any:
    client = NanopoolClient.from_config(config)
    return client.call(operation, *_convert_args(operation, raw_args))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Nanopool statistics API client")
    parser.add_argument("--list", action="store_true", help="List the available operations and exit")
    parser.add_argument("operation", nargs="?", choices=sorted(OPERATIONS), metavar="OPERATION")
    parser.add_argument("args", nargs="*", help="Endpoint arguments (address, worker, hours, ...)")
    args = parser.parse_args(argv)

    config = load_config()
    logging.basicConfig(
        level=_resolve_log_level(config.nanopool_log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        print(_list_operations())
        return 0
    if not args.operation:
        parser.error("an operation is required")

    try:
        result = run(config, args.operation, args.args)
    except FormatMismatch as exc:
        LOGGER.error("%s", exc)
        return 2
    except NanopoolError as exc:
        LOGGER.error("%s failed: %s", args.operation, exc)
        return 1
    print(TypeAdapter(Any).dump_json(result, indent=2).decode())
    return 0


if __name__ == "__main__":
    sys.exit(main())
