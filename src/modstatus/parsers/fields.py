"""Parsers for individual scoreboard columns."""

import re

from ..exceptions import (
    AccessCountsInvalidFieldCountError,
    InvalidStatusCodeError,
    ParseFloatError,
    ParseIntError,
    SrvFieldUnknownFormatError,
    StatusCodeMustBeCharError,
)
from ..models import AccessCounts, WorkerStatus

INT32_RANGE = (-(2**31), 2**31 - 1)
UINT32_RANGE = (0, 2**32 - 1)

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def _parse_integer(s: str, pattern: re.Pattern[str], bounds: tuple[int, int]) -> int:
    if not s:
        raise ParseIntError("cannot parse integer from empty string")
    if not pattern.fullmatch(s):
        raise ParseIntError(f"invalid digit found in string: `{s}`")

    value = int(s)
    low, high = bounds
    if value > high:
        raise ParseIntError(f"number too large to fit in target type: `{s}`")
    if value < low:
        raise ParseIntError(f"number too small to fit in target type: `{s}`")
    return value


def parse_int(s: str) -> int:
    """Parse a signed 32-bit integer (optional sign, ASCII digits only)."""
    return _parse_integer(s, _SIGNED_RE, INT32_RANGE)


def parse_uint(s: str) -> int:
    """Parse an unsigned 32-bit integer."""
    return _parse_integer(s, _UNSIGNED_RE, UINT32_RANGE)


def parse_float(s: str) -> float:
    """Parse a float as printed by mod_status (e.g. "0.52", "12.3")."""
    # float() also accepts digit separators, mod_status never prints them
    if "_" in s:
        raise ParseFloatError(f"invalid float literal: `{s}`")
    try:
        return float(s)
    except ValueError as e:
        raise ParseFloatError(f"invalid float literal: `{s}`") from e


def parse_srv(s: str) -> tuple[int, int]:
    """Parse the "Srv" column (``<child server number>-<generation>``).

    Returns:
        Tuple of (child_server_number, generation)
    """
    parts = s.split("-")
    if len(parts) != 2:
        raise SrvFieldUnknownFormatError(s)

    return parse_int(parts[0]), parse_int(parts[1])


def parse_pid(s: str) -> int | None:
    """Parse the "PID" column. "-" means the slot has no live process."""
    if s == "-":
        return None
    return parse_int(s)


def parse_worker_status(s: str) -> WorkerStatus:
    """Parse the "M" column (mode of operation)."""
    if len(s) != 1:
        raise StatusCodeMustBeCharError(s)

    status = WorkerStatus.from_code(s)
    if status is None:
        raise InvalidStatusCodeError(s)
    return status


def parse_acc(s: str) -> AccessCounts:
    """Parse the "Acc" column (``<connection>/<child>/<slot>``)."""
    parts = s.split("/")
    if len(parts) != 3:
        raise AccessCountsInvalidFieldCountError(s)

    connection, child, slot = (parse_uint(p) for p in parts)
    return AccessCounts(connection=connection, child=child, slot=slot)
