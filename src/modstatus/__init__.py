"""Apache mod_status scoreboard parser.

Turns the worker table of an httpd ``server-status`` page into typed
worker records that serialize to JSON.
"""

from .config import ParserConfig
from .exceptions import (
    AccessCountsInvalidFieldCountError,
    InvalidCellCountError,
    InvalidHeadersError,
    InvalidStatusCodeError,
    ParseFloatError,
    ParseIntError,
    SrvFieldUnknownFormatError,
    StatusCodeMustBeCharError,
    WorkerScoreParseError,
)
from .models import AccessCounts, ServerStatus, WorkerScore, WorkerStatus
from .parsers import parse_server_status, parse_worker_scores

__all__ = [
    "ParserConfig",
    "AccessCounts",
    "ServerStatus",
    "WorkerScore",
    "WorkerStatus",
    "parse_server_status",
    "parse_worker_scores",
    "WorkerScoreParseError",
    "InvalidHeadersError",
    "InvalidCellCountError",
    "StatusCodeMustBeCharError",
    "InvalidStatusCodeError",
    "AccessCountsInvalidFieldCountError",
    "SrvFieldUnknownFormatError",
    "ParseIntError",
    "ParseFloatError",
]
