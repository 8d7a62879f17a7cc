"""Data models for mod_status scoreboard records.

Field names follow the ``worker_score`` struct of httpd's ``scoreboard.h``
where mod_status exposes them. Unit suffixes are kept because mod_status
converts most values from bytes or microseconds before printing them.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class WorkerStatus(Enum):
    """Worker state, keyed by the single character printed in the "M" column.

    Mirrors the ``SERVER_*`` constants of ``scoreboard.h``.
    """

    DEAD = "."
    STARTING = "S"
    READY = "_"
    BUSY_READ = "R"
    BUSY_WRITE = "W"
    BUSY_KEEPALIVE = "K"
    BUSY_LOG = "L"
    BUSY_DNS = "D"
    CLOSING = "C"
    GRACEFUL = "G"
    IDLE_KILL = "I"

    @property
    def code(self) -> str:
        """Character used for this status on the status page."""
        return self.value

    @property
    def label(self) -> str:
        """Symbolic name used in serialized output."""
        return _STATUS_LABELS[self]

    @classmethod
    def from_code(cls, code: str) -> "WorkerStatus | None":
        """Look up a status by its character, None if unmapped."""
        return _STATUS_BY_CODE.get(code)


_STATUS_LABELS = {
    WorkerStatus.DEAD: "Dead",
    WorkerStatus.STARTING: "Starting",
    WorkerStatus.READY: "Ready",
    WorkerStatus.BUSY_READ: "BusyRead",
    WorkerStatus.BUSY_WRITE: "BusyWrite",
    WorkerStatus.BUSY_KEEPALIVE: "BusyKeepAlive",
    WorkerStatus.BUSY_LOG: "BusyLog",
    WorkerStatus.BUSY_DNS: "BusyDns",
    WorkerStatus.CLOSING: "Closing",
    WorkerStatus.GRACEFUL: "Graceful",
    WorkerStatus.IDLE_KILL: "IdleKill",
}

_STATUS_BY_CODE = {status.value: status for status in WorkerStatus}


@dataclass(frozen=True)
class AccessCounts:
    """Request counters in the order of the "Acc" column.

    mod_status and scoreboard.h name these differently:

    - ``connection`` is ``conn_count`` (``conn_lres`` in mod_status.c)
    - ``child`` is ``my_lres`` (``my_access_count`` in mod_status.c)
    - ``slot`` is ``lres`` (``access_count`` in mod_status.c)
    """

    connection: int
    child: int
    slot: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "connection_scope": self.connection,
            "child_scope": self.child,
            "slot_scope": self.slot,
        }


@dataclass(frozen=True)
class WorkerScore:
    """One worker slot of the scoreboard.

    ``tid`` and ``thread_num`` are not exposed by mod_status.
    """

    pid: int | None  # None when the slot has no live process
    generation: int
    status: WorkerStatus
    access_counts: AccessCounts
    conn_kib: float  # conn_bytes / 1024
    child_mib: float  # bytes_served / 1048576
    slot_mib: float  # my_bytes_served / 1048576
    request_time_ms: int  # stop_time - start_time
    seconds_since_last_use: int
    cpu_seconds: float  # 0.0 when built without HAVE_TIMES
    request: str
    vhost: str
    protocol: str
    client: str
    duration_ms: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "process_id": self.pid,
            "generation": self.generation,
            "status": self.status.label,
            "access_counts": self.access_counts.to_dict(),
            "connection_kib": self.conn_kib,
            "child_mib": self.child_mib,
            "slot_mib": self.slot_mib,
            "request_time_ms": self.request_time_ms,
            "seconds_since_last_use": self.seconds_since_last_use,
            "cpu_seconds": self.cpu_seconds,
            "request_line": self.request,
            "virtual_host": self.vhost,
            "protocol": self.protocol,
            "client": self.client,
            "duration_ms": self.duration_ms,
        }


@dataclass
class ServerStatus:
    """Envelope for all worker records of one status page."""

    workers: list[WorkerScore] = field(default_factory=list)

    def status_counts(self) -> dict[WorkerStatus, int]:
        """Count workers per status, in enum declaration order."""
        counts = Counter(w.status for w in self.workers)
        return {status: counts[status] for status in WorkerStatus if counts[status]}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"workers": [w.to_dict() for w in self.workers]}
