"""Selectors and column layouts for mod_status scoreboard pages.

Layouts target the extended status table of httpd 2.4. The fourteen-column
layout is printed when the server was built without ``HAVE_TIMES``, in which
case the "CPU" column is missing.
"""

# The scoreboard is the only border-less table mod_status prints
SCOREBOARD_TABLE = 'table[border="0"]'
SCOREBOARD_ROWS = f"{SCOREBOARD_TABLE} tr"

# Cells of a row; header rows use <th>, data rows <td>
ROW_CELLS = ["td", "th"]

CPU_COLUMN = "CPU"
CPU_INDEX = 4

FULL_COLUMNS: tuple[str, ...] = (
    "Srv",
    "PID",
    "Acc",
    "M",
    CPU_COLUMN,
    "SS",
    "Req",
    "Dur",
    "Conn",
    "Child",
    "Slot",
    "Client",
    "Protocol",
    "VHost",
    "Request",
)

NO_CPU_COLUMNS: tuple[str, ...] = FULL_COLUMNS[:CPU_INDEX] + FULL_COLUMNS[CPU_INDEX + 1 :]

COLUMN_LAYOUTS: dict[str, tuple[str, ...]] = {
    "full": FULL_COLUMNS,
    "no_cpu": NO_CPU_COLUMNS,
}


def get_layouts() -> dict[str, tuple[str, ...]]:
    """Get the accepted header layouts, keyed by name."""
    return COLUMN_LAYOUTS.copy()
