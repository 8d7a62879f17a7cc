"""Decoding of the mod_status scoreboard table into worker records."""

import logging
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

from ..config import ParserConfig
from ..exceptions import InvalidCellCountError, InvalidHeadersError, WorkerScoreParseError
from ..models import ServerStatus, WorkerScore
from ..selectors import CPU_INDEX, FULL_COLUMNS, ROW_CELLS, SCOREBOARD_ROWS, SCOREBOARD_TABLE, get_layouts
from .fields import parse_acc, parse_float, parse_pid, parse_srv, parse_uint, parse_worker_status

logger = logging.getLogger(__name__)


def locate_rows(soup: BeautifulSoup | Tag) -> Iterator[Tag]:
    """Yield the rows of the scoreboard table in document order.

    Rows of every ``<table border="0">`` are yielded. mod_status prints only
    one such table; should a page contain several, their rows run together
    and the first one is treated as the header.
    """
    tables = soup.select(SCOREBOARD_TABLE)
    if len(tables) > 1:
        logger.debug("Found %d border-less tables, rows will be concatenated", len(tables))

    yield from soup.css.iselect(SCOREBOARD_ROWS)


def cell_texts(row: Tag) -> list[str]:
    """Trimmed text of each cell of a table row."""
    return [cell.get_text().strip() for cell in row.find_all(ROW_CELLS, recursive=False)]


def validate_headers(row: Tag, strict: bool = False) -> str:
    """Validate the header row against the known column layouts.

    In the default mode headers are compared pairwise, so only the cells
    present are checked: a truncated header matching a layout's prefix
    passes. With ``strict`` the header must equal a layout exactly.

    Args:
        row: Header ``<tr>`` of the scoreboard table
        strict: Require an exact match instead of a pairwise one

    Returns:
        Name of the first matching layout ("full" or "no_cpu")

    Raises:
        InvalidHeadersError: If no layout matches
    """
    headers = cell_texts(row)

    for name, layout in get_layouts().items():
        if strict:
            matches = tuple(headers) == layout
        else:
            matches = all(actual == expected for actual, expected in zip(headers, layout))
        if matches:
            return name

    raise InvalidHeadersError(headers)


def decode_cells(cells: list[str], row_html: str | None = None) -> WorkerScore:
    """Decode the trimmed cell texts of one data row.

    Args:
        cells: 15 cell texts, or 14 when the "CPU" column is absent
        row_html: Row markup attached to errors for diagnostics

    Raises:
        WorkerScoreParseError: On the first malformed field
    """
    cols = list(cells)
    if len(cols) == len(FULL_COLUMNS) - 1:
        # Server built without HAVE_TIMES: keep the later columns at fixed offsets
        cols.insert(CPU_INDEX, "0")
    elif len(cols) != len(FULL_COLUMNS):
        raise InvalidCellCountError(row_html if row_html is not None else repr(cells))

    try:
        return WorkerScore(
            generation=parse_srv(cols[0])[1],
            pid=parse_pid(cols[1]),
            access_counts=parse_acc(cols[2]),
            status=parse_worker_status(cols[3]),  # "M" column (mode of operation)
            cpu_seconds=parse_float(cols[4]),
            seconds_since_last_use=parse_uint(cols[5]),  # "SS"
            request_time_ms=parse_uint(cols[6]),  # "Req"
            duration_ms=parse_uint(cols[7]),  # "Dur"
            conn_kib=parse_float(cols[8]),
            child_mib=parse_float(cols[9]),
            slot_mib=parse_float(cols[10]),
            client=cols[11],
            protocol=cols[12],
            vhost=cols[13],
            request=cols[14],
        )
    except WorkerScoreParseError as e:
        if e.row_html is None:
            e.row_html = row_html
        raise


def decode_row(row: Tag) -> WorkerScore:
    """Decode one scoreboard ``<tr>`` into a WorkerScore.

    Errors raised from here carry the row markup in ``row_html``.
    """
    return decode_cells(cell_texts(row), row_html=str(row))


def parse_worker_scores(soup: BeautifulSoup | Tag, strict_headers: bool = False) -> list[WorkerScore]:
    """Find the scoreboard table and convert it to a list of WorkerScores.

    The header is validated before any row is decoded. Decoding stops at the
    first malformed row; no partial result is returned.

    Args:
        soup: Parsed status page
        strict_headers: Require the header to match a layout exactly

    Returns:
        Worker records in table row order

    Raises:
        WorkerScoreParseError: On an invalid header or the first bad row
    """
    scores: list[WorkerScore] = []

    for i, row in enumerate(locate_rows(soup)):
        if i == 0:
            layout = validate_headers(row, strict=strict_headers)
            logger.debug("Scoreboard header matches %s layout", layout)
            continue
        scores.append(decode_row(row))

    logger.debug("Decoded %d worker rows", len(scores))
    return scores


def parse_server_status(html: str, config: ParserConfig | None = None) -> ServerStatus:
    """Parse a complete mod_status page into a ServerStatus.

    Args:
        html: Full text of the status page
        config: ParserConfig instance. If None, loads from environment.
    """
    config = config or ParserConfig.from_env()
    soup = BeautifulSoup(html, config.html_parser)
    return ServerStatus(workers=parse_worker_scores(soup, strict_headers=config.strict_headers))
