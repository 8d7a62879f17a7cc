"""Pytest fixtures for mod_status parser tests."""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from modstatus.selectors import FULL_COLUMNS

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# One well-formed row per layout, in column order
FULL_ROW = [
    "3-7", "1234", "10/5/2", "W", "0.52", "4", "12", "345",
    "1.5", "0.25", "3.75", "203.0.113.9", "http/1.1", "www.example.com:443", "GET /api/items HTTP/1.1",
]
NO_CPU_ROW = FULL_ROW[:4] + FULL_ROW[5:]


def build_row(cells: list[str], tag: str = "td") -> str:
    """Render cells as a table row."""
    return "<tr>" + "".join(f"<{tag}>{c}</{tag}>" for c in cells) + "</tr>"


def build_page(rows: list[list[str]], headers: list[str] | tuple[str, ...] = FULL_COLUMNS) -> str:
    """Render a minimal status page around a scoreboard table."""
    body = build_row(list(headers), tag="th") + "".join(build_row(r) for r in rows)
    return f'<html><body><h1>Apache Status</h1><table border="0">{body}</table></body></html>'


def parse_row(cells: list[str], tag: str = "td"):
    """Parse a single row and return its <tr> tag."""
    soup = BeautifulSoup(f"<table>{build_row(cells, tag)}</table>", "lxml")
    return soup.find("tr")


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def load_fixture():
    """Factory fixture to load HTML fixtures as BeautifulSoup."""

    def _load(name: str) -> BeautifulSoup:
        path = FIXTURES_DIR / name
        with open(path) as f:
            return BeautifulSoup(f.read(), "lxml")

    return _load


@pytest.fixture
def full_html(load_fixture):
    """Load status page with the CPU column."""
    return load_fixture("status-full.html")


@pytest.fixture
def no_cpu_html(load_fixture):
    """Load status page without the CPU column."""
    return load_fixture("status-no-cpu.html")


@pytest.fixture
def bad_row_html(load_fixture):
    """Load status page whose second data row has an unknown status."""
    return load_fixture("status-bad-row.html")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MODSTATUS_* variables from the outer environment out of tests."""
    for key in ("MODSTATUS_HTML_PARSER", "MODSTATUS_STRICT_HEADERS", "MODSTATUS_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
