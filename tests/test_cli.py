"""Tests for the modstatus command line."""

import json

import pytest
from conftest import FULL_ROW, build_page
from typer.testing import CliRunner

from modstatus.cli import app
from modstatus.selectors import FULL_COLUMNS

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each command from an empty directory so no local.env is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestParseCommand:
    def test_stdin_to_json(self, fixtures_dir):
        html = (fixtures_dir / "status-full.html").read_text()
        result = runner.invoke(app, ["parse"], input=html)
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data["workers"]) == 3
        assert data["workers"][0]["status"] == "BusyWrite"
        assert data["workers"][0]["access_counts"] == {"connection_scope": 0, "child_scope": 3, "slot_scope": 3}
        assert data["workers"][2]["process_id"] is None

    def test_pretty_printed(self, fixtures_dir):
        result = runner.invoke(app, ["parse", str(fixtures_dir / "status-no-cpu.html")])
        assert result.exit_code == 0
        assert result.stdout.startswith('{\n  "workers": [')
        assert json.loads(result.stdout)["workers"][1]["cpu_seconds"] == 0.0

    def test_output_file(self, fixtures_dir, isolated_cwd):
        out = isolated_cwd / "workers.json"
        result = runner.invoke(app, ["parse", str(fixtures_dir / "status-full.html"), "-o", str(out)])
        assert result.exit_code == 0
        assert len(json.loads(out.read_text())["workers"]) == 3

    def test_bad_row_exits_with_row_markup(self, fixtures_dir):
        result = runner.invoke(app, ["parse", str(fixtures_dir / "status-bad-row.html")])
        assert result.exit_code == 1
        assert "Error: invalid status code `Z`" in result.output
        assert "Row: <tr>" in result.output
        assert "GET /broken HTTP/1.1" in result.output
        assert '"workers"' not in result.output

    def test_invalid_headers(self):
        html = build_page([FULL_ROW], headers=["Srv", "Pid"])
        result = runner.invoke(app, ["parse"], input=html)
        assert result.exit_code == 1
        assert "Error: invalid headers" in result.output
        assert "Row:" not in result.output

    def test_strict_headers_flag(self):
        html = build_page([FULL_ROW], headers=FULL_COLUMNS[:3])
        assert runner.invoke(app, ["parse"], input=html).exit_code == 0
        result = runner.invoke(app, ["parse", "--strict-headers"], input=html)
        assert result.exit_code == 1

    def test_strict_headers_from_local_env(self, isolated_cwd, monkeypatch):
        # Registered with monkeypatch so the value load_env sets is undone
        monkeypatch.setenv("MODSTATUS_STRICT_HEADERS", "")
        monkeypatch.delenv("MODSTATUS_STRICT_HEADERS")
        (isolated_cwd / "local.env").write_text('# parser settings\nMODSTATUS_STRICT_HEADERS="true"\n')
        html = build_page([FULL_ROW], headers=FULL_COLUMNS[:3])
        result = runner.invoke(app, ["parse"], input=html)
        assert result.exit_code == 1
        assert "invalid headers" in result.output

    def test_missing_file(self, isolated_cwd):
        result = runner.invoke(app, ["parse", str(isolated_cwd / "nope.html")])
        assert result.exit_code == 1
        assert "Failed to read" in result.output

    def test_invalid_config(self, monkeypatch):
        monkeypatch.setenv("MODSTATUS_LOG_LEVEL", "LOUD")
        result = runner.invoke(app, ["parse"], input=build_page([]))
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_verbose_logs_to_stderr(self, fixtures_dir):
        result = runner.invoke(app, ["parse", "-v", str(fixtures_dir / "status-full.html")])
        assert result.exit_code == 0
        assert "Decoded 3 worker rows" in result.output


class TestSummaryCommand:
    def test_table(self, fixtures_dir):
        result = runner.invoke(app, ["summary", str(fixtures_dir / "status-full.html")])
        assert result.exit_code == 0
        assert "Workers (3)" in result.output
        assert "BusyWrite" in result.output
        assert "Ready: 1" in result.output
        assert "Dead: 1" in result.output

    def test_error(self, fixtures_dir):
        result = runner.invoke(app, ["summary", str(fixtures_dir / "status-bad-row.html")])
        assert result.exit_code == 1
        assert "invalid status code" in result.output
