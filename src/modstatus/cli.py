"""CLI for the mod_status scoreboard parser."""

import json
import logging
import os
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import ParserConfig
from .exceptions import WorkerScoreParseError
from .models import ServerStatus, WorkerStatus
from .parsers import parse_server_status

app = typer.Typer(help="Apache mod_status scoreboard parser")
console = Console()
err_console = Console(stderr=True)

STATUS_STYLES = {
    WorkerStatus.READY: "green",
    WorkerStatus.BUSY_WRITE: "yellow",
    WorkerStatus.BUSY_READ: "yellow",
    WorkerStatus.BUSY_KEEPALIVE: "cyan",
    WorkerStatus.GRACEFUL: "magenta",
    WorkerStatus.DEAD: "dim",
}


def load_env():
    """Load environment from local.env if present."""
    for parent in [Path.cwd()] + list(Path.cwd().parents)[:3]:
        env_file = parent / "local.env"
        if env_file.exists():
            with open(env_file) as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#") and "=" in line:
                        key, _, value = line.partition("=")
                        value = value.strip().strip('"').strip("'")
                        os.environ.setdefault(key.strip(), value)
            break


def setup_logging(level: int) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def get_config(strict_headers: bool, verbose: bool) -> ParserConfig:
    """Load configuration, applying command-line overrides."""
    load_env()
    config = ParserConfig.from_env()
    if strict_headers:
        config.strict_headers = True
    if verbose:
        config.log_level = "DEBUG"

    problems = config.validate()
    if problems:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(', '.join(problems))}")
        raise typer.Exit(1)

    setup_logging(config.log_level_number)
    return config


def read_input(file: Path | None) -> str:
    """Read the whole status page from a file or stdin."""
    if file is None:
        return sys.stdin.read()
    try:
        return file.read_text()
    except OSError as e:
        err_console.print(f"[red]Failed to read {escape(str(file))}:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def load_status(file: Path | None, config: ParserConfig) -> ServerStatus:
    """Parse the page, reporting errors on stderr and exiting non-zero."""
    html = read_input(file)
    try:
        return parse_server_status(html, config)
    except WorkerScoreParseError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        if e.row_html:
            err_console.print(f"Row: {escape(e.row_html)}", soft_wrap=True, highlight=False)
        raise typer.Exit(1)


@app.command()
def parse(
    file: Path = typer.Argument(None, help="Status page HTML file (default: stdin)"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file"),
    strict_headers: bool = typer.Option(False, "--strict-headers", help="Require an exact header match"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
):
    """Convert a server-status page to JSON.

    Examples:

        curl -s http://localhost/server-status | modstatus parse

        modstatus parse status.html -o workers.json
    """
    config = get_config(strict_headers, verbose)
    status = load_status(file, config)

    json_str = json.dumps(status.to_dict(), indent=2)

    if output:
        output.write_text(json_str + "\n")
        err_console.print(f"[green]Exported {len(status.workers)} workers to {escape(str(output))}[/green]")
    else:
        typer.echo(json_str)


@app.command()
def summary(
    file: Path = typer.Argument(None, help="Status page HTML file (default: stdin)"),
    strict_headers: bool = typer.Option(False, "--strict-headers", help="Require an exact header match"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
):
    """Show workers of a server-status page as a table."""
    config = get_config(strict_headers, verbose)
    status = load_status(file, config)

    console.print(f"\n[bold]Workers ({len(status.workers)})[/bold]\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("PID", justify="right")
    table.add_column("Gen", justify="right")
    table.add_column("Status", no_wrap=True, min_width=13)
    table.add_column("Acc")
    table.add_column("SS", justify="right")
    table.add_column("Client")
    table.add_column("VHost")
    table.add_column("Request")

    for i, w in enumerate(status.workers):
        style = STATUS_STYLES.get(w.status, "")
        label = w.status.label
        acc = w.access_counts
        table.add_row(
            str(i),
            "-" if w.pid is None else str(w.pid),
            str(w.generation),
            f"[{style}]{label}[/{style}]" if style else label,
            f"{acc.connection}/{acc.child}/{acc.slot}",
            str(w.seconds_since_last_use),
            escape(w.client),
            escape(w.vhost),
            escape(w.request),
        )

    console.print(table)

    counts = status.status_counts()
    if counts:
        console.print("  ".join(f"{s.label}: {n}" for s, n in counts.items()))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
