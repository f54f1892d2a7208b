from __future__ import annotations

import subprocess
from typing import Any, Dict, List

import typer

from config.settings import configure_logging
from core.timing.stopwatch import Stopwatch

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def _setup() -> None:
    """Stopwatch utilities."""

    configure_logging()


@app.command()
def now() -> None:
    """Print the current clock reading in milliseconds."""

    typer.echo(Stopwatch.get_timestamp_milliseconds())


@app.command()
def measure(
    command: List[str] = typer.Argument(..., help="Command to run, e.g. stopwatch measure -- sleep 1"),
    seconds: bool = typer.Option(False, "--seconds", "-s", help="Report seconds instead of milliseconds"),
) -> None:
    """Run a command and report how long it took."""

    result: Dict[str, Any] = {}

    def _run() -> None:
        result["proc"] = subprocess.run(command)

    try:
        span = Stopwatch.measure(_run)
    except FileNotFoundError as exc:
        typer.echo(f"[stopwatch] {exc}", err=True)
        raise typer.Exit(code=127)

    if seconds:
        typer.echo(f"elapsed: {span.total_seconds} s")
    else:
        typer.echo(f"elapsed: {span.total_milliseconds} ms")
    raise typer.Exit(code=result["proc"].returncode)


if __name__ == "__main__":
    app()
