from __future__ import annotations

"""Optimistic Command Line Interface."""

from pathlib import Path
from typing import List, Optional

import typer
from rich import box
from rich.markup import escape
from rich.table import Table

from optimistic.combiners import _REGISTRY as COMBINER_REGISTRY  # Accessing internal for simplicity
from optimistic.errors import OptimisticError
from optimistic.scenario import ReplayRecord, Scenario
from optimistic.utils import logging as olog
from optimistic.utils.display import STYLE, SYMBOLS, format_payload
from optimistic.yaml_loader import load_scenario

app = typer.Typer(
    name="optimistic",
    help="CLI for optimistic: replay and inspect optimistic-update scenarios.",
    add_completion=False,
)

console = olog.console


def _load_or_exit(scenario_file: Path) -> Scenario:
    try:
        return load_scenario(scenario_file)
    except OptimisticError as e:
        console.print(f"{SYMBOLS['error']}[bold red]{escape(str(e))}[/]")
        raise typer.Exit(code=1)


def _records_table(title: str, records: List[ReplayRecord]) -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Op", style=STYLE["op"], no_wrap=True)
    table.add_column("State")
    table.add_column("Value")
    table.add_column("Fallback", style=STYLE["dim"])
    for rec in records:
        pending = rec.state == "pending"
        table.add_row(
            str(rec.index),
            rec.op,
            f"[{STYLE[rec.state]}]{rec.state}[/]",
            escape(format_payload(rec.value)),
            escape(format_payload(rec.fallback)) if pending else "-",
        )
    return table


@app.command()
def replay(
    scenario_file: Path = typer.Argument(..., help="YAML scenario to replay.", exists=True, file_okay=True, dir_okay=False, readable=True),
    log_level: Optional[olog.LogLevel] = typer.Option(None, "--log-level", "-l", case_sensitive=False, help="Log level (default: $OPTIMISTIC_LOG_LEVEL or warning)."),
):
    """Replay a scenario and print the container state after each step."""
    olog.setup(log_level.value if log_level else None)
    scenario = _load_or_exit(scenario_file)
    try:
        records = scenario.replay()
    except OptimisticError as e:
        console.print(f"{SYMBOLS['error']}[bold red]{escape(str(e))}[/]")
        raise typer.Exit(code=1)
    console.print(_records_table(scenario.name, records))


@app.command()
def check(
    scenario_file: Path = typer.Argument(..., help="YAML scenario to validate.", exists=True, file_okay=True, dir_okay=False, readable=True),
):
    """Validate a scenario file without replaying it."""
    scenario = _load_or_exit(scenario_file)
    console.print(f"{SYMBOLS['success']}'{scenario.name}' is valid ({len(scenario.steps)} steps)")


@app.command()
def combiners():
    """List registered combiners."""
    if not COMBINER_REGISTRY:
        console.print("[yellow]No combiners registered.[/]")
        return
    table = Table(title="Registered Combiners", box=box.ROUNDED)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Callable", style="magenta")
    for name, fn in sorted(COMBINER_REGISTRY.items()):
        table.add_row(name, f"{fn.__module__}.{fn.__qualname__}")
    console.print(table)


if __name__ == "__main__":
    app()
