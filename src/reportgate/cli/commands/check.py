"""Check command for CLI."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from reportgate.cli.formatting import _check_status, _format_status_with_color
from reportgate.cli.main import _configure_logging, app, load_gate
from reportgate.core.models import Check


@app.command()
def check(
    current_version: str = typer.Option(
        ...,
        "--current-version",
        "-c",
        envvar="REPORTGATE_CURRENT_VERSION",
        help="Installed version of the host software.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
) -> None:
    """Show each eligibility check; exit 0 if reporting is allowed."""
    _configure_logging(verbose)
    with load_gate(current_version) as gate:
        decision = gate.evaluate()

    table = Table()
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Detail")
    for item in Check:
        status = _check_status(decision, item)
        detail = decision.detail if item is decision.failed_check else ""
        table.add_row(item.value, _format_status_with_color(status), detail)

    console = Console(force_terminal=True)
    console.print(table)

    if decision.allowed:
        typer.echo("Remote logging allowed.")
        return
    typer.echo("Remote logging denied.")
    raise typer.Exit(1)
