"""CLI commands for reportgate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import typer

from reportgate.cli.formatting import _format_age, _now
from reportgate.core.exceptions import ReportgateError


if TYPE_CHECKING:
    from reportgate import EligibilityGate


app = typer.Typer(
    name="reportgate",
    help="Decide whether diagnostic error reports may be sent remotely.",
    no_args_is_help=True,
)
cache_app = typer.Typer(help="Inspect or clear the cached latest version.")
app.add_typer(cache_app, name="cache")


def _configure_logging(verbose: bool) -> None:
    """Send library logs to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def load_gate(current_version: str = "") -> EligibilityGate:
    """Build a gate from the environment for CLI commands.

    Args:
        current_version: Installed version to check against the catalog.

    Returns:
        EligibilityGate wired to the default adapters.

    Raises:
        typer.Exit: If the configuration is invalid.
    """
    from reportgate import EligibilityGate, GateConfig

    try:
        config = GateConfig.from_env()
        return EligibilityGate.from_config(config, current_version=current_version)
    except ReportgateError as e:
        typer.echo(f"Error: {e}", err=True)
        if e.recovery_hint:
            typer.echo(f"Hint: {e.recovery_hint}", err=True)
        raise typer.Exit(2) from None


@app.command()
def latest(
    refresh: bool = typer.Option(
        False,
        "--refresh",
        "-r",
        help="Query the catalog even if a fresh value is cached.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
) -> None:
    """Print the latest published version."""
    _configure_logging(verbose)
    with load_gate() as gate:
        resolver = gate.resolver
        version = resolver.refresh() if refresh else resolver.latest_version()
    if version is None:
        typer.echo("Latest version unavailable.", err=True)
        raise typer.Exit(1)
    typer.echo(version)


@cache_app.command("show")
def cache_show() -> None:
    """Show the cached latest version and its age."""
    with load_gate() as gate:
        resolver = gate.resolver
        entry = resolver.cached()
    if entry is None:
        typer.echo("No cached version.")
        return

    now = _now()
    state = "expired" if entry.is_expired(now, resolver.ttl) else "fresh"
    typer.echo(f"Package: {resolver.package_id}")
    typer.echo(f"  Version: {entry.value}")
    typer.echo(f"  Fetched at: {entry.fetched_at.isoformat()}")
    typer.echo(f"  Age: {_format_age(entry.age(now))}")
    typer.echo(f"  Status: {state}")


@cache_app.command("clear")
def cache_clear() -> None:
    """Remove the cached latest version."""
    with load_gate() as gate:
        resolver = gate.resolver
        try:
            resolver.clear()
        except ReportgateError as e:
            typer.echo(f"Error: {e}", err=True)
            if e.recovery_hint:
                typer.echo(f"Hint: {e.recovery_hint}", err=True)
            raise typer.Exit(1) from None
    typer.echo(f"Cleared cached version for {resolver.package_id}.")


def main() -> None:
    """Entry point for the CLI."""
    app()
