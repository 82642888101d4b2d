"""CLI for reportgate."""

# Import commands to register them with the app
from reportgate.cli.commands import check as _check_module  # noqa: F401
from reportgate.cli.main import app, main


__all__ = ["app", "main"]
