"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from rich.text import Text


if TYPE_CHECKING:
    from reportgate.core.models import Check, Decision


def status_to_color(status: str) -> str:
    """Map check status string to color name.

    Args:
        status: Status string ("pass", "fail", or "skipped")

    Returns:
        Color name string, or empty string for unknown statuses.
    """
    color_map = {
        "pass": "green",
        "fail": "red",
        "skipped": "yellow",
    }
    return color_map.get(status, "")


def _check_status(decision: Decision, check: Check) -> str:
    """Return "pass", "fail" or "skipped" for one check of a decision."""
    passed = decision.passed(check)
    if passed is None:
        return "skipped"
    return "pass" if passed else "fail"


def _format_status_with_color(status: str) -> Text:
    """Format status string with color coding."""
    color = status_to_color(status)
    return Text(status, style=color) if color else Text(status)


def _format_age(age: timedelta) -> str:
    """Format an age as hours and minutes (e.g., "3h 05m")."""
    total_minutes = max(int(age.total_seconds() // 60), 0)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes:02d}m"


def _now() -> datetime:
    return datetime.now(UTC)
