"""Core domain models for reportgate.

These models are pure Python dataclasses with no I/O dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Self


if TYPE_CHECKING:
    from datetime import datetime, timedelta


@dataclass(frozen=True, slots=True)
class VersionInfo:
    """A "latest version" value as fetched from the plugin catalog.

    Attributes:
        value: The published version string (e.g., "9.2.0").
        fetched_at: When the value was fetched (timezone-aware).
        source: Package identifier the value was fetched for.

    Example:
        >>> from datetime import UTC, datetime, timedelta
        >>> info = VersionInfo("9.2.0", fetched_at=datetime(2024, 8, 1, tzinfo=UTC))
        >>> info.is_expired(datetime(2024, 8, 2, tzinfo=UTC), timedelta(days=1))
        True
    """

    value: str
    fetched_at: datetime
    source: str = ""

    def __post_init__(self) -> None:
        """Validate fields after initialization."""
        if not self.value:
            raise ValueError("VersionInfo value cannot be empty")

    def age(self, now: datetime) -> timedelta:
        """Return how long ago the value was fetched."""
        return now - self.fetched_at

    def is_expired(self, now: datetime, ttl: timedelta) -> bool:
        """Check whether the entry has outlived its TTL.

        An entry is valid only while ``now - fetched_at < ttl``.

        Args:
            now: The current time.
            ttl: Maximum age for the entry to count as valid.

        Returns:
            True if the entry must not be reused.
        """
        return self.age(now) >= ttl


class Check(Enum):
    """The eligibility predicates, in evaluation order."""

    FEATURE_ENABLED = "feature_enabled"
    TRACKING_OPTED_IN = "tracking_opted_in"
    COHORT_ELIGIBLE = "cohort_eligible"
    VERSION_CURRENT = "version_current"


@dataclass(frozen=True, slots=True)
class Decision:
    """Outcome of an eligibility evaluation.

    Attributes:
        allowed: True only if every check passed.
        failed_check: The first check that failed, or None when allowed.
        detail: Human-readable explanation of the failure.
    """

    allowed: bool
    failed_check: Check | None = None
    detail: str = ""

    def __post_init__(self) -> None:
        """Validate that denials name the failing check."""
        if self.allowed and self.failed_check is not None:
            raise ValueError("An allowed decision cannot have a failed check")
        if not self.allowed and self.failed_check is None:
            raise ValueError("A denied decision must name the failed check")

    def __bool__(self) -> bool:
        return self.allowed

    @classmethod
    def allow(cls) -> Self:
        """Return a decision with every check passed."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, check: Check, detail: str = "") -> Self:
        """Return a decision denied at ``check``."""
        return cls(allowed=False, failed_check=check, detail=detail)

    def passed(self, check: Check) -> bool | None:
        """Report how a single check fared.

        Returns:
            True if the check passed, False if it is the failed check, or
            None if evaluation stopped before reaching it.
        """
        if self.allowed:
            return True
        if self.failed_check is None:
            return None
        order = list(Check)
        position = order.index(check)
        failed_at = order.index(self.failed_check)
        if position < failed_at:
            return True
        if position == failed_at:
            return False
        return None
