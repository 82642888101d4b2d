"""Pytest configuration and shared fixtures.

This module registers custom markers and provides fake collaborators for
the gate and resolver tests.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from reportgate.adapters.cache import MemoryVersionCache
from reportgate.core.exceptions import CatalogUnavailableError
from reportgate.core.services import VersionResolver


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "cache: Version cache adapters")
    config.addinivalue_line("markers", "catalog: Plugin catalog adapter")
    config.addinivalue_line("markers", "settings: Settings, flags and configuration")
    config.addinivalue_line("markers", "cli: CLI tests")


class FakeClock:
    """Adjustable clock returning timezone-aware UTC datetimes."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 8, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


class FakeCatalog:
    """Catalog that returns a fixed version and counts lookups.

    Set ``error`` to make lookups raise, or ``version`` to "" to simulate a
    response without a version field.
    """

    def __init__(self, version: str = "9.2.0") -> None:
        self.version = version
        self.error: Exception | None = None
        self.calls: list[str] = []

    def fetch_version(self, package_id: str) -> str:
        self.calls.append(package_id)
        if self.error is not None:
            raise self.error
        return self.version

    def fail(self) -> None:
        self.error = CatalogUnavailableError("connection refused", package_id="woocommerce")


class FakeFlags:
    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.calls = 0

    def is_enabled(self, name: str) -> bool:
        self.calls += 1
        return self.enabled and name == "remote_logging"


class FakeSettings:
    def __init__(self, **options: object) -> None:
        self.options = options
        self.reads: list[str] = []

    def get_option(self, name: str, default: object = None) -> object:
        self.reads.append(name)
        return self.options.get(name, default)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def cache() -> MemoryVersionCache:
    return MemoryVersionCache()


@pytest.fixture
def resolver(
    catalog: FakeCatalog, cache: MemoryVersionCache, clock: FakeClock
) -> VersionResolver:
    return VersionResolver(catalog=catalog, cache=cache, clock=clock)


@pytest.fixture
def opted_in_settings() -> FakeSettings:
    """Settings that pass the opt-in and cohort checks."""
    return FakeSettings(
        woocommerce_allow_tracking="yes",
        woocommerce_remote_variant_assignment=5,
    )


@pytest.fixture
def make_settings() -> type[FakeSettings]:
    """Factory for settings with arbitrary raw option values."""
    return FakeSettings


@pytest.fixture
def make_flags() -> type[FakeFlags]:
    """Factory for feature flags with remote_logging on or off."""
    return FakeFlags
