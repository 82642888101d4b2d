"""Unit tests for domain exception hierarchy."""

from pathlib import Path

import pytest

from reportgate.core.exceptions import (
    CacheCorruptError,
    CacheError,
    CatalogError,
    CatalogResponseError,
    CatalogUnavailableError,
    ConfigurationError,
    PackageNotFoundError,
    ReportgateError,
)


@pytest.mark.core
class TestReportgateError:
    """Tests for base exception class."""

    def test_is_exception_subclass(self) -> None:
        assert issubclass(ReportgateError, Exception)

    def test_recovery_hint_returns_none_by_default(self) -> None:
        err = ReportgateError("something went wrong")
        assert err.recovery_hint is None

    @pytest.mark.parametrize(
        "cls",
        [CatalogError, CacheError, CacheCorruptError, ConfigurationError],
    )
    def test_subclasses_share_base(self, cls: type[Exception]) -> None:
        assert issubclass(cls, ReportgateError)


@pytest.mark.core
class TestCatalogErrors:
    """Tests for catalog lookup exceptions."""

    @pytest.mark.parametrize(
        "cls", [CatalogUnavailableError, CatalogResponseError, PackageNotFoundError]
    )
    def test_stores_package_and_cause(self, cls: type[CatalogError]) -> None:
        cause = ValueError("bad body")
        err = cls("lookup failed", package_id="woocommerce", cause=cause)

        assert isinstance(err, CatalogError)
        assert err.package_id == "woocommerce"
        assert err.cause is cause
        assert str(err) == "lookup failed"
        assert err.recovery_hint

    def test_package_not_found_hint_names_package(self) -> None:
        err = PackageNotFoundError("missing", package_id="woocomerce")
        assert "woocomerce" in err.recovery_hint


@pytest.mark.core
class TestCacheCorruptError:
    """Tests for CacheCorruptError."""

    def test_stores_key_and_path(self, tmp_path: Path) -> None:
        path = tmp_path / "latest_woocommerce_version.json"
        err = CacheCorruptError("corrupt", key="latest_woocommerce_version", path=path)

        assert err.key == "latest_woocommerce_version"
        assert err.path == path
        assert err.cause is None

    def test_recovery_hint_suggests_clearing(self, tmp_path: Path) -> None:
        err = CacheCorruptError("corrupt", key="k", path=tmp_path / "k.json")

        assert "reportgate cache clear" in err.recovery_hint
        assert "k.json" in err.recovery_hint
