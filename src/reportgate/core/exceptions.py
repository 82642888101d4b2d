"""Domain exceptions for reportgate.

All library errors inherit from ReportgateError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

None of these cross EligibilityGate.is_allowed(); the gate fails closed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class ReportgateError(Exception):
    """Base class for all reportgate exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class CatalogError(ReportgateError):
    """Base class for plugin catalog lookup errors.

    Attributes:
        package_id: The package identifier that was looked up.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        package_id: str,
        cause: Exception | None = None,
    ) -> None:
        self.package_id = package_id
        self.cause = cause
        super().__init__(message)


class CatalogUnavailableError(CatalogError):
    """Raised when the catalog cannot be reached or answers with an HTTP error."""

    @property
    def recovery_hint(self) -> str:
        """Suggest checking connectivity."""
        return "Check network access to the catalog URL (REPORTGATE_CATALOG_URL)"


class CatalogResponseError(CatalogError):
    """Raised when the catalog response body cannot be understood."""

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the endpoint."""
        return "Verify REPORTGATE_CATALOG_URL points at a plugin information API"


class PackageNotFoundError(CatalogError):
    """Raised when the catalog reports that the package does not exist."""

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the package id."""
        return f"Verify the package id exists in the catalog: {self.package_id}"


class CacheError(ReportgateError):
    """Base class for cache-related errors."""

    pass


class CacheCorruptError(CacheError):
    """Raised when a cached version entry is corrupt or unreadable.

    Attributes:
        key: The cache key for the corrupt entry.
        path: The path to the corrupt file.
    """

    def __init__(
        self,
        message: str,
        key: str,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.key = key
        self.path = path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest deleting the corrupt cache entry."""
        return f"Run 'reportgate cache clear' or delete {self.path.name}"


class ConfigurationError(ReportgateError):
    """Raised for configuration problems (malformed environment values)."""

    pass
