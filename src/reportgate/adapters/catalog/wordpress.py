"""WordPress.org plugin catalog adapter using httpx."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Self

import httpx

from reportgate.core.exceptions import (
    CatalogError,
    CatalogResponseError,
    CatalogUnavailableError,
    PackageNotFoundError,
)


logger = logging.getLogger(__name__)

DEFAULT_CATALOG_URL = "https://api.wordpress.org/plugins/info/1.2/"
DEFAULT_TIMEOUT = 5.0


class WordPressPluginCatalog:
    """Catalog adapter for the WordPress.org plugin information API.

    Implements CatalogLookupPort. Every lookup is a single GET with a
    bounded timeout; no retries.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_CATALOG_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the catalog.

        Args:
            base_url: Plugin information endpoint.
            timeout: Seconds allowed for connect, read and write.
            client: Optional httpx client. If not provided, one is created
                and closed by close().
        """
        self.base_url = base_url
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def fetch_version(self, package_id: str) -> str:
        """Fetch the latest published version of a plugin.

        Args:
            package_id: Plugin slug (e.g., "woocommerce").

        Returns:
            The stripped "version" field, or "" if the catalog omits it.

        Raises:
            CatalogUnavailableError: On transport errors, an invalid URL or
                non-2xx responses.
            CatalogResponseError: If the body is not a JSON object.
            PackageNotFoundError: If the catalog reports an error for the slug.
        """
        params = {
            "action": "plugin_information",
            "request[slug]": package_id,
            "request[fields][sections]": "0",
        }
        try:
            response = self._client.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise self._translate_http_error(e, package_id) from e

        try:
            data = response.json()
        except ValueError as e:
            raise CatalogResponseError(
                f"Catalog response for '{package_id}' is not JSON",
                package_id=package_id,
                cause=e,
            ) from e

        if not isinstance(data, dict):
            raise CatalogResponseError(
                f"Catalog response for '{package_id}' is not an object",
                package_id=package_id,
            )
        if data.get("error"):
            raise PackageNotFoundError(
                f"Catalog has no package '{package_id}': {data['error']}",
                package_id=package_id,
            )

        version = data.get("version")
        if not isinstance(version, str):
            logger.debug("Catalog response for %r has no version field", package_id)
            return ""
        return version.strip()

    def _translate_http_error(
        self, e: httpx.HTTPError | httpx.InvalidURL, package_id: str
    ) -> CatalogError:
        """Translate an httpx error into a domain exception."""
        if isinstance(e, httpx.InvalidURL):
            return CatalogUnavailableError(
                f"Catalog URL {self.base_url!r} is invalid: {e}",
                package_id=package_id,
                cause=e,
            )
        if isinstance(e, httpx.HTTPStatusError):
            status = e.response.status_code
            if status == 404:
                return PackageNotFoundError(
                    f"Catalog has no package '{package_id}'",
                    package_id=package_id,
                    cause=e,
                )
            return CatalogUnavailableError(
                f"Catalog returned HTTP {status} for '{package_id}'",
                package_id=package_id,
                cause=e,
            )
        return CatalogUnavailableError(
            f"Catalog request for '{package_id}' failed: {e}",
            package_id=package_id,
            cause=e,
        )

    def close(self) -> None:
        """Close the underlying client if this adapter created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
