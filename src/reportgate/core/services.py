"""Core domain services for reportgate."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from reportgate.core.exceptions import CacheError, CatalogError
from reportgate.core.models import Check, Decision, VersionInfo
from reportgate.core.ports import (
    CatalogLookupPort,
    Clock,
    FeatureFlagsPort,
    SettingsPort,
    VersionCachePort,
)
from reportgate.core.versions import is_at_least


if TYPE_CHECKING:
    from types import TracebackType

    from reportgate.adapters.catalog import WordPressPluginCatalog
    from reportgate.config import GateConfig


logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_ID = "woocommerce"
DEFAULT_CACHE_TTL = timedelta(days=1)

REMOTE_LOGGING_FEATURE = "remote_logging"
TRACKING_OPTION = "woocommerce_allow_tracking"
COHORT_OPTION = "woocommerce_remote_variant_assignment"

# Assignments are drawn from [0, 120); 0..12 inclusive is roughly 10%.
COHORT_RANGE = 120
COHORT_THRESHOLD = 12


def _utc_now() -> datetime:
    return datetime.now(UTC)


class VersionResolver:
    """Answers "what is the latest published version", caching the answer.

    A cached value is reused while it is younger than the TTL. Once expired
    it is treated as absent: a failed refresh returns None rather than the
    stale value, and leaves the stale entry in place.
    """

    def __init__(
        self,
        catalog: CatalogLookupPort,
        cache: VersionCachePort,
        package_id: str = DEFAULT_PACKAGE_ID,
        ttl: timedelta = DEFAULT_CACHE_TTL,
        clock: Clock | None = None,
    ) -> None:
        if ttl <= timedelta(0):
            raise ValueError("ttl must be positive")
        self._catalog = catalog
        self._cache = cache
        self._package_id = package_id
        self._ttl = ttl
        self._clock = clock or _utc_now

    @property
    def package_id(self) -> str:
        """Catalog identifier of the package being tracked."""
        return self._package_id

    @property
    def ttl(self) -> timedelta:
        """Maximum age of a reusable cached value."""
        return self._ttl

    @property
    def cache_key(self) -> str:
        """Key under which the latest version is cached."""
        return f"latest_{self._package_id}_version"

    def cached(self) -> VersionInfo | None:
        """Return the stored entry without fetching, expired or not.

        A corrupt entry is reported as absent.
        """
        try:
            return self._cache.get(self.cache_key)
        except CacheError as e:
            logger.warning("Ignoring unreadable cache entry %r: %s", self.cache_key, e)
            return None

    def latest_version(self) -> str | None:
        """Return the latest published version, or None if it is unknown.

        Performs at most one catalog request per call, and none while a
        cached value is within its TTL.
        """
        entry = self.cached()
        if entry is not None and not entry.is_expired(self._clock(), self._ttl):
            logger.debug("Cache hit for %r: %s", self.cache_key, entry.value)
            return entry.value

        logger.debug("Cache miss for %r", self.cache_key)
        return self._fetch()

    def refresh(self) -> str | None:
        """Fetch from the catalog regardless of the cache state."""
        return self._fetch()

    def clear(self) -> None:
        """Drop the cached entry so the next lookup fetches."""
        self._cache.invalidate(self.cache_key)

    def _fetch(self) -> str | None:
        try:
            value = self._catalog.fetch_version(self._package_id)
        except CatalogError as e:
            logger.warning("Latest version lookup for %r failed: %s", self._package_id, e)
            return None
        except Exception:
            logger.warning(
                "Latest version lookup for %r raised; treating as unavailable",
                self._package_id,
                exc_info=True,
            )
            return None

        value = value.strip() if isinstance(value, str) else ""
        if not value:
            logger.warning("Catalog returned no version for %r", self._package_id)
            return None

        info = VersionInfo(value=value, fetched_at=self._clock(), source=self._package_id)
        try:
            self._cache.put(self.cache_key, info)
        except CacheError as e:
            logger.warning("Could not cache latest version for %r: %s", self._package_id, e)
        else:
            logger.info("Cached latest %s version %s", self._package_id, value)
        return value


def _coerce_cohort(raw: object) -> int | None:
    """Read a cohort assignment, or None if the value is unusable."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        assignment = raw
    elif isinstance(raw, str) and raw.strip().isdecimal():
        assignment = int(raw.strip())
    else:
        return None
    if not 0 <= assignment < COHORT_RANGE:
        return None
    return assignment


class EligibilityGate:
    """Decides whether a diagnostic error report may be sent remotely.

    Checks run in a fixed order and stop at the first failure:

    1. the ``remote_logging`` feature is enabled
    2. the store has opted into tracking
    3. the store's cohort assignment is within the rollout
    4. the installed version is at least the latest published one

    Every check fails closed: a missing collaborator or one that raises
    counts as a failed check, so evaluation never raises.
    """

    def __init__(
        self,
        feature_flags: FeatureFlagsPort | None,
        settings: SettingsPort | None,
        resolver: VersionResolver,
        current_version: str | Callable[[], str],
    ) -> None:
        self._feature_flags = feature_flags
        self._settings = settings
        self._resolver = resolver
        self._current_version = current_version
        self._owned_catalog: "WordPressPluginCatalog | None" = None

    @classmethod
    def from_config(
        cls,
        config: "GateConfig",
        current_version: str | Callable[[], str],
        settings: SettingsPort | None = None,
        feature_flags: FeatureFlagsPort | None = None,
        cache: VersionCachePort | None = None,
    ) -> "EligibilityGate":
        """Create a gate wired to the default adapters.

        Args:
            config: Environment-derived configuration.
            current_version: Installed version, or a callable returning it.
            settings: Options store. Defaults to the configured options file.
            feature_flags: Feature lookup. Defaults to the configured features.
            cache: Version cache. Defaults to a file cache in the cache dir.

        Returns:
            EligibilityGate backed by the WordPress plugin catalog. The gate
            owns the catalog client; close it with close() or a with block.
        """
        from reportgate.adapters.cache import FileVersionCache
        from reportgate.adapters.catalog import WordPressPluginCatalog
        from reportgate.adapters.settings import OptionsSettings, StaticFeatureFlags

        if settings is None:
            settings = (
                OptionsSettings.from_file(config.options_file)
                if config.options_file is not None
                else OptionsSettings({})
            )
        if feature_flags is None:
            feature_flags = StaticFeatureFlags(config.features)
        if cache is None:
            cache = FileVersionCache(config.resolved_cache_dir())

        catalog = WordPressPluginCatalog(config.catalog_url, timeout=config.timeout)
        resolver = VersionResolver(
            catalog=catalog,
            cache=cache,
            package_id=config.package_id,
            ttl=config.cache_ttl,
        )
        gate = cls(
            feature_flags=feature_flags,
            settings=settings,
            resolver=resolver,
            current_version=current_version,
        )
        gate._owned_catalog = catalog
        return gate

    def close(self) -> None:
        """Close the catalog client created by from_config(), if any."""
        if self._owned_catalog is not None:
            self._owned_catalog.close()
            self._owned_catalog = None

    def __enter__(self) -> "EligibilityGate":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: "TracebackType | None",
    ) -> None:
        self.close()

    @property
    def resolver(self) -> VersionResolver:
        """The resolver used for the version-currency check."""
        return self._resolver

    def current_version(self) -> str:
        """Return the installed version."""
        if callable(self._current_version):
            return self._current_version()
        return self._current_version

    def is_allowed(self) -> bool:
        """Return True only if remote error reporting is allowed."""
        return self.evaluate().allowed

    def evaluate(self) -> Decision:
        """Run the checks in order and report the first failure, if any."""
        checks: list[tuple[Check, Callable[[], tuple[bool, str]]]] = [
            (Check.FEATURE_ENABLED, self._feature_enabled),
            (Check.TRACKING_OPTED_IN, self._tracking_opted_in),
            (Check.COHORT_ELIGIBLE, self._cohort_eligible),
            (Check.VERSION_CURRENT, self._version_current),
        ]
        for check, predicate in checks:
            try:
                passed, detail = predicate()
            except Exception as e:
                logger.warning("Check %s raised; denying", check.value, exc_info=True)
                return Decision.deny(check, f"{type(e).__name__}: {e}")
            logger.debug("Check %s: %s (%s)", check.value, passed, detail)
            if not passed:
                return Decision.deny(check, detail)
        return Decision.allow()

    def _feature_enabled(self) -> tuple[bool, str]:
        if self._feature_flags is None:
            return False, "feature flags unavailable"
        if not self._feature_flags.is_enabled(REMOTE_LOGGING_FEATURE):
            return False, f"feature '{REMOTE_LOGGING_FEATURE}' is disabled"
        return True, f"feature '{REMOTE_LOGGING_FEATURE}' is enabled"

    def _tracking_opted_in(self) -> tuple[bool, str]:
        if self._settings is None:
            return False, "settings unavailable"
        value = self._settings.get_option(TRACKING_OPTION, "no")
        if value is True or value == "yes":
            return True, "tracking opted in"
        return False, f"{TRACKING_OPTION} is {value!r}"

    def _cohort_eligible(self) -> tuple[bool, str]:
        if self._settings is None:
            return False, "settings unavailable"
        raw = self._settings.get_option(COHORT_OPTION, 0)
        assignment = _coerce_cohort(raw)
        if assignment is None:
            return False, f"{COHORT_OPTION} is unreadable: {raw!r}"
        if assignment > COHORT_THRESHOLD:
            return False, f"cohort {assignment} is above {COHORT_THRESHOLD}"
        return True, f"cohort {assignment}"

    def _version_current(self) -> tuple[bool, str]:
        latest = self._resolver.latest_version()
        if latest is None:
            return False, "latest version unavailable"
        current = self.current_version()
        if not current:
            return False, "current version unknown"
        if not is_at_least(current, latest):
            return False, f"{current} is older than {latest}"
        return True, f"{current} >= {latest}"
