"""reportgate - Eligibility gate for remote diagnostic error reporting.

Decides, for a single store, whether an error report may be sent to a
remote collection endpoint. The decision requires the ``remote_logging``
feature, tracking opt-in, a cohort inside the 10% rollout, and an
installed version at least as new as the latest published release
(looked up from the plugin catalog and cached for a day).

Example:
    >>> from reportgate import EligibilityGate, GateConfig
    >>> gate = EligibilityGate.from_config(GateConfig.from_env(), current_version="9.2.0")
    >>> if gate.is_allowed():
    ...     send_report(report)
"""

from reportgate.adapters.cache import FileVersionCache, MemoryVersionCache
from reportgate.adapters.catalog import WordPressPluginCatalog
from reportgate.adapters.settings import OptionsSettings, StaticFeatureFlags
from reportgate.config import GateConfig, find_project_root
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
from reportgate.core.models import Check, Decision, VersionInfo
from reportgate.core.ports import (
    CatalogLookupPort,
    FeatureFlagsPort,
    SettingsPort,
    VersionCachePort,
)
from reportgate.core.services import EligibilityGate, VersionResolver
from reportgate.core.versions import compare_versions, is_at_least


__version__ = "0.1.0"

__all__ = [
    "CacheCorruptError",
    "CacheError",
    "CatalogError",
    "CatalogLookupPort",
    "CatalogResponseError",
    "CatalogUnavailableError",
    "Check",
    "ConfigurationError",
    "Decision",
    "EligibilityGate",
    "FeatureFlagsPort",
    "FileVersionCache",
    "GateConfig",
    "MemoryVersionCache",
    "OptionsSettings",
    "PackageNotFoundError",
    "ReportgateError",
    "SettingsPort",
    "StaticFeatureFlags",
    "VersionCachePort",
    "VersionInfo",
    "VersionResolver",
    "WordPressPluginCatalog",
    "__version__",
    "compare_versions",
    "find_project_root",
    "is_at_least",
]
