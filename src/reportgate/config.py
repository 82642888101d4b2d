"""Configuration utilities for reportgate.

Configuration comes from ``REPORTGATE_*`` environment variables; paths
default to locations under the project root.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Self

from reportgate.adapters.catalog.wordpress import DEFAULT_CATALOG_URL, DEFAULT_TIMEOUT
from reportgate.adapters.settings.features import FEATURES_ENV, parse_feature_list
from reportgate.core.exceptions import ConfigurationError
from reportgate.core.services import DEFAULT_CACHE_TTL, DEFAULT_PACKAGE_ID


ENV_PREFIX = "REPORTGATE_"


def find_project_root(start: Path | None = None) -> Path:
    """Find the project root directory by walking up from start directory.

    Searches for marker files in the following priority order:
    1. .reportgate - Explicit project marker
    2. pyproject.toml - Python project root
    3. .git - Version control root

    Args:
        start: Directory to start searching from. If None, uses current directory.

    Returns:
        Path to project root directory. Returns start directory if no markers found.
    """
    if start is None:
        start = Path.cwd()

    markers = [".reportgate", "pyproject.toml", ".git"]
    current = start.resolve()

    for parent in [current, *current.parents]:
        for marker in markers:
            if (parent / marker).exists():
                return parent

    return start.resolve()


def _positive_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def _optional_path(env: Mapping[str, str], name: str) -> Path | None:
    raw = env.get(name, "").strip()
    return Path(raw).expanduser() if raw else None


@dataclass(frozen=True, slots=True)
class GateConfig:
    """Settings for wiring the default adapters.

    Attributes:
        catalog_url: Plugin information endpoint.
        package_id: Catalog identifier of the host software.
        timeout: Seconds allowed for a catalog request.
        cache_ttl: Maximum age of a reusable cached latest version.
        cache_dir: Directory for the file cache. None means the project default.
        options_file: JSON file holding tracking and cohort options.
        features: Names of enabled features.
    """

    catalog_url: str = DEFAULT_CATALOG_URL
    package_id: str = DEFAULT_PACKAGE_ID
    timeout: float = DEFAULT_TIMEOUT
    cache_ttl: timedelta = DEFAULT_CACHE_TTL
    cache_dir: Path | None = None
    options_file: Path | None = None
    features: frozenset[str] = frozenset()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build configuration from ``REPORTGATE_*`` environment variables.

        Args:
            environ: Environment mapping. Defaults to ``os.environ``.

        Raises:
            ConfigurationError: If a numeric value is malformed or not positive.
        """
        env = os.environ if environ is None else environ
        ttl_seconds = _positive_int(
            env, f"{ENV_PREFIX}CACHE_TTL", int(DEFAULT_CACHE_TTL.total_seconds())
        )
        return cls(
            catalog_url=env.get(f"{ENV_PREFIX}CATALOG_URL", "").strip()
            or DEFAULT_CATALOG_URL,
            package_id=env.get(f"{ENV_PREFIX}PACKAGE_ID", "").strip()
            or DEFAULT_PACKAGE_ID,
            timeout=_positive_float(env, f"{ENV_PREFIX}TIMEOUT", DEFAULT_TIMEOUT),
            cache_ttl=timedelta(seconds=ttl_seconds),
            cache_dir=_optional_path(env, f"{ENV_PREFIX}CACHE_DIR"),
            options_file=_optional_path(env, f"{ENV_PREFIX}OPTIONS_FILE"),
            features=parse_feature_list(env.get(FEATURES_ENV, "")),
        )

    def resolved_cache_dir(self, start: Path | None = None) -> Path:
        """Return the cache directory, defaulting to ``<root>/.reportgate/cache``.

        Args:
            start: Directory to start project root discovery from.
        """
        if self.cache_dir is not None:
            return self.cache_dir
        return find_project_root(start) / ".reportgate" / "cache"
