"""Core domain module for reportgate.

This module contains pure Python domain models, port definitions and the
eligibility services. It has no I/O dependencies and can be tested in
isolation.
"""

from reportgate.core.models import Check, Decision, VersionInfo
from reportgate.core.ports import (
    CatalogLookupPort,
    Clock,
    FeatureFlagsPort,
    SettingsPort,
    VersionCachePort,
)
from reportgate.core.services import EligibilityGate, VersionResolver


__all__ = [
    "CatalogLookupPort",
    "Check",
    "Clock",
    "Decision",
    "EligibilityGate",
    "FeatureFlagsPort",
    "SettingsPort",
    "VersionCachePort",
    "VersionInfo",
    "VersionResolver",
]
