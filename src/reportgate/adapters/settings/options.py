"""Options store adapter implementing SettingsPort."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Self

from reportgate.core.exceptions import ConfigurationError


if TYPE_CHECKING:
    from pathlib import Path


logger = logging.getLogger(__name__)


class OptionsSettings:
    """Read-only options backed by a mapping of option name to raw value.

    Example:
        >>> settings = OptionsSettings({"woocommerce_allow_tracking": "yes"})
        >>> settings.get_option("woocommerce_allow_tracking", "no")
        'yes'
    """

    def __init__(self, options: Mapping[str, object]) -> None:
        self._options = dict(options)

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load options from a JSON object file.

        A missing file yields no options, so every option reads as its
        default.

        Args:
            path: Path to a JSON file such as ``{"woocommerce_allow_tracking": "yes"}``.

        Raises:
            ConfigurationError: If the file is not a JSON object.
        """
        if not path.exists():
            logger.debug("Options file %s not found; using defaults", path)
            return cls({})

        try:
            with path.open() as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not read options file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Options file {path} must contain a JSON object")
        return cls(data)

    def get_option(self, name: str, default: object = None) -> object:
        """Return the stored value for ``name``, or ``default`` if absent."""
        return self._options.get(name, default)
