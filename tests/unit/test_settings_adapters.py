"""Unit tests for the options and feature flag adapters."""

import json
from pathlib import Path

import pytest

from reportgate.adapters.settings import OptionsSettings, StaticFeatureFlags
from reportgate.adapters.settings.features import parse_feature_list
from reportgate.core.exceptions import ConfigurationError
from reportgate.core.ports import FeatureFlagsPort, SettingsPort


@pytest.mark.settings
class TestOptionsSettings:
    """Tests for OptionsSettings."""

    def test_returns_stored_value(self) -> None:
        settings = OptionsSettings({"woocommerce_allow_tracking": "yes"})
        assert settings.get_option("woocommerce_allow_tracking", "no") == "yes"

    def test_returns_default_when_absent(self) -> None:
        settings = OptionsSettings({})
        assert settings.get_option("woocommerce_remote_variant_assignment", 0) == 0

    def test_copies_mapping(self) -> None:
        options = {"woocommerce_allow_tracking": "yes"}
        settings = OptionsSettings(options)
        options["woocommerce_allow_tracking"] = "no"

        assert settings.get_option("woocommerce_allow_tracking") == "yes"

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "options.json"
        path.write_text(
            json.dumps(
                {
                    "woocommerce_allow_tracking": "yes",
                    "woocommerce_remote_variant_assignment": 7,
                }
            )
        )

        settings = OptionsSettings.from_file(path)

        assert settings.get_option("woocommerce_allow_tracking") == "yes"
        assert settings.get_option("woocommerce_remote_variant_assignment") == 7

    def test_from_missing_file_has_no_options(self, tmp_path: Path) -> None:
        settings = OptionsSettings.from_file(tmp_path / "missing.json")
        assert settings.get_option("woocommerce_allow_tracking", "no") == "no"

    @pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
    def test_from_bad_file_raises(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "options.json"
        path.write_text(content)

        with pytest.raises(ConfigurationError, match="options"):
            OptionsSettings.from_file(path)

    def test_satisfies_port(self) -> None:
        assert isinstance(OptionsSettings({}), SettingsPort)


@pytest.mark.settings
class TestStaticFeatureFlags:
    """Tests for StaticFeatureFlags."""

    def test_enabled_feature(self) -> None:
        flags = StaticFeatureFlags(["remote_logging"])
        assert flags.is_enabled("remote_logging") is True

    def test_unknown_feature_is_disabled(self) -> None:
        flags = StaticFeatureFlags(["remote_logging"])
        assert flags.is_enabled("product_block_editor") is False

    def test_defaults_to_nothing_enabled(self) -> None:
        assert StaticFeatureFlags().enabled == frozenset()

    def test_satisfies_port(self) -> None:
        assert isinstance(StaticFeatureFlags(), FeatureFlagsPort)


@pytest.mark.settings
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", frozenset()),
        ("remote_logging", frozenset({"remote_logging"})),
        (" remote_logging , hpos ,,", frozenset({"remote_logging", "hpos"})),
    ],
)
def test_parse_feature_list(raw: str, expected: frozenset[str]) -> None:
    assert parse_feature_list(raw) == expected
