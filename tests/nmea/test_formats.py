"""Tests for the sentence format registry."""

import dataclasses

import pytest

from gpslog.nmea import DEFAULT_REGISTRY, FormatRegistry, is_supported_format


class TestFormatRegistry:
    """Tests for FormatRegistry."""

    @pytest.mark.parametrize("format_code", ["GLL", "GGA", "RMC"])
    def test_default_formats_supported(self, format_code):
        assert DEFAULT_REGISTRY.is_supported(format_code) is True
        assert is_supported_format(format_code) is True

    @pytest.mark.parametrize("format_code", ["VTG", "GSA", "XXX", "gga", "", "GGAA"])
    def test_other_formats_unsupported(self, format_code):
        assert is_supported_format(format_code) is False

    def test_default_elevation_format(self):
        assert DEFAULT_REGISTRY.elevation_format == "GGA"

    def test_extended_appends_in_order(self):
        registry = DEFAULT_REGISTRY.extended("VTG", "GSA")
        assert registry.formats == ("GLL", "GGA", "RMC", "VTG", "GSA")
        assert registry.elevation_format == "GGA"

    def test_extended_skips_duplicates(self):
        registry = DEFAULT_REGISTRY.extended("GGA", "VTG", "VTG")
        assert registry.formats == ("GLL", "GGA", "RMC", "VTG")

    def test_extended_leaves_original_unchanged(self):
        DEFAULT_REGISTRY.extended("VTG")
        assert is_supported_format("VTG") is False

    def test_custom_registry(self):
        registry = FormatRegistry(formats=("VTG",))
        assert is_supported_format("VTG", registry) is True
        assert is_supported_format("GGA", registry) is False

    def test_registry_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_REGISTRY.formats = ("VTG",)  # type: ignore[misc]
