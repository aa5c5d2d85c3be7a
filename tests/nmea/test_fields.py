"""Tests for marker-based field lookup."""

import pytest

from gpslog.nmea import (
    DirectedValue,
    MarkerNotFoundError,
    NoPrecedingValueError,
    SentenceData,
    resolve_direction,
    value_before,
)

GLL_DATA = SentenceData("GLL", ("4916.45", "N", "12311.12", "W", "225444", "A"))


class TestValueBefore:
    """Tests for value_before function."""

    def test_value_before_marker(self):
        assert value_before(GLL_DATA, "N") == "4916.45"
        assert value_before(GLL_DATA, "W") == "12311.12"

    def test_first_occurrence_wins(self):
        data = SentenceData("GGA", ("545.4", "M", "46.9", "M"))
        assert value_before(data, "M") == "545.4"

    def test_exact_match_only(self):
        data = SentenceData("GLL", ("10.0", "NE", "20.0", "n"))
        with pytest.raises(MarkerNotFoundError):
            value_before(data, "N")

    def test_marker_not_found(self):
        with pytest.raises(MarkerNotFoundError) as exc_info:
            value_before(GLL_DATA, "M")
        assert exc_info.value.marker == "M"

    def test_marker_at_index_zero(self):
        data = SentenceData("GLL", ("N", "4916.45"))
        with pytest.raises(NoPrecedingValueError) as exc_info:
            value_before(data, "N")
        assert exc_info.value.marker == "N"

    def test_empty_preceding_value_is_returned(self):
        data = SentenceData("GLL", ("", "N"))
        assert value_before(data, "N") == ""

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            value_before(SentenceData("GLL", ()), "N")


class TestResolveDirection:
    """Tests for resolve_direction function."""

    def test_north_and_east(self):
        data = SentenceData("GLL", ("48.1", "N", "11.5", "E"))
        assert resolve_direction(data, "N", "S", "N", "S") == DirectedValue("48.1", "N")
        assert resolve_direction(data, "E", "W", "E", "W") == DirectedValue("11.5", "E")

    def test_south_and_west(self):
        data = SentenceData("GLL", ("33.9", "S", "151.2", "W"))
        assert resolve_direction(data, "N", "S", "N", "S") == DirectedValue("33.9", "S")
        assert resolve_direction(data, "E", "W", "E", "W") == DirectedValue("151.2", "W")

    def test_positive_marker_preferred(self):
        data = SentenceData("RMC", ("11.5", "W", "003.1", "E"))
        assert resolve_direction(data, "E", "W", "E", "W") == DirectedValue("003.1", "E")

    def test_direction_characters_are_passed_through(self):
        data = SentenceData("GLL", ("1.0", "S"))
        assert resolve_direction(data, "N", "S", "+", "-") == DirectedValue("1.0", "-")

    def test_neither_marker_present(self):
        with pytest.raises(MarkerNotFoundError) as exc_info:
            resolve_direction(GLL_DATA, "E", "X", "E", "X")
        assert exc_info.value.marker == "X"

    def test_negative_marker_at_index_zero(self):
        data = SentenceData("GLL", ("S", "4916.45"))
        with pytest.raises(NoPrecedingValueError):
            resolve_direction(data, "N", "S", "N", "S")
