"""NMEA 0183 sentence validation, splitting and interpretation."""

from gpslog.nmea.checksum import calculate_checksum, has_correct_checksum
from gpslog.nmea.errors import (
    InsufficientFieldsError,
    MarkerNotFoundError,
    NoPrecedingValueError,
    SentenceError,
    UnsupportedFormatError,
)
from gpslog.nmea.fields import resolve_direction, value_before
from gpslog.nmea.formats import DEFAULT_REGISTRY, FormatRegistry, is_supported_format
from gpslog.nmea.interpreter import interpret
from gpslog.nmea.sentence import split_sentence
from gpslog.nmea.types import DirectedValue, PositionRequest, SentenceData
from gpslog.nmea.validation import is_well_formed, require_well_formed

__all__ = [
    "DEFAULT_REGISTRY",
    "DirectedValue",
    "FormatRegistry",
    "InsufficientFieldsError",
    "MarkerNotFoundError",
    "NoPrecedingValueError",
    "PositionRequest",
    "SentenceData",
    "SentenceError",
    "UnsupportedFormatError",
    "calculate_checksum",
    "has_correct_checksum",
    "interpret",
    "is_supported_format",
    "is_well_formed",
    "require_well_formed",
    "resolve_direction",
    "split_sentence",
    "value_before",
]
