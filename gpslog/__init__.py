"""gpslog package for turning NMEA 0183 logs into geographic positions."""

from gpslog.log import parse_log, parse_sentence
from gpslog.nmea import (
    DEFAULT_REGISTRY,
    FormatRegistry,
    PositionRequest,
    SentenceData,
    has_correct_checksum,
    interpret,
    is_well_formed,
    split_sentence,
)
from gpslog.position import Position, make_position

__all__ = [
    "DEFAULT_REGISTRY",
    "FormatRegistry",
    "Position",
    "PositionRequest",
    "SentenceData",
    "has_correct_checksum",
    "interpret",
    "is_well_formed",
    "make_position",
    "parse_log",
    "parse_sentence",
    "split_sentence",
]
