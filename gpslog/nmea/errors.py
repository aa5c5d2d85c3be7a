"""Error kinds raised while interpreting NMEA sentence data.

Every data-quality failure derives from ``SentenceError``, itself a
``ValueError``, so a caller can either match a single kind or discard the
whole family with one ``except ValueError`` clause. Contract violations
(calling a stage on a sentence that never passed ``is_well_formed``) are
reported with ``AssertionError`` instead and are not part of this hierarchy.
"""

__all__ = [
    "InsufficientFieldsError",
    "MarkerNotFoundError",
    "NoPrecedingValueError",
    "SentenceError",
    "UnsupportedFormatError",
]


class SentenceError(ValueError):
    """Base class for recoverable, single-sentence failures."""


class MarkerNotFoundError(SentenceError):
    """A marker such as ``"N"`` or ``"M"`` is absent from the data fields."""

    def __init__(self, marker: str) -> None:
        super().__init__(f"Marker {marker!r} not found in data fields.")
        self.marker = marker


class NoPrecedingValueError(SentenceError):
    """A marker was found at index 0, so no value precedes it."""

    def __init__(self, marker: str) -> None:
        super().__init__(
            f"Marker {marker!r} found at position 0; no preceding value."
        )
        self.marker = marker


class UnsupportedFormatError(SentenceError):
    """The sentence format code is not in the format registry."""

    def __init__(self, format_code: str) -> None:
        super().__init__(f"Unsupported sentence format {format_code!r}.")
        self.format_code = format_code


class InsufficientFieldsError(SentenceError):
    """The sentence carries fewer data fields than a position requires."""

    def __init__(self, field_count: int, minimum: int) -> None:
        super().__init__(
            f"Sentence has {field_count} data fields; at least {minimum} required."
        )
        self.field_count = field_count
        self.minimum = minimum
