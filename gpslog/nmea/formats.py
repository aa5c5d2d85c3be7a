"""Registry of supported NMEA sentence formats.

The set of sentence types a log parser accepts is data, not control flow.
A ``FormatRegistry`` lists the accepted format codes and names the one
format that carries an elevation field; every stage that depends on
supported formats takes a registry argument defaulting to
``DEFAULT_REGISTRY``.

Supported formats:
    GLL = Geographic position, latitude/longitude
    GGA = Global Positioning System fix data (carries elevation)
    RMC = Recommended minimum specific GNSS data
"""

from dataclasses import dataclass

__all__ = ["DEFAULT_REGISTRY", "FormatRegistry", "is_supported_format"]


@dataclass(frozen=True)
class FormatRegistry:
    """An immutable, ordered set of supported sentence format codes.

    Attributes:
        formats: Accepted three-letter format codes. Membership, not
            position, decides support.
        elevation_format: The format whose sentences carry an elevation
            value preceding an ``"M"`` marker.

    Example:
        >>> registry = DEFAULT_REGISTRY.extended("VTG")
        >>> registry.is_supported("VTG")
        True
    """

    formats: tuple[str, ...] = ("GLL", "GGA", "RMC")
    elevation_format: str = "GGA"

    def is_supported(self, format_code: str) -> bool:
        """Return True if *format_code* is one of the registered formats."""
        return format_code in self.formats

    def extended(self, *format_codes: str) -> "FormatRegistry":
        """Return a new registry with *format_codes* appended.

        Codes already present are skipped so the order of the original
        formats is kept.
        """
        added = tuple(
            code for code in dict.fromkeys(format_codes) if code not in self.formats
        )
        return FormatRegistry(
            formats=self.formats + added,
            elevation_format=self.elevation_format,
        )


DEFAULT_REGISTRY = FormatRegistry()


def is_supported_format(
    format_code: str,
    registry: FormatRegistry = DEFAULT_REGISTRY,
) -> bool:
    """Check whether a format code is supported by *registry*.

    Args:
        format_code: Three-letter sentence type, e.g. ``"GGA"``.
        registry: Registry to consult (default: ``DEFAULT_REGISTRY``).

    Returns:
        True if the format is registered, False otherwise.

    Example:
        >>> is_supported_format("GLL")
        True
        >>> is_supported_format("VTG")
        False
    """
    return registry.is_supported(format_code)
