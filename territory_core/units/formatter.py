"""
Units Formatter Module
======================

Display strings for distances and areas with threshold-based unit switching.

Design:
- Stateless (config is read-only after init)
- Missing, non-numeric or non-finite input renders the placeholder, never raises
- Both area entry points convert to square meters and share one primitive
- Fixed decimals round exact ties away from zero
"""

import math
import numbers
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Optional

from territory_core.config import FormatConfig
from territory_core.logging import LogEvent, StructuredLogger, create_logger

logger = create_logger("units")

METERS_PER_KILOMETER = 1000
SQUARE_METERS_PER_SQUARE_KILOMETER = 1_000_000
SQUARE_KILOMETER_THRESHOLD = 0.01

# Exact decimal expansion of the largest double needs ~310 digits
_DECIMAL_PRECISION = 400


def _to_fixed(value: float, digits: int) -> str:
    """Render with exactly `digits` decimals, ties rounded away from zero."""
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        quantum = Decimal(1).scaleb(-digits)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def _round_half_up(value: float) -> int:
    """Nearest integer, halves rounded towards positive infinity."""
    return math.floor(value + 0.5)


class UnitsFormatter:
    """
    Formats raw measurements for display.

    Usage:
        formatter = UnitsFormatter()
        formatter.distance(999)              # "999 m"
        formatter.distance(1000)             # "1.0 km"
        formatter.area_square_meters(5000)   # "5,000 m²"
        formatter.area_km2(15)               # "15.00 km²"
    """

    def __init__(
        self,
        config: Optional[FormatConfig] = None,
        structured_logger: Optional[StructuredLogger] = None
    ):
        self.config = config or FormatConfig()
        self.logger = structured_logger or logger

    @property
    def placeholder(self) -> str:
        return self.config.placeholder

    def distance(self, meters: Any) -> str:
        """
        Format a distance given in meters.

        Below 1000 m (by magnitude) renders whole meters, otherwise
        kilometers with one decimal.
        """
        value = self._coerce(meters, "distance")
        if value is None:
            return self.placeholder

        if abs(value) < METERS_PER_KILOMETER:
            return f"{_to_fixed(value, 0)} m"
        return f"{_to_fixed(value / METERS_PER_KILOMETER, 1)} km"

    def area_square_meters(self, sqm: Any) -> str:
        """Format an area given in square meters."""
        value = self._coerce(sqm, "area_square_meters")
        if value is None:
            return self.placeholder
        return self._format_area(value)

    def area_km2(self, km2: Any) -> str:
        """Format an area given in square kilometers."""
        value = self._coerce(km2, "area_km2")
        if value is None:
            return self.placeholder
        return self._format_area(value * SQUARE_METERS_PER_SQUARE_KILOMETER)

    def _format_area(self, square_meters: float) -> str:
        """
        Shared area primitive.

        Below 0.01 km² renders grouped whole square meters, otherwise square
        kilometers with two decimals.
        """
        if not math.isfinite(square_meters):
            # Only reachable when a huge km² value overflows on conversion
            self.logger.debug(
                event=LogEvent.UNITS_VALUE_INVALID,
                message="Area overflowed during unit conversion",
                metadata={'square_meters': square_meters}
            )
            return self.placeholder

        km2 = square_meters / SQUARE_METERS_PER_SQUARE_KILOMETER
        if km2 < SQUARE_KILOMETER_THRESHOLD:
            return f"{self._group(_round_half_up(square_meters))} m²"
        return f"{_to_fixed(km2, 2)} km²"

    def _group(self, number: int) -> str:
        separator = self.config.thousands_separator
        if not separator:
            return str(number)
        return format(number, ",").replace(",", separator)

    def _coerce(self, value: Any, kind: str) -> Optional[float]:
        """
        Accept real numbers only.

        Returns:
            Finite float, or None when the placeholder should be shown
        """
        if value is None:
            self.logger.debug(
                event=LogEvent.UNITS_VALUE_MISSING,
                message="Measurement missing",
                metadata={'kind': kind}
            )
            return None

        if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
            self.logger.debug(
                event=LogEvent.UNITS_VALUE_INVALID,
                message="Measurement is not a number",
                metadata={'kind': kind, 'type': type(value).__name__}
            )
            return None

        try:
            number = float(value)
        except (OverflowError, ValueError):
            # Huge ints and signaling-NaN Decimals
            number = math.nan

        if not math.isfinite(number):
            self.logger.debug(
                event=LogEvent.UNITS_VALUE_INVALID,
                message="Measurement is not finite",
                metadata={'kind': kind, 'value': repr(value)}
            )
            return None
        return number


_default_formatter = UnitsFormatter()


def distance(meters: Any) -> str:
    """Format meters with the default formatter. See UnitsFormatter.distance."""
    return _default_formatter.distance(meters)


def area_square_meters(sqm: Any) -> str:
    """Format m² with the default formatter. See UnitsFormatter.area_square_meters."""
    return _default_formatter.area_square_meters(sqm)


def area_km2(km2: Any) -> str:
    """Format km² with the default formatter. See UnitsFormatter.area_km2."""
    return _default_formatter.area_km2(km2)
