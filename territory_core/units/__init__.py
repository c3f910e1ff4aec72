"""
Units Layer
===========

Bounded Context: Human-readable measurements.

Public API
----------
    UnitsFormatter: Configurable formatter (distance, area_square_meters, area_km2)
    distance, area_square_meters, area_km2: Default-config shortcuts
"""

from territory_core.units.formatter import (
    UnitsFormatter,
    distance,
    area_square_meters,
    area_km2,
    METERS_PER_KILOMETER,
    SQUARE_METERS_PER_SQUARE_KILOMETER,
    SQUARE_KILOMETER_THRESHOLD,
)

__all__ = [
    "UnitsFormatter",
    "distance",
    "area_square_meters",
    "area_km2",
    "METERS_PER_KILOMETER",
    "SQUARE_METERS_PER_SQUARE_KILOMETER",
    "SQUARE_KILOMETER_THRESHOLD",
]
