"""
Geometry Layer
==============

Bounded Context: Territory boundaries as validated rings.

Responsibilities:
- Value objects (Coordinate, Ring, Bounds), immutable
- Normalization of untrusted territory records into rings
- Geodesic measures (haversine distance, approximate area)
- NO topology repair, NO reprojection

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation for value objects, absorb-and-degrade for records
"""

from territory_core.geometry.shapes import Coordinate, Ring, Bounds, bounds_of, MIN_RING_SIZE
from territory_core.geometry.normalizer import (
    RingNormalizer,
    RingSource,
    NormalizationResult,
    normalize_territory_rings,
    parse_territory_rings,
)
from territory_core.geometry.measures import (
    haversine_distance,
    polyline_distance,
    ring_perimeter,
    approximate_ring_area,
    is_closed_loop,
    total_area,
)

__all__ = [
    "Coordinate",
    "Ring",
    "Bounds",
    "bounds_of",
    "MIN_RING_SIZE",
    "RingNormalizer",
    "RingSource",
    "NormalizationResult",
    "normalize_territory_rings",
    "parse_territory_rings",
    "haversine_distance",
    "polyline_distance",
    "ring_perimeter",
    "approximate_ring_area",
    "is_closed_loop",
    "total_area",
]
