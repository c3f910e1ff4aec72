"""
Geographic Shapes Module
========================

Pure geographic value objects - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Fail-fast validation at construction
- numpy views for vectorized consumers (read-only)
"""

import math
import numbers
import numpy as np
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from territory_core.geometry import measures

MIN_RING_SIZE = 3


@dataclass(frozen=True)
class Coordinate:
    """
    Immutable latitude/longitude pair in degrees.

    Ranges ([-90, 90], [-180, 180]) are semantic only; construction checks
    finiteness.

    Attributes:
        latitude: Degrees north
        longitude: Degrees east
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        """Coerce to float and validate finiteness."""
        for name in ("latitude", "longitude"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
            object.__setattr__(self, name, float(value))

    def to_pair(self) -> Tuple[float, float]:
        """(latitude, longitude) tuple, the order map overlays expect."""
        return (self.latitude, self.longitude)

    def to_dict(self):
        return {'latitude': self.latitude, 'longitude': self.longitude}


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned latitude/longitude bounding box."""

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    def __post_init__(self):
        if self.min_lat > self.max_lat:
            raise ValueError(f"min_lat {self.min_lat} > max_lat {self.max_lat}")
        if self.min_lon > self.max_lon:
            raise ValueError(f"min_lon {self.min_lon} > max_lon {self.max_lon}")

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            latitude=(self.min_lat + self.max_lat) / 2,
            longitude=(self.min_lon + self.max_lon) / 2,
        )

    def contains(self, coordinate: Coordinate) -> bool:
        """Inclusive containment test."""
        return (
            self.min_lat <= coordinate.latitude <= self.max_lat
            and self.min_lon <= coordinate.longitude <= self.max_lon
        )

    def union(self, other: "Bounds") -> "Bounds":
        return Bounds(
            min_lat=min(self.min_lat, other.min_lat),
            min_lon=min(self.min_lon, other.min_lon),
            max_lat=max(self.max_lat, other.max_lat),
            max_lon=max(self.max_lon, other.max_lon),
        )


@dataclass(frozen=True)
class Ring:
    """
    Immutable closed polygon boundary.

    The ring is "closed" semantically: the last coordinate connects back to
    the first whether or not it repeats it. No winding order is implied.

    Attributes:
        coordinates: Ordered coordinates (at least 3)

    Invariants:
        - len(coordinates) >= 3
        - every element is a Coordinate (hence finite)
    """

    coordinates: Tuple[Coordinate, ...]

    def __post_init__(self):
        """Freeze the sequence and validate."""
        coordinates = tuple(self.coordinates)
        for idx, coordinate in enumerate(coordinates):
            if not isinstance(coordinate, Coordinate):
                raise TypeError(
                    f"Ring element {idx} must be Coordinate, got {type(coordinate).__name__}"
                )
        if len(coordinates) < MIN_RING_SIZE:
            raise ValueError(
                f"Ring must have at least {MIN_RING_SIZE} coordinates, got {len(coordinates)}"
            )
        object.__setattr__(self, 'coordinates', coordinates)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[float]]) -> "Ring":
        """Build from (latitude, longitude) pairs."""
        return cls(tuple(Coordinate(latitude=lat, longitude=lon) for lat, lon in pairs))

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self):
        return iter(self.coordinates)

    def __getitem__(self, index):
        return self.coordinates[index]

    @property
    def first(self) -> Coordinate:
        return self.coordinates[0]

    @property
    def last(self) -> Coordinate:
        return self.coordinates[-1]

    @property
    def is_closed(self) -> bool:
        """True if the last coordinate repeats the first."""
        return self.first == self.last

    def to_array(self) -> np.ndarray:
        """
        Nx2 float64 array of [latitude, longitude] rows.

        Returns:
            Read-only array
        """
        array = np.array([c.to_pair() for c in self.coordinates], dtype=np.float64)
        array.flags.writeable = False
        return array

    def to_lat_lng_pairs(self):
        """List of (latitude, longitude) tuples."""
        return [c.to_pair() for c in self.coordinates]

    def bounds(self) -> Bounds:
        array = self.to_array()
        return Bounds(
            min_lat=float(array[:, 0].min()),
            min_lon=float(array[:, 1].min()),
            max_lat=float(array[:, 0].max()),
            max_lon=float(array[:, 1].max()),
        )

    def perimeter_meters(self) -> float:
        """Great-circle perimeter including the closing leg."""
        return measures.ring_perimeter(self)

    def approximate_area_square_meters(self) -> float:
        """Rough planar area, see measures.approximate_ring_area."""
        return measures.approximate_ring_area(self)


def bounds_of(rings: Iterable[Ring]) -> Optional[Bounds]:
    """
    Combined bounds of several rings.

    Returns:
        Bounds, or None when rings is empty
    """
    combined = None
    for ring in rings:
        ring_bounds = ring.bounds()
        combined = ring_bounds if combined is None else combined.union(ring_bounds)
    return combined
