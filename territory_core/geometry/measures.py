"""
Geodesic Measures Module
========================

Distances and areas over latitude/longitude coordinates.

Design:
- Pure functions, vectorized with numpy
- Accept a Ring, an Nx2 [lat, lon] array, or any sequence of objects
  exposing latitude/longitude
- Haversine for distances (spherical Earth, meters)
- Planar shoelace for areas (rough, degrees scaled to meters)
"""

import numpy as np
from typing import Any, Iterable

EARTH_RADIUS_METERS = 6_371_000.0
METERS_PER_DEGREE = 111_320.0
CLOSED_LOOP_TOLERANCE_METERS = 50.0


def _as_array(coordinates: Any) -> np.ndarray:
    """Coerce coordinates into an Nx2 float64 [lat, lon] array."""
    if isinstance(coordinates, np.ndarray):
        array = coordinates.astype(np.float64, copy=False)
    elif hasattr(coordinates, "to_array"):
        array = coordinates.to_array()
    else:
        array = np.array(
            [[c.latitude, c.longitude] for c in coordinates],
            dtype=np.float64,
        )

    if array.size == 0:
        return array.reshape(0, 2)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"coordinates must be Nx2 [lat, lon], got shape {array.shape}")
    return array


def _haversine(
    lat1: np.ndarray,
    lon1: np.ndarray,
    lat2: np.ndarray,
    lon2: np.ndarray
) -> np.ndarray:
    """Element-wise great-circle distance in meters (inputs in degrees)."""
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    d_phi = phi2 - phi1
    d_lambda = np.radians(lon2 - lon1)

    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def haversine_distance(a: Any, b: Any) -> float:
    """
    Great-circle distance between two coordinates.

    Args:
        a: Object with latitude/longitude
        b: Object with latitude/longitude

    Returns:
        Distance in meters
    """
    return float(_haversine(
        np.float64(a.latitude), np.float64(a.longitude),
        np.float64(b.latitude), np.float64(b.longitude),
    ))


def polyline_distance(coordinates: Any) -> float:
    """
    Total length of an open path.

    Returns:
        Sum of consecutive legs in meters (0.0 for fewer than 2 points)
    """
    points = _as_array(coordinates)
    if len(points) < 2:
        return 0.0

    legs = _haversine(points[:-1, 0], points[:-1, 1], points[1:, 0], points[1:, 1])
    return float(legs.sum())


def ring_perimeter(coordinates: Any) -> float:
    """
    Perimeter of a ring including the closing leg (last -> first).

    An explicitly closed ring (first == last) gets a zero-length closing leg.
    """
    points = _as_array(coordinates)
    if len(points) < 2:
        return 0.0

    closed = np.vstack([points, points[:1]])
    return polyline_distance(closed)


def approximate_ring_area(coordinates: Any) -> float:
    """
    Rough ring area in square meters.

    Shoelace formula over (lon, lat) degrees, scaled by a fixed
    meters-per-degree factor. Ignores latitude shrinkage and winding order;
    adequate for display, not for surveying.

    Returns:
        Area in m² (0.0 for fewer than 3 points)
    """
    points = _as_array(coordinates)
    if len(points) < 3:
        return 0.0

    lat = points[:, 0]
    lon = points[:, 1]
    twice_area = np.sum(lon * np.roll(lat, -1) - np.roll(lon, -1) * lat)
    return float(abs(twice_area) / 2 * METERS_PER_DEGREE * METERS_PER_DEGREE)


def is_closed_loop(
    coordinates: Any,
    tolerance_meters: float = CLOSED_LOOP_TOLERANCE_METERS
) -> bool:
    """
    Check whether a path returns to its start.

    Requires more than 3 points and start/end closer than tolerance_meters.
    """
    points = _as_array(coordinates)
    if len(points) <= 3:
        return False

    gap = _haversine(points[0, 0], points[0, 1], points[-1, 0], points[-1, 1])
    return bool(gap < tolerance_meters)


def total_area(rings: Iterable[Any]) -> float:
    """Sum of approximate areas of several rings, in m²."""
    return float(sum(approximate_ring_area(ring) for ring in rings))
