"""
Ring Normalizer Module
======================

Turns untrusted territory records into validated rings.

Design:
- Shape inspection at runtime (list/tuple-ness, length), not declared types
- Strict field priority: multi-ring field wins whenever it is a sequence
- Salvage: bad coordinates are dropped individually, a ring is dropped
  only when fewer than 3 coordinates survive
- Never raises for malformed input; degrades to fewer or no rings
- Stateless, thread-safe (config and logger are read-only after init)
"""

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from territory_core.config import NormalizerConfig
from territory_core.geometry.shapes import Coordinate, Ring, MIN_RING_SIZE
from territory_core.logging import LogEvent, StructuredLogger, create_logger

logger = create_logger("geometry")


class RingSource(str, Enum):
    """Which shape of territory record produced the result."""
    ABSENT = "absent"              # No territory at all
    MULTI_RING = "multi_ring"      # Multi-ring field was a sequence
    SINGLE_RING = "single_ring"    # Single-ring field was a sequence
    UNUSABLE = "unusable"          # Territory present, neither field usable


@dataclass(frozen=True)
class NormalizationResult:
    """
    Outcome of parsing one territory record.

    Distinguishes "no territory" (ABSENT) from "territory present but no
    valid geometry" (MULTI_RING/SINGLE_RING with no rings, or UNUSABLE).

    Attributes:
        source: Which input shape was used
        rings: Valid rings (possibly empty)
        dropped_coordinates: Coordinates rejected by the finiteness filter
        dropped_rings: Candidate rings discarded
    """

    source: RingSource
    rings: Tuple[Ring, ...] = ()
    dropped_coordinates: int = 0
    dropped_rings: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.rings

    @property
    def has_territory(self) -> bool:
        return self.source is not RingSource.ABSENT


def _read_field(record: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-bearing object."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _is_sequence(value: Any) -> bool:
    # Strings, bytes and generic iterables do not count as arrays
    return isinstance(value, (list, tuple))


def _coerce_number(value: Any) -> Optional[float]:
    """
    Coerce a loosely-typed value to a finite float.

    Accepts real numbers, Decimals and numeric strings. Rejects None, bools,
    other types, NaN and infinities.

    Returns:
        Finite float, or None if the value is unusable
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, (numbers.Real, Decimal)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None

    return number if math.isfinite(number) else None


class RingNormalizer:
    """
    Normalizes territory records into rings.

    Usage:
        normalizer = RingNormalizer()
        rings = normalizer.normalize({'boundary_coordinates': [...]})

        result = normalizer.parse(record)
        if result.has_territory and result.is_empty:
            ...  # territory present but geometrically invalid
    """

    def __init__(
        self,
        config: Optional[NormalizerConfig] = None,
        structured_logger: Optional[StructuredLogger] = None
    ):
        """
        Args:
            config: Field names to read (default: NormalizerConfig())
            structured_logger: Logger (default: territory_core.geometry)
        """
        self.config = config or NormalizerConfig()
        self.logger = structured_logger or logger

    def normalize(self, territory: Any) -> Tuple[Ring, ...]:
        """
        Convert a territory record into valid rings.

        Args:
            territory: Mapping, object, or None

        Returns:
            Tuple of rings, empty when nothing usable was found
        """
        return self.parse(territory).rings

    def parse(self, territory: Any) -> NormalizationResult:
        """
        Convert a territory record into a tagged NormalizationResult.

        Priority:
            1. None -> ABSENT
            2. multi-ring field is a list/tuple -> MULTI_RING (no fallback)
            3. single-ring field is a list/tuple -> SINGLE_RING
            4. otherwise -> UNUSABLE
        """
        if territory is None:
            return NormalizationResult(source=RingSource.ABSENT)

        multi = _read_field(territory, self.config.multi_ring_field)
        if _is_sequence(multi):
            result = self._parse_multi_ring(multi)
        else:
            single = _read_field(territory, self.config.single_ring_field)
            if _is_sequence(single):
                result = self._parse_single_ring(single)
            else:
                self.logger.debug(
                    event=LogEvent.GEOMETRY_TERRITORY_UNUSABLE,
                    message="Territory has no usable ring field",
                    metadata={
                        'multi_ring_type': type(multi).__name__,
                        'single_ring_type': type(single).__name__,
                    }
                )
                return NormalizationResult(source=RingSource.UNUSABLE)

        self.logger.debug(
            event=LogEvent.GEOMETRY_RINGS_NORMALIZED,
            message="Normalized territory rings",
            metadata={
                'source': result.source.value,
                'rings': len(result.rings),
                'dropped_coordinates': result.dropped_coordinates,
                'dropped_rings': result.dropped_rings,
            }
        )
        return result

    def _parse_multi_ring(self, raw_rings: List[Any]) -> NormalizationResult:
        rings = []
        dropped_coordinates = 0
        dropped_rings = 0

        for ring_index, raw_ring in enumerate(raw_rings):
            # Structural check happens before coordinate filtering
            if not _is_sequence(raw_ring) or len(raw_ring) < MIN_RING_SIZE:
                dropped_rings += 1
                self.logger.debug(
                    event=LogEvent.GEOMETRY_RING_DROPPED,
                    message="Candidate ring is not a sequence of at least 3 elements",
                    metadata={'ring_index': ring_index, 'type': type(raw_ring).__name__}
                )
                continue

            coordinates, dropped = self._filter_coordinates(raw_ring, ring_index)
            dropped_coordinates += dropped

            if len(coordinates) < MIN_RING_SIZE:
                dropped_rings += 1
                self.logger.debug(
                    event=LogEvent.GEOMETRY_RING_DROPPED,
                    message="Too few valid coordinates left in ring",
                    metadata={'ring_index': ring_index, 'valid': len(coordinates)}
                )
                continue

            rings.append(Ring(tuple(coordinates)))

        return NormalizationResult(
            source=RingSource.MULTI_RING,
            rings=tuple(rings),
            dropped_coordinates=dropped_coordinates,
            dropped_rings=dropped_rings,
        )

    def _parse_single_ring(self, raw_ring: List[Any]) -> NormalizationResult:
        coordinates, dropped = self._filter_coordinates(raw_ring, ring_index=0)

        if len(coordinates) < MIN_RING_SIZE:
            self.logger.debug(
                event=LogEvent.GEOMETRY_RING_DROPPED,
                message="Too few valid coordinates left in ring",
                metadata={'ring_index': 0, 'valid': len(coordinates)}
            )
            return NormalizationResult(
                source=RingSource.SINGLE_RING,
                dropped_coordinates=dropped,
                dropped_rings=1,
            )

        return NormalizationResult(
            source=RingSource.SINGLE_RING,
            rings=(Ring(tuple(coordinates)),),
            dropped_coordinates=dropped,
        )

    def _filter_coordinates(
        self,
        raw_ring: List[Any],
        ring_index: int
    ) -> Tuple[List[Coordinate], int]:
        """
        Keep coordinates whose latitude and longitude are finite numbers.

        Returns:
            (surviving coordinates in original order, number dropped)
        """
        coordinates = []
        dropped = 0

        for coordinate_index, raw in enumerate(raw_ring):
            coordinate = self._coerce_coordinate(raw)
            if coordinate is None:
                dropped += 1
                self.logger.debug(
                    event=LogEvent.GEOMETRY_COORDINATE_DROPPED,
                    message="Coordinate has missing or non-finite latitude/longitude",
                    metadata={'ring_index': ring_index, 'coordinate_index': coordinate_index}
                )
                continue
            coordinates.append(coordinate)

        return coordinates, dropped

    def _coerce_coordinate(self, raw: Any) -> Optional[Coordinate]:
        if raw is None:
            return None

        latitude = _coerce_number(_read_field(raw, self.config.latitude_key))
        longitude = _coerce_number(_read_field(raw, self.config.longitude_key))
        if latitude is None or longitude is None:
            return None

        return Coordinate(latitude=latitude, longitude=longitude)


_default_normalizer = RingNormalizer()


def normalize_territory_rings(territory: Any) -> Tuple[Ring, ...]:
    """Normalize with the default field names. See RingNormalizer.normalize."""
    return _default_normalizer.normalize(territory)


def parse_territory_rings(territory: Any) -> NormalizationResult:
    """Parse with the default field names. See RingNormalizer.parse."""
    return _default_normalizer.parse(territory)
