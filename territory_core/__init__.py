"""
territory_core
==============

Bounded Context: Territory geometry and measurement display.

Two independent, stateless components:
- RingNormalizer: untrusted territory records -> validated coordinate rings
- UnitsFormatter: raw meters / m² / km² -> display strings

Architecture:

    territory_core/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # Coordinate, Ring, Bounds
    │   ├── normalizer.py  # RingNormalizer, NormalizationResult
    │   └── measures.py    # Haversine distance, approximate area
    │
    ├── units/             # Display formatting (stateless)
    │   └── formatter.py   # UnitsFormatter
    │
    ├── schemas/           # Territory summary records
    ├── logging/           # Structured JSON logging
    └── config.py          # YAML-backed configuration

Usage:

    from territory_core import normalize_territory_rings, UnitsFormatter

    rings = normalize_territory_rings({
        'boundary_coordinates': [
            {'latitude': 40.0, 'longitude': -3.0},
            {'latitude': 40.1, 'longitude': -3.0},
            {'latitude': 40.1, 'longitude': -3.1},
        ]
    })

    formatter = UnitsFormatter()
    formatter.distance(1500)               # "1.5 km"
    formatter.area_square_meters(5000)     # "5,000 m²"

    # Custom field names / display settings
    from territory_core import CoreConfig, RingNormalizer

    config = CoreConfig.from_yaml("territory.yaml")
    normalizer = RingNormalizer(config.normalizer)
    formatter = UnitsFormatter(config.units)
"""

from territory_core.config import CoreConfig, NormalizerConfig, FormatConfig

# Geometry Layer
from territory_core.geometry import (
    Coordinate,
    Ring,
    Bounds,
    RingNormalizer,
    RingSource,
    NormalizationResult,
    normalize_territory_rings,
    parse_territory_rings,
)

# Units Layer
from territory_core.units import UnitsFormatter

# Schemas
from territory_core.schemas import TerritoryBrief

__all__ = [
    # Config
    "CoreConfig",
    "NormalizerConfig",
    "FormatConfig",
    # Geometry
    "Coordinate",
    "Ring",
    "Bounds",
    "RingNormalizer",
    "RingSource",
    "NormalizationResult",
    "normalize_territory_rings",
    "parse_territory_rings",
    # Units
    "UnitsFormatter",
    # Schemas
    "TerritoryBrief",
]

__version__ = "1.0.0"
