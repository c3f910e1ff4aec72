"""
Territory Brief Schema
======================

Bounded Context: Territory summary data

Compact territory record used by hover cards and drawers: identity, owner
and area, plus the derived display title.

Design:
- Immutable (frozen dataclass)
- from_dict() validates and raises ValueError on bad payloads
- Area text delegates to UnitsFormatter
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from territory_core.units import UnitsFormatter, area_square_meters

TITLE_ID_PREFIX_LENGTH = 8


@dataclass(frozen=True)
class TerritoryBrief:
    """
    Summary of one territory.

    Attributes:
        id: Territory identifier
        owner_name: Display name of the owner
        area_square_meters: Area in m²
        name: Optional user-given name

    Invariants:
        - id is non-empty
        - area_square_meters is finite

    Example:
        >>> brief = TerritoryBrief(
        ...     id="3f9c2a71-8d4e-4b1a-9c55-0e7a1f2d6b30",
        ...     owner_name="runner42",
        ...     area_square_meters=5000,
        ... )
        >>> brief.display_title
        'Territory 3f9c2a71'
        >>> brief.area_text()
        '5,000 m²'
    """
    id: str
    owner_name: str
    area_square_meters: float
    name: Optional[str] = None

    def __post_init__(self):
        """Validate invariants."""
        if not self.id:
            raise ValueError("Territory id cannot be empty")
        if not math.isfinite(self.area_square_meters):
            raise ValueError(
                f"area_square_meters must be finite, got {self.area_square_meters}"
            )

    @property
    def display_title(self) -> str:
        """User-given name, or a title built from the id prefix."""
        if self.name:
            return self.name
        return f"Territory {self.id[:TITLE_ID_PREFIX_LENGTH]}"

    def area_text(self, formatter: Optional[UnitsFormatter] = None) -> str:
        """Area formatted with the given (or default) formatter."""
        if formatter is None:
            return area_square_meters(self.area_square_meters)
        return formatter.area_square_meters(self.area_square_meters)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        data = {
            'id': self.id,
            'owner_name': self.owner_name,
            'area_square_meters': self.area_square_meters,
        }
        if self.name is not None:
            data['name'] = self.name
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TerritoryBrief':
        """Deserialize from dict.

        Args:
            data: Dictionary with id, owner_name, area_square_meters and
                optional name

        Returns:
            TerritoryBrief instance

        Raises:
            ValueError: If required fields missing or invalid
        """
        try:
            name = data.get('name')
            return cls(
                id=str(data['id']),
                owner_name=str(data['owner_name']),
                area_square_meters=float(data['area_square_meters']),
                name=str(name) if name is not None else None,
            )
        except KeyError as e:
            raise ValueError(f"Missing required TerritoryBrief field: {e}")
        except (TypeError, ValueError, AttributeError) as e:
            raise ValueError(f"Invalid TerritoryBrief data: {e}")
