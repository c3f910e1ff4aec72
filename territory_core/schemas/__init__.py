"""
territory_core Schemas
======================

Bounded Context: Data Structures

Public API
----------
    TerritoryBrief: Territory summary (id, owner, area, display title)
"""

from .territory import TerritoryBrief

__all__ = [
    'TerritoryBrief',
]
