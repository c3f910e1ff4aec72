"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: geometry, units, config, error
    category: rings, ring, coordinate, territory, value
    action: normalized, dropped, unusable, missing, invalid, loaded

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, metadata.dropped_coordinates
    | filter event = "geometry.rings.normalized"
    | stats sum(metadata.dropped_coordinates) by bin(5m)
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - geometry.*: Territory ring normalization
    - units.*: Measurement formatting
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Geometry Events ==========
    GEOMETRY_RINGS_NORMALIZED = "geometry.rings.normalized"
    """Territory record resolved into rings."""

    GEOMETRY_COORDINATE_DROPPED = "geometry.coordinate.dropped"
    """Coordinate rejected (non-finite or missing latitude/longitude)."""

    GEOMETRY_RING_DROPPED = "geometry.ring.dropped"
    """Candidate ring discarded (not a sequence or fewer than 3 points)."""

    GEOMETRY_TERRITORY_UNUSABLE = "geometry.territory.unusable"
    """Territory exposes neither ring field in a usable shape."""

    # ========== Units Events ==========
    UNITS_VALUE_MISSING = "units.value.missing"
    """Measurement absent, placeholder rendered."""

    UNITS_VALUE_INVALID = "units.value.invalid"
    """Measurement non-numeric or non-finite, placeholder rendered."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file parsed and validated."""

    # ========== Error Events ==========
    CONFIG_VALIDATION_ERROR = "error.config_validation"
    """Configuration failed validation."""
