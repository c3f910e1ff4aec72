"""
Configuration schema for territory_core.

Defines which record fields the ring normalizer reads and how the units
formatter renders missing values and digit groups. Thresholds and the
minimum ring size are fixed constants and are not configurable.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Union
import yaml

from territory_core.logging import LogEvent, create_logger

logger = create_logger("config")


@dataclass(frozen=True)
class NormalizerConfig:
    """Field names read from territory and coordinate records."""

    multi_ring_field: str = "boundary_rings"
    single_ring_field: str = "boundary_coordinates"
    latitude_key: str = "latitude"
    longitude_key: str = "longitude"

    def __post_init__(self):
        """Validate field names."""
        for name in ("multi_ring_field", "single_ring_field", "latitude_key", "longitude_key"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")

        if self.multi_ring_field == self.single_ring_field:
            raise ValueError(
                f"multi_ring_field and single_ring_field must differ, "
                f"both are {self.multi_ring_field!r}"
            )

        if self.latitude_key == self.longitude_key:
            raise ValueError(
                f"latitude_key and longitude_key must differ, "
                f"both are {self.latitude_key!r}"
            )


@dataclass(frozen=True)
class FormatConfig:
    """
    Display settings for the units formatter.

    thousands_separator may be empty to disable grouping.
    """

    placeholder: str = "—"
    thousands_separator: str = ","

    def __post_init__(self):
        """Validate display settings."""
        if not isinstance(self.placeholder, str) or not self.placeholder:
            raise ValueError(f"placeholder must be a non-empty string, got {self.placeholder!r}")

        if not isinstance(self.thousands_separator, str):
            raise ValueError(
                f"thousands_separator must be a string, got {type(self.thousands_separator).__name__}"
            )
        if len(self.thousands_separator) > 1:
            raise ValueError(
                f"thousands_separator must be at most one character, got {self.thousands_separator!r}"
            )
        if self.thousands_separator and (
            self.thousands_separator.isdigit() or self.thousands_separator in "+-."
        ):
            raise ValueError(
                f"thousands_separator cannot be a digit, sign or decimal point, "
                f"got {self.thousands_separator!r}"
            )


def _build_section(section_cls, data: Any, section_name: str):
    """Build one config section, rejecting unknown keys."""
    if data is None:
        return section_cls()
    if not isinstance(data, dict):
        raise ValueError(f"'{section_name}' must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(section_cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(
            f"Unknown keys in '{section_name}': {sorted(unknown)}. "
            f"Allowed: {sorted(known)}"
        )
    return section_cls(**data)


@dataclass(frozen=True)
class CoreConfig:
    """
    Top-level configuration.

    Immutable after construction (frozen dataclass).
    """

    normalizer: NormalizerConfig = field(default_factory=NormalizerConfig)
    units: FormatConfig = field(default_factory=FormatConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CoreConfig":
        """
        Build configuration from a plain dict (e.g. parsed YAML).

        Missing sections use defaults.

        Raises:
            ValueError: If a section is malformed or has unknown keys
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

        unknown = set(data) - {"normalizer", "units"}
        if unknown:
            raise ValueError(
                f"Unknown configuration sections: {sorted(unknown)}. "
                f"Allowed: ['normalizer', 'units']"
            )

        return cls(
            normalizer=_build_section(NormalizerConfig, data.get("normalizer"), "normalizer"),
            units=_build_section(FormatConfig, data.get("units"), "units"),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "CoreConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            normalizer:
              multi_ring_field: "boundary_rings"
              single_ring_field: "boundary_coordinates"
              latitude_key: "latitude"
              longitude_key: "longitude"

            units:
              placeholder: "—"
              thousands_separator: ","

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML is invalid or fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        try:
            config = cls.from_dict(data)
        except (TypeError, ValueError) as e:
            logger.error(
                event=LogEvent.CONFIG_VALIDATION_ERROR,
                message="Rejected configuration",
                metadata={'path': str(path)},
                exc_info=e,
            )
            if isinstance(e, TypeError):
                raise ValueError(f"Invalid configuration in {path}: {e}") from e
            raise

        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded configuration",
            metadata={'path': str(path)},
        )
        return config
