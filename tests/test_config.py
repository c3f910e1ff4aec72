"""
Tests for YAML-backed configuration.
"""

import json
import logging

import pytest

from territory_core import CoreConfig, FormatConfig, NormalizerConfig, RingNormalizer, UnitsFormatter


def write(tmp_path, text, name="territory.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    config = CoreConfig()

    assert config.normalizer.multi_ring_field == "boundary_rings"
    assert config.normalizer.single_ring_field == "boundary_coordinates"
    assert config.normalizer.latitude_key == "latitude"
    assert config.normalizer.longitude_key == "longitude"
    assert config.units.placeholder == "—"
    assert config.units.thousands_separator == ","


def test_from_yaml_full(tmp_path):
    path = write(tmp_path, """
normalizer:
  multi_ring_field: rings
  single_ring_field: outline
  latitude_key: lat
  longitude_key: lng
units:
  placeholder: "n/a"
  thousands_separator: " "
""")

    config = CoreConfig.from_yaml(path)

    assert config.normalizer == NormalizerConfig("rings", "outline", "lat", "lng")
    assert config.units == FormatConfig(placeholder="n/a", thousands_separator=" ")


def test_from_yaml_partial_uses_defaults(tmp_path):
    path = write(tmp_path, "units:\n  thousands_separator: \"\"\n")

    config = CoreConfig.from_yaml(str(path))

    assert config.normalizer == NormalizerConfig()
    assert config.units.thousands_separator == ""
    assert config.units.placeholder == "—"


def test_empty_yaml_file_gives_defaults(tmp_path):
    assert CoreConfig.from_yaml(write(tmp_path, "")) == CoreConfig()


def test_loaded_config_drives_components(tmp_path):
    path = write(tmp_path, """
normalizer:
  single_ring_field: outline
units:
  thousands_separator: "'"
""")
    config = CoreConfig.from_yaml(path)

    normalizer = RingNormalizer(config.normalizer)
    formatter = UnitsFormatter(config.units)
    outline = [{'latitude': 0, 'longitude': 0}, {'latitude': 0, 'longitude': 1}, {'latitude': 1, 'longitude': 1}]

    assert len(normalizer.normalize({'outline': outline})) == 1
    assert formatter.area_square_meters(5000) == "5'000 m²"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CoreConfig.from_yaml(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    path = write(tmp_path, "units: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        CoreConfig.from_yaml(path)


@pytest.mark.parametrize("text, match", [
    ("colors: {}\n", "Unknown configuration sections"),
    ("units:\n  decimals: 3\n", "Unknown keys in 'units'"),
    ("units: 5\n", "must be a mapping"),
    ("- 1\n- 2\n", "must be a mapping"),
    ("normalizer:\n  multi_ring_field: a\n  single_ring_field: a\n", "must differ"),
    ("normalizer:\n  latitude_key: ''\n", "non-empty"),
    ("units:\n  placeholder: ''\n", "non-empty"),
    ("units:\n  thousands_separator: '--'\n", "at most one character"),
    ("units:\n  thousands_separator: '7'\n", "cannot be a digit"),
    ("units:\n  thousands_separator: '.'\n", "cannot be a digit"),
])
def test_invalid_configuration(tmp_path, text, match):
    with pytest.raises(ValueError, match=match):
        CoreConfig.from_yaml(write(tmp_path, text))


def test_validation_failure_is_logged(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger='territory_core.config')

    with pytest.raises(ValueError):
        CoreConfig.from_yaml(write(tmp_path, "colors: {}\n"))

    events = [json.loads(r.getMessage()) for r in caplog.records if r.name == 'territory_core.config']
    assert events[-1]['event'] == 'error.config_validation'
    assert events[-1]['level'] == 'ERROR'
    assert events[-1]['exception']['type'] == 'ValueError'


def test_successful_load_is_logged(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger='territory_core.config')
    path = write(tmp_path, "")

    CoreConfig.from_yaml(path)

    events = [json.loads(r.getMessage()) for r in caplog.records if r.name == 'territory_core.config']
    assert events[-1]['event'] == 'config.loaded'
    assert events[-1]['metadata'] == {'path': str(path)}


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ValueError):
        CoreConfig.from_dict(["normalizer"])
