"""
Tests for structured JSON logging.
"""

import json
import logging

from territory_core.logging import JSONFormatter, LogEvent, StructuredLogger, create_logger


def records_for(caplog, name):
    return [r for r in caplog.records if r.name == name]


def test_log_entry_structure(caplog):
    logger = create_logger("test_structure")
    caplog.set_level(logging.INFO, logger=logger.logger_name)

    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Loaded configuration",
        metadata={'path': 'territory.yaml'},
    )

    [record] = records_for(caplog, "territory_core.test_structure")
    entry = json.loads(record.getMessage())
    assert entry['level'] == 'INFO'
    assert entry['component'] == 'test_structure'
    assert entry['event'] == 'config.loaded'
    assert entry['message'] == 'Loaded configuration'
    assert entry['metadata'] == {'path': 'territory.yaml'}
    assert 'timestamp' in entry


def test_metadata_omitted_when_empty(caplog):
    logger = create_logger("test_no_metadata")
    caplog.set_level(logging.INFO, logger=logger.logger_name)

    logger.warning(event=LogEvent.UNITS_VALUE_INVALID, message="odd value")

    entry = json.loads(records_for(caplog, logger.logger_name)[0].getMessage())
    assert 'metadata' not in entry
    assert entry['level'] == 'WARNING'


def test_error_includes_exception(caplog):
    logger = create_logger("test_error")
    caplog.set_level(logging.INFO, logger=logger.logger_name)

    logger.error(
        event=LogEvent.CONFIG_VALIDATION_ERROR,
        message="Rejected configuration",
        exc_info=ValueError("bad separator"),
    )

    entry = json.loads(records_for(caplog, logger.logger_name)[0].getMessage())
    assert entry['exception'] == {'type': 'ValueError', 'message': 'bad separator'}


def test_disabled_level_emits_nothing(caplog):
    logger = create_logger("test_disabled")
    caplog.set_level(logging.INFO, logger=logger.logger_name)

    logger.debug(event=LogEvent.GEOMETRY_RINGS_NORMALIZED, message="hidden")

    assert records_for(caplog, logger.logger_name) == []


def test_set_level_enables_debug(caplog):
    logger = create_logger("test_set_level")
    caplog.set_level(logging.DEBUG, logger=logger.logger_name)

    logger.set_level(logging.INFO)
    logger.debug(event=LogEvent.GEOMETRY_RINGS_NORMALIZED, message="hidden")
    logger.set_level(logging.DEBUG)
    logger.debug(event=LogEvent.GEOMETRY_RINGS_NORMALIZED, message="visible")

    [record] = records_for(caplog, logger.logger_name)
    assert json.loads(record.getMessage())['message'] == "visible"


def test_unserializable_metadata_falls_back_to_repr(caplog):
    logger = create_logger("test_repr")
    caplog.set_level(logging.INFO, logger=logger.logger_name)

    logger.info(event=LogEvent.CONFIG_LOADED, message="odd", metadata={'value': object})

    entry = json.loads(records_for(caplog, logger.logger_name)[0].getMessage())
    assert entry['metadata']['value'] == repr(object)


def test_handler_installed_once():
    first = StructuredLogger("test_handlers")
    second = StructuredLogger("test_handlers")

    assert first.logger is second.logger
    assert len(second.logger.handlers) == 1
    assert isinstance(second.logger.handlers[0].formatter, JSONFormatter)
