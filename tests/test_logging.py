import json
import logging

from sextant_expression.logging import LogEvent, configure_logging, create_logger


def test_component_loggers_inherit_package_level():
    logger = create_logger("expression.test")
    assert logger.logger.name == "sextant.expression.test"
    assert logger.logger.level == logging.NOTSET

    configure_logging(logging.DEBUG)
    assert logger.logger.isEnabledFor(logging.DEBUG)

    configure_logging(logging.ERROR)
    assert not logger.logger.isEnabledFor(logging.INFO)


def test_entries_are_json(caplog):
    configure_logging(logging.DEBUG)
    logger = create_logger("expression.test")

    logger.debug(
        event=LogEvent.EXPRESSION_EVALUATED,
        message="Evaluated",
        metadata={'distance': 12.5},
    )

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["level"] == "DEBUG"
    assert entry["component"] == "expression.test"
    assert entry["event"] == "expression.evaluated"
    assert entry["metadata"] == {'distance': 12.5}


def test_error_carries_exception(caplog):
    logger = create_logger("expression.test")

    logger.error(
        event=LogEvent.SERIALIZATION_ERROR,
        message="Failed",
        exc_info=ValueError("bad document"),
    )

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["exception"] == {"type": "ValueError", "message": "bad document"}


def test_disabled_level_emits_nothing(caplog):
    configure_logging(logging.INFO)
    create_logger("expression.test").debug(
        event=LogEvent.EXPRESSION_PARSED,
        message="Parsed",
    )
    assert not [r for r in caplog.records if r.name == "sextant.expression.test"]
