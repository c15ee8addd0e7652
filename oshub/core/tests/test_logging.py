"""Tests for ContextualLogger and LoggerConfigurator."""

import json
import logging

from pythonjsonlogger.json import JsonFormatter

from oshub.core.config import Environment
from oshub.core.logging import ContextualLogger, LoggerConfigurator, logger


def test_with_context_accumulates_dimensions():
    log = logger.with_context(event_type="account.created").with_context(uid="u1")
    assert log.dimensions == {"event_type": "account.created", "uid": "u1"}


def test_with_context_does_not_mutate_parent():
    parent = logger.with_context(a=1)
    parent.with_context(b=2)
    assert parent.dimensions == {"a": 1}


def test_dimensions_land_on_record(caplog):
    with caplog.at_level(logging.INFO, logger="oshub"):
        logger.with_context(profile_id="p1", user_id="u1").info("Profile changed")

    record = caplog.records[-1]
    assert record.getMessage() == "Profile changed"
    assert record.profile_id == "p1"
    assert record.user_id == "u1"


def test_call_site_extra_overrides_dimensions(caplog):
    with caplog.at_level(logging.INFO, logger="oshub"):
        logger.with_context(uid="u1").info("hi", extra={"uid": "u2"})

    assert caplog.records[-1].uid == "u2"


def test_with_prefix(caplog):
    with caplog.at_level(logging.INFO, logger="oshub"):
        logger.with_prefix("Segment: ").with_context(uid="u1").info("flushed")

    assert caplog.records[-1].getMessage() == "Segment: flushed"


def test_configure_logger_returns_named_contextual_logger():
    log = LoggerConfigurator.configure_logger("oshub.test", {"component": "test"})
    assert isinstance(log, ContextualLogger)
    assert log.logger.name == "oshub.test"
    assert log.dimensions == {"component": "test"}


def test_json_formatter_outside_local(monkeypatch):
    monkeypatch.setattr("oshub.core.logging.settings.ENVIRONMENT", Environment.PRD)
    formatter = LoggerConfigurator._build_formatter()
    assert isinstance(formatter, JsonFormatter)

    record = logging.LogRecord("oshub", logging.ERROR, __file__, 1, "boom", None, None)
    record.profile_id = "p1"
    payload = json.loads(formatter.format(record))
    assert payload["severity"] == "ERROR"
    assert payload["message"] == "boom"
    assert payload["profile_id"] == "p1"


def test_plain_formatter_locally(monkeypatch):
    monkeypatch.setattr("oshub.core.logging.settings.ENVIRONMENT", Environment.LOCAL)
    formatter = LoggerConfigurator._build_formatter()
    assert not isinstance(formatter, JsonFormatter)
