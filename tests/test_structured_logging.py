"""Tests for structlog setup."""

import importlib

import structlog

import structured_logging


def test_import_keeps_existing_structlog_config():
    marker = [structlog.processors.KeyValueRenderer()]
    structlog.configure(processors=marker)
    try:
        importlib.reload(structured_logging)
        assert structlog.get_config()["processors"] == marker
    finally:
        structlog.reset_defaults()
        importlib.reload(structured_logging)


def test_import_sets_up_silent_defaults_when_unconfigured():
    structlog.reset_defaults()
    importlib.reload(structured_logging)
    assert structlog.is_configured()
    assert structlog.get_config()["wrapper_class"] is structlog.stdlib.BoundLogger


def test_configure_logging_switches_renderer():
    structured_logging.configure_logging("DEBUG", "json")
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    structured_logging.configure_logging("INFO", "text")
    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
