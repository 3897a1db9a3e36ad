"""Tests for structured logging context."""

from uuid import uuid4

import pytest
import structlog

from src.pantheon.core.config import get_settings
from src.pantheon.core.logging import (
    bind_cycle_context,
    bind_job_context,
    clear_log_context,
    loggable_email,
    setup_logging,
)

pytestmark = pytest.mark.unit


def test_bind_job_context(capturing_logger):
    job_id = uuid4()

    bind_job_context(job_id, "export_users")
    structlog.get_logger().info("progress")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["job_id"] == str(job_id)
    assert entries[0].kwargs["job_type"] == "export_users"


def test_bind_job_context_without_type(capturing_logger):
    bind_job_context(uuid4())
    structlog.get_logger().info("progress")

    assert "job_type" not in capturing_logger.calls[0].kwargs


def test_bind_cycle_context(capturing_logger):
    cycle_id = uuid4()

    bind_cycle_context(cycle_id)
    structlog.get_logger().info("test message")

    assert capturing_logger.calls[0].kwargs["project_cycle_id"] == str(cycle_id)


def test_clear_log_context(capturing_logger):
    bind_job_context(uuid4(), "airtable_import_base")
    bind_cycle_context(uuid4())

    clear_log_context()
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert "job_id" not in kwargs
    assert "project_cycle_id" not in kwargs


def test_emails_masked_by_default():
    assert loggable_email("ada.lovelace@example.org") == "a***@example.org"


def test_emails_logged_when_enabled(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_VOLUNTEER_EMAILS", "true")
    get_settings.cache_clear()
    try:
        assert loggable_email("ada.lovelace@example.org") == "ada.lovelace@example.org"
    finally:
        monkeypatch.delenv("LOG_VOLUNTEER_EMAILS")
        get_settings.cache_clear()


@pytest.mark.parametrize("debug", [True, False])
def test_setup_logging(debug):
    old_config = structlog.get_config()
    try:
        setup_logging(debug=debug)

        renderer = structlog.get_config()["processors"][-1]
        expected = structlog.dev.ConsoleRenderer if debug else structlog.processors.JSONRenderer
        assert isinstance(renderer, expected)
    finally:
        structlog.configure(**old_config)
