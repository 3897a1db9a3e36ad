"""Logging configuration using structlog."""

import logging
import sys
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

from src.pantheon.core.config import get_settings


def setup_logging(debug: bool = False) -> None:
    """Configure structlog for structured logging.

    Args:
        debug: If True, use colored console output. If False, use JSON for production.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = shared_processors + [structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Set library log levels to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("alembic").setLevel(logging.INFO)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name.

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)


def bind_job_context(job_id: UUID, job_type: str | None = None) -> None:
    """Bind job-level context for integration workers reporting progress.

    Args:
        job_id: The job being executed.
        job_type: The job's `jobType` discriminator, if known.
    """
    bind_contextvars(job_id=str(job_id))
    if job_type:
        bind_contextvars(job_type=job_type)


def bind_cycle_context(cycle_id: UUID) -> None:
    """Bind the project cycle an operation is scoped to."""
    bind_contextvars(project_cycle_id=str(cycle_id))


def clear_log_context() -> None:
    """Clear all bound context."""
    clear_contextvars()


def loggable_email(email: str) -> str:
    """Return `email` for log context, masked unless LOG_VOLUNTEER_EMAILS is set."""
    if get_settings().log_volunteer_emails:
        return email
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}"
