"""Shared logging utilities for FastAPI applications and scripts."""

import logging

import common.settings


class HealthCheckFilter(logging.Filter):
    """Filter out health check requests from uvicorn access logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress health check log entries."""
        return '/health' not in record.getMessage()


def configure_logging(level: str | None = None) -> None:
    """Set the root log level and suppress health checks in uvicorn access logs.

    ``level`` defaults to the LOG_LEVEL setting.
    """
    logging.basicConfig(level=level or common.settings.LOG_LEVEL)
    access_logger = logging.getLogger('uvicorn.access')
    if not any(isinstance(f, HealthCheckFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthCheckFilter())
