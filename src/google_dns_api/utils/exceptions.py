"""Custom exceptions and error handling utilities."""

import logging
from typing import Any, Optional

import sentry_sdk

from google_dns_api.core.config import get_settings

logger = logging.getLogger(__name__)


class GoogleDNSError(Exception):
    """Base exception for Google DNS API errors."""


class InvalidArgumentError(GoogleDNSError, ValueError):
    """Query parameters were rejected before any request was made."""


class UpstreamError(GoogleDNSError):
    """Upstream answered with a status outside the 2xx range."""

    def __init__(self, status: int, body: Any = None):
        super().__init__(f"Status: {status}")
        self.status = status
        self.body = body


class TransportError(GoogleDNSError):
    """The request never produced an HTTP response."""


class DecodeError(GoogleDNSError):
    """A successful response carried a body that is not valid JSON."""


def capture_exception(
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "error",
) -> None:
    """
    Capture exception to Sentry if configured, otherwise log it.

    Args:
        exception: The exception to capture
        context: Additional context to include
        level: Log level ('error', 'warning', 'info')
    """
    settings = get_settings()

    # Log locally
    log_func = getattr(logger, level, logger.error)
    log_func("%s: %s", type(exception).__name__, exception, exc_info=True)

    # Send to Sentry if configured
    if settings.sentry_dsn:
        if context:
            with sentry_sdk.new_scope() as scope:
                for key, value in context.items():
                    scope.set_extra(key, value)
                sentry_sdk.capture_exception(exception)
        else:
            sentry_sdk.capture_exception(exception)


def is_expected_client_error(exception: Exception) -> bool:
    """Check if exception is a client outcome callers are expected to handle."""
    return isinstance(exception, GoogleDNSError)
