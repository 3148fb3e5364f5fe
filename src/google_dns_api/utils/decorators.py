"""Decorators for error handling and monitoring."""

import asyncio
import functools
from typing import Callable, TypeVar

import sentry_sdk

from google_dns_api.core.config import get_settings
from google_dns_api.utils.exceptions import capture_exception, is_expected_client_error

F = TypeVar("F", bound=Callable)


def _report(exc: Exception, kwargs: dict) -> None:
    if is_expected_client_error(exc):
        return

    # Only plain request values go to Sentry as context
    context = {
        key: value
        for key, value in kwargs.items()
        if isinstance(value, (str, int, float, bool))
    }
    capture_exception(exc, context or None)


def sentry_exception_catcher(func: F) -> F:
    """
    Decorator to catch exceptions and report to Sentry.

    Works with both sync and async functions. Unexpected exceptions go
    through capture_exception with the call's plain keyword arguments as
    context; expected client outcomes are not reported.
    """

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            _report(e, kwargs)
            raise

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            _report(e, kwargs)
            raise

    if asyncio.iscoroutinefunction(func):
        return async_wrapper  # type: ignore
    return sync_wrapper  # type: ignore


def init_sentry() -> None:
    """Initialize Sentry SDK if configured."""
    settings = get_settings()

    if not settings.sentry_dsn:
        return

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )
