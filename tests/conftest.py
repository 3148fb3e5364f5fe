"""Pytest configuration and fixtures."""

# pylint: disable=redefined-outer-name

import os
from dataclasses import dataclass, field
from typing import Optional

import pytest

from google_dns_api.core.client import GoogleDNSClient, reset_client
from google_dns_api.core.config import Settings

# Keep the host environment from leaking into tests
for _var in ("GOOGLE_DNS_ENDPOINT", "GOOGLE_DNS_PAD_TO_LENGTH", "GOOGLE_DNS_SENTRY_DSN"):
    os.environ.pop(_var, None)

TEST_ENDPOINT = "https://dns.google.com/resolve"


@dataclass
class FakeTransport:
    """Fake transport returning a canned response and recording calls."""

    status: int = 200
    body: bytes = b'{"Status": 0}'
    error: Optional[Exception] = None
    calls: list[dict] = field(default_factory=list)

    async def get(self, url, headers, timeout):
        self.calls.append({"url": str(url), "headers": dict(headers), "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.status, self.body


@pytest.fixture
def test_settings():
    """Provide test settings with predictable values."""
    return Settings(
        endpoint=TEST_ENDPOINT,
        timeout=2.0,
        user_agent="test-agent",
        pad_to_length=None,
        sentry_dsn=None,
        _env_file=None,
    )


@pytest.fixture
def fake_transport():
    """Create a fake transport."""
    return FakeTransport()


@pytest.fixture
def test_client(test_settings, fake_transport):
    """Create a client wired to the fake transport."""
    return GoogleDNSClient(settings=test_settings, transport=fake_transport)


@pytest.fixture(autouse=True)
def reset_default_client():
    """Reset the module-level client before and after each test."""
    reset_client()
    yield
    reset_client()
