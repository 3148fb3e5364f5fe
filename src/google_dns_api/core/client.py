"""Google DNS-over-HTTPS JSON API client."""

# pylint: disable=redefined-builtin

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from yarl import URL

from google_dns_api.core.config import Settings, get_settings
from google_dns_api.core.query import DNSQuery
from google_dns_api.core.result import DNSResult
from google_dns_api.core.transport import AiohttpTransport, HttpTransport
from google_dns_api.utils.exceptions import DecodeError, GoogleDNSError, UpstreamError

logger = logging.getLogger(__name__)


def is_status_ok(code: int) -> bool:
    """Check if HTTP status code is a success (2xx)."""
    return 200 <= code < 300


def _decode_error_body(body: bytes) -> Any:
    """Best-effort decode of a non-2xx body: parsed JSON, else raw text."""
    try:
        return json.loads(body)
    except ValueError:
        return body.decode("utf-8", errors="replace")


@dataclass
class GoogleDNSClient:
    """Resolves names against the Google DNS-over-HTTPS JSON endpoint."""

    settings: Settings = field(default_factory=get_settings)
    transport: HttpTransport = field(default_factory=AiohttpTransport)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": self.settings.user_agent,
        }

    def build_url(self, query: DNSQuery) -> URL:
        """Build the request URL, applying auto-padding when configured."""
        endpoint = self.settings.endpoint

        if self.settings.auto_padding:
            query = query.padded(endpoint, self.settings.pad_to_length)

        return query.build_url(endpoint)

    async def resolve(self, query: DNSQuery) -> Any:
        """
        Issue one GET for `query` and return the parsed JSON body.

        Raises:
            UpstreamError: status outside 200-299
            DecodeError: 2xx body that is not valid JSON
            TransportError: no HTTP response was received
        """
        url = self.build_url(query)
        logger.debug("Resolving %s via %s", query.name, url)

        status, body = await self.transport.get(
            url, self.headers, self.settings.timeout
        )

        if not is_status_ok(status):
            raise UpstreamError(status, _decode_error_body(body))

        try:
            return json.loads(body)
        except ValueError as e:
            raise DecodeError(f"Invalid JSON in response from {url.host}: {e}") from e

    async def resolve_dns(
        self,
        name: str,
        type: Union[str, int, None] = None,
        cd: Optional[bool] = None,
        client_subnet: Optional[str] = None,
        padding: Optional[str] = None,
    ) -> DNSResult:
        """
        Resolve DNS for `name`.

        Args:
            name: Domain to resolve. Required; 1 to 253 characters, labels of
                1 to 63 bytes. Internationalized names are sent as punycode.
            type: RR type as a number in [1, 65535] or a canonical string
                (case-insensitive, such as A or aaaa).
            cd: The CD (checking disabled) bit. True disables DNSSEC
                validation.
            client_subnet: The edns0-client-subnet option, an IP address
                with a subnet mask such as 1.2.3.4/24. Use 0.0.0.0/0 to keep
                any part of the client address from being forwarded.
            padding: Ignored by upstream; pads the request URL to hide its
                size. Restricted to unreserved URL characters.

        Returns:
            DNSResult holding the upstream JSON or the typed error.
        """
        try:
            query = DNSQuery(
                name=name,
                type=type,
                checking_disabled=cd,
                client_subnet=client_subnet,
                padding=padding,
            )
            return DNSResult.success(await self.resolve(query))
        except GoogleDNSError as e:
            return DNSResult.failure(e)


# Default client instance
_client: Optional[GoogleDNSClient] = None


def get_client() -> GoogleDNSClient:
    """Get or create the default client."""
    global _client  # pylint: disable=global-statement

    if _client is None:
        _client = GoogleDNSClient()

    return _client


def set_client(client: GoogleDNSClient) -> None:
    """Set a custom client (useful for testing)."""
    global _client  # pylint: disable=global-statement

    _client = client


def reset_client() -> None:
    """Reset the default client (useful for testing)."""
    global _client  # pylint: disable=global-statement

    _client = None


async def resolve_dns(
    name: str,
    type: Union[str, int, None] = None,
    cd: Optional[bool] = None,
    client_subnet: Optional[str] = None,
    padding: Optional[str] = None,
) -> DNSResult:
    """Resolve DNS with the default client."""
    return await get_client().resolve_dns(name, type, cd, client_subnet, padding)


def resolve_dns_sync(
    name: str,
    type: Union[str, int, None] = None,
    cd: Optional[bool] = None,
    client_subnet: Optional[str] = None,
    padding: Optional[str] = None,
) -> DNSResult:
    """Blocking variant of resolve_dns for callers without an event loop."""
    return asyncio.run(resolve_dns(name, type, cd, client_subnet, padding))
