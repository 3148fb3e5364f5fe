"""Client for Google's DNS-over-HTTPS JSON API."""

from google_dns_api.core.client import (
    GoogleDNSClient,
    resolve_dns,
    resolve_dns_sync,
)
from google_dns_api.core.query import DNSQuery, generate_padding
from google_dns_api.core.result import DNSResult
from google_dns_api.utils.exceptions import (
    DecodeError,
    GoogleDNSError,
    InvalidArgumentError,
    TransportError,
    UpstreamError,
)

__all__ = [
    "DNSQuery",
    "DNSResult",
    "DecodeError",
    "GoogleDNSClient",
    "GoogleDNSError",
    "InvalidArgumentError",
    "TransportError",
    "UpstreamError",
    "generate_padding",
    "resolve_dns",
    "resolve_dns_sync",
]
