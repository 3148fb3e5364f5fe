"""Discriminated outcome of a resolve call."""

from dataclasses import dataclass
from typing import Any, Optional

from google_dns_api.utils.exceptions import GoogleDNSError


@dataclass(frozen=True)
class DNSResult:
    """Either the upstream JSON payload or the typed error, never both."""

    value: Any = None
    error: Optional[GoogleDNSError] = None

    def __post_init__(self):
        if self.error is not None and self.value is not None:
            raise ValueError("DNSResult cannot carry both a value and an error")

    @classmethod
    def success(cls, value: Any) -> "DNSResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: GoogleDNSError) -> "DNSResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the payload, or raise the carried error."""
        if self.error is not None:
            raise self.error

        return self.value
