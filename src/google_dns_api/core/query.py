"""Query validation and request URL building."""

import ipaddress
import re
import secrets
import string
from dataclasses import dataclass
from typing import Optional, Union

import dns.exception
import dns.name
import dns.rdatatype
from yarl import URL

from google_dns_api.utils.exceptions import InvalidArgumentError

# Unreserved URL characters (RFC 3986), safe for random_padding
PADDING_ALPHABET = string.ascii_letters + string.digits + "-._~"
_PADDING_RE = re.compile(r"^[A-Za-z0-9._~-]*$")

MIN_RR_TYPE = 1
MAX_RR_TYPE = 65535


def generate_padding(length: int) -> str:
    """Return `length` random unreserved URL characters."""
    if length < 0:
        raise InvalidArgumentError("Padding length must not be negative.")

    return "".join(secrets.choice(PADDING_ALPHABET) for _ in range(length))


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def normalize_name(name: Optional[str]) -> str:
    """
    Validate a domain name and return it in the form sent upstream.

    Names must be 1 to 253 characters (ignoring a trailing dot) with labels of
    1 to 63 bytes. Internationalized names are converted to punycode.
    """
    if _blank(name):
        raise InvalidArgumentError("Please provide the Name.")

    try:
        parsed = dns.name.from_text(name.strip())
    except (dns.exception.DNSException, UnicodeError) as e:
        raise InvalidArgumentError(f"Invalid name {name!r}: {e}") from e

    return parsed.to_text(omit_final_dot=True)


def normalize_type(rr_type: Union[str, int, None]) -> Optional[str]:
    """
    Validate an RR type and return its canonical text.

    Accepts a number in [1, 65535] or a mnemonic such as ``A`` or ``aaaa``.
    Returns None when no type was given.
    """
    if rr_type is None:
        return None

    if isinstance(rr_type, bool):
        raise InvalidArgumentError(f"Invalid type {rr_type!r}")

    if isinstance(rr_type, int):
        code = rr_type
    else:
        text = str(rr_type).strip()

        if not text:
            return None

        if text.isascii() and text.isdigit():
            code = int(text)
        else:
            try:
                rdtype = dns.rdatatype.from_text(text)
            except (dns.exception.DNSException, ValueError) as e:
                raise InvalidArgumentError(f"Invalid type {rr_type!r}") from e

            if not MIN_RR_TYPE <= int(rdtype) <= MAX_RR_TYPE:
                raise InvalidArgumentError(f"Invalid type {rr_type!r}")

            return dns.rdatatype.to_text(rdtype)

    if not MIN_RR_TYPE <= code <= MAX_RR_TYPE:
        raise InvalidArgumentError(
            f"Type must be between {MIN_RR_TYPE} and {MAX_RR_TYPE}, got {code}"
        )

    return str(code)


def normalize_client_subnet(client_subnet: Optional[str]) -> Optional[str]:
    """Validate an EDNS client subnet such as ``1.2.3.4/24``."""
    if _blank(client_subnet):
        return None

    try:
        ipaddress.ip_network(client_subnet, strict=False)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid client subnet {client_subnet!r}") from e

    return client_subnet


def normalize_padding(padding: Optional[str]) -> Optional[str]:
    """Validate random padding; only unreserved URL characters are allowed."""
    if not padding:
        return None

    if not _PADDING_RE.match(padding):
        raise InvalidArgumentError(
            "Padding may only contain letters, digits, '-', '.', '_' and '~'."
        )

    return padding


@dataclass
class DNSQuery:
    """A validated resolve request. Absent fields are never sent upstream."""

    name: str
    type: Union[str, int, None] = None
    checking_disabled: Optional[bool] = None
    client_subnet: Optional[str] = None
    padding: Optional[str] = None

    def __post_init__(self):
        self.name = normalize_name(self.name)
        self.type = normalize_type(self.type)
        self.client_subnet = normalize_client_subnet(self.client_subnet)
        self.padding = normalize_padding(self.padding)

    def params(self) -> list[tuple[str, str]]:
        """Return the query parameters in their fixed wire order."""
        params = [("name", self.name)]

        if self.type is not None:
            params.append(("type", self.type))

        # cd=false is dropped: no cd parameter already means validation on
        if self.checking_disabled:
            params.append(("cd", "1"))

        if self.client_subnet is not None:
            params.append(("edns_client_subnet", self.client_subnet))

        if self.padding is not None:
            params.append(("random_padding", self.padding))

        return params

    def build_url(self, endpoint: str) -> URL:
        """Build the GET request URL against `endpoint`."""
        return URL(endpoint).with_query(self.params())

    def padded(self, endpoint: str, target_length: int) -> "DNSQuery":
        """
        Return a copy padded so that its URL is `target_length` characters.

        Queries that already carry padding, or whose URL is already at least
        that long, are returned unchanged.
        """
        if self.padding is not None:
            return self

        overhead = len(str(self.build_url(endpoint))) + len("&random_padding=")
        missing = target_length - overhead

        if missing <= 0:
            return self

        return DNSQuery(
            name=self.name,
            type=self.type,
            checking_disabled=self.checking_disabled,
            client_subnet=self.client_subnet,
            padding=generate_padding(missing),
        )
