"""HTTP transport for the upstream resolver."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Mapping, Protocol, Tuple

import aiohttp
from yarl import URL

from google_dns_api.utils.exceptions import TransportError

logger = logging.getLogger(__name__)


class HttpTransport(Protocol):
    """Protocol for issuing a single GET request."""

    async def get(
        self, url: URL, headers: Mapping[str, str], timeout: float
    ) -> Tuple[int, bytes]: ...


@dataclass
class AiohttpTransport:
    """
    Default transport using aiohttp.

    A session is opened per request; nothing is shared between calls.
    """

    async def get(
        self, url: URL, headers: Mapping[str, str], timeout: float
    ) -> Tuple[int, bytes]:
        client_timeout = aiohttp.ClientTimeout(total=timeout)

        try:
            async with aiohttp.ClientSession(timeout=client_timeout) as session:
                async with session.get(url, headers=dict(headers)) as resp:
                    body = await resp.read()
                    logger.debug("GET %s -> %d (%d bytes)", url, resp.status, len(body))
                    return resp.status, body

        except asyncio.TimeoutError as e:
            raise TransportError(
                f"Request to {url.host} timed out after {timeout}s"
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {url.host} failed: {e}") from e
