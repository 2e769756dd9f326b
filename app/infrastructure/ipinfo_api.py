"""ipinfo.io Lite HTTP client.

One GET per lookup, fixed timeout, no retries. A 429 is surfaced as its
own error so callers can hand the retry hint back to the client.
"""

from typing import Any, Dict, Optional

import httpx
import structlog

from app.config import Settings
from app.core.exceptions import RateLimitExceededException, UpstreamServiceException

logger = structlog.get_logger(__name__)


class IpInfoClient:
    """Client for the ipinfo.io Lite lookup API."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 15.0,
        retry_after: int = 3600,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.retry_after = retry_after
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "IpInfoClient":
        return cls(
            base_url=settings.IPINFO_BASE_URL,
            token=settings.IPINFO_TOKEN,
            timeout=settings.GEO_TIMEOUT_SECONDS,
            retry_after=settings.GEO_RETRY_AFTER_SECONDS,
        )

    async def lookup(self, ip: str) -> Dict[str, Any]:
        """Fetch the raw ipinfo payload for an address."""
        url = f"{self.base_url}/{ip}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params={"token": self.token})
        except httpx.HTTPError as e:
            logger.warning("ipinfo connection error", ip=ip, error=str(e))
            raise UpstreamServiceException(f"Failed to fetch geo data: {e}") from e

        if response.status_code == 429:
            logger.warning("ipinfo rate limit exceeded", ip=ip)
            raise RateLimitExceededException(
                "Geo API rate limit exceeded. Please try again later.",
                retry_after=self.retry_after,
            )

        if response.is_error:
            logger.warning(
                "ipinfo lookup failed",
                ip=ip,
                status_code=response.status_code,
                body=response.text[:200],
            )
            raise UpstreamServiceException(
                f"Failed to fetch geo data: {response.status_code} {response.reason_phrase}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamServiceException("Geo API returned an invalid response") from e
