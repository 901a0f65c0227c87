"""Empllo job feed connector.

The feed is a single public JSON document shaped ``{"jobs": [...]}``: no
authentication, no query parameters and no pagination. We fetch it once and
hand the body to the normalizer.

There is no retry here: a failed fetch is reported and the caller decides
whether to trigger another one.
"""

from __future__ import annotations

from typing import Any, List, Optional

import httpx

from ..config import DEFAULT_FEED_URL
from ..errors import NetworkError
from ..log import get_logger
from ..models import Job
from ..normalize import IdStrategy, normalize_feed
from .base import JobSource

log = get_logger(__name__)


class EmplloSource(JobSource):
    """Fetch the Empllo feed and normalize it."""

    name = "empllo"

    def __init__(
        self,
        base_url: str = DEFAULT_FEED_URL,
        timeout_s: float = 20.0,
        id_strategy: IdStrategy = "random",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self._timeout = timeout_s
        self._id_strategy = id_strategy
        self._transport = transport

    async def _get_payload(self) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                resp = await client.get(self.base_url)
                resp.raise_for_status()
                return resp.json()
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, httpx.CookieConflict) as exc:
            raise NetworkError(f"Request to {self.base_url} failed: {exc}") from exc
        except ValueError as exc:
            raise NetworkError(f"Response from {self.base_url} is not valid JSON: {exc}") from exc

    async def fetch(self) -> List[Job]:
        """Fetch the feed and return a list of normalized Job records."""
        log.info("Fetching jobs from %s", self.base_url)
        payload = await self._get_payload()
        jobs = normalize_feed(payload, id_strategy=self._id_strategy, source=self.base_url)
        log.info("Fetched %d jobs from %s", len(jobs), self.name)
        return jobs
