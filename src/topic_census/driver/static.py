"""Plain-HTTP page driver for listings that render server-side."""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from bs4 import BeautifulSoup

from topic_census.driver.base import Extractor, LoadCondition

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


class StaticDriver:
    """Fetch pages with httpx and extract from the returned HTML.

    No scripts run, so lazy-loaded items never appear: the scroll height is
    constant and the Paginator stops after one poll. Interactions always
    report failure.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User agent header sent with every request.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._timeout = timeout
        self._user_agent = user_agent
        self._client: httpx.AsyncClient | None = None
        self._html = ""
        self._url = ""

    async def __aenter__(self) -> StaticDriver:
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            headers={"User-Agent": self._user_agent},
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def navigate(self, url: str, *, wait_until: LoadCondition | None = None) -> None:
        """Fetch ``url``; ``wait_until`` is accepted for protocol compatibility."""
        if self._client is None:
            raise RuntimeError("StaticDriver is not started; use it as 'async with'")
        logger.debug(f"Fetching {url}")
        response = await self._client.get(url)
        response.raise_for_status()
        self._html = response.text
        self._url = str(response.url)

    async def evaluate(self, extractor: Extractor[T]) -> T:
        return extractor(BeautifulSoup(self._html, "html.parser"), self._url)

    async def try_interact(self, selector: str) -> bool:
        logger.debug(f"Static pages cannot be interacted with; skipping {selector!r}")
        return False

    async def scroll_height(self) -> int:
        return 0

    async def scroll_to_bottom(self) -> None:
        return None
