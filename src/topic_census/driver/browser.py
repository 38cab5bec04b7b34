"""Headless-browser page driver backed by Playwright."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from bs4 import BeautifulSoup
from playwright.async_api import async_playwright

from topic_census.driver.base import Extractor, LoadCondition
from topic_census.safe import safe_call

if TYPE_CHECKING:
    from playwright.async_api import Browser, BrowserContext, Page, Playwright

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SCROLL_HEIGHT_JS = "() => document.body.scrollHeight"
_SCROLL_TO_BOTTOM_JS = "() => window.scrollTo(0, document.body.scrollHeight)"


class PlaywrightDriver:
    """Drive a single Chromium page through the whole crawl.

    Use as an async context manager; the browser is launched on enter and
    closed on exit. Every navigation reuses the same page.

    Args:
        headless: Launch the browser without a window.
        navigation_timeout: Seconds to wait for a navigation; 0 waits forever.
        wait_until: Default load condition for ``navigate``.
        interaction_timeout: Seconds ``try_interact`` waits for its element.
        user_agent: Optional user agent override.
    """

    def __init__(
        self,
        *,
        headless: bool = True,
        navigation_timeout: float = 60.0,
        wait_until: LoadCondition = "networkidle",
        interaction_timeout: float = 5.0,
        user_agent: str | None = None,
    ) -> None:
        self._headless = headless
        self._navigation_timeout = navigation_timeout
        self._wait_until = wait_until
        self._interaction_timeout = interaction_timeout
        self._user_agent = user_agent
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def __aenter__(self) -> PlaywrightDriver:
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(headless=self._headless)
        self._context = await self._browser.new_context(user_agent=self._user_agent)
        self._page = await self._context.new_page()
        self._page.set_default_navigation_timeout(self._navigation_timeout * 1000)
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._context is not None:
            await self._context.close()
            self._context = None
        if self._browser is not None:
            await self._browser.close()
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None
        self._page = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("PlaywrightDriver is not started; use it as 'async with'")
        return self._page

    async def navigate(self, url: str, *, wait_until: LoadCondition | None = None) -> None:
        logger.debug(f"Navigating to {url}")
        await self.page.goto(url, wait_until=wait_until or self._wait_until)

    async def evaluate(self, extractor: Extractor[T]) -> T:
        html = await self.page.content()
        return extractor(BeautifulSoup(html, "html.parser"), self.page.url)

    async def try_interact(self, selector: str) -> bool:
        error, _ = await safe_call(
            lambda: self.page.click(selector, timeout=self._interaction_timeout * 1000)
        )
        if error is not None:
            logger.debug(f"Interaction with {selector!r} skipped: {error}")
            return False
        return True

    async def scroll_height(self) -> int:
        return int(await self.page.evaluate(_SCROLL_HEIGHT_JS))

    async def scroll_to_bottom(self) -> None:
        await self.page.evaluate(_SCROLL_TO_BOTTOM_JS)
