"""Lazy-load pagination by auto-scrolling."""

import asyncio
import logging
import time

from topic_census.driver.base import PageDriver

logger = logging.getLogger(__name__)


class Paginator:
    """Scroll a listing until it stops growing, so extraction sees every item.

    After each scroll the paginator waits one poll interval and compares the
    document height with the previous poll; equal heights end pagination.

    Args:
        poll_interval: Seconds to wait after each scroll.
        timeout: Overall seconds before giving up with ``TimeoutError``;
            None disables the guard.
    """

    def __init__(self, *, poll_interval: float = 0.5, timeout: float | None = 300.0) -> None:
        self._poll_interval = poll_interval
        self._timeout = timeout

    async def paginate(self, driver: PageDriver) -> None:
        """Scroll the current page to its stable bottom.

        Args:
            driver: Driver already navigated to the listing.

        Raises:
            TimeoutError: If the height keeps growing past ``timeout``.
        """
        started = time.monotonic()
        last_height = await driver.scroll_height()
        rounds = 0
        while True:
            await driver.scroll_to_bottom()
            await asyncio.sleep(self._poll_interval)
            rounds += 1
            height = await driver.scroll_height()
            if height == last_height:
                break
            last_height = height
            if self._timeout is not None and time.monotonic() - started > self._timeout:
                msg = f"Listing still growing after {self._timeout}s ({rounds} scrolls)"
                raise TimeoutError(msg)

        logger.debug(f"Pagination settled after {rounds} scrolls at height {height}")
