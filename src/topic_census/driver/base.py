from collections.abc import Callable
from typing import Literal, Protocol, TypeVar

from bs4 import BeautifulSoup

T = TypeVar("T")

LoadCondition = Literal["load", "domcontentloaded", "networkidle", "commit"]

# An extractor is a pure function over the rendered document and the URL it
# was rendered from (needed to resolve relative links).
Extractor = Callable[[BeautifulSoup, str], T]


class PageDriver(Protocol):
    """Interface for the page-automation session shared by the whole crawl."""

    async def navigate(self, url: str, *, wait_until: LoadCondition | None = None) -> None:
        """Navigate to ``url`` and wait for the load condition.

        Args:
            url: Page to open.
            wait_until: Load condition; None uses the driver's default.

        Raises:
            Exception: Navigation failures propagate unchanged.
        """
        ...

    async def evaluate(self, extractor: Extractor[T]) -> T:
        """Run ``extractor`` against the currently rendered document.

        Args:
            extractor: Pure function of (document, page URL).

        Returns:
            Whatever the extractor returns.
        """
        ...

    async def try_interact(self, selector: str) -> bool:
        """Click the element matching ``selector`` if it exists.

        Never raises.

        Returns:
            True if the interaction happened.
        """
        ...

    async def scroll_height(self) -> int:
        """Current scrollable height of the document."""
        ...

    async def scroll_to_bottom(self) -> None:
        """Scroll the viewport to the bottom of the document."""
        ...
