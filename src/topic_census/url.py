"""URL handling utilities."""

from __future__ import annotations

import logging
from urllib.parse import urljoin, urlparse

logger = logging.getLogger(__name__)


def absolute_url(base_url: str, href: str | None) -> str | None:
    """Resolve an ``href`` attribute against the page it was found on.

    Mirrors what a browser reports for ``anchor.href``: relative links become
    absolute, fragments are kept.

    Args:
        base_url: URL of the rendered page.
        href: Raw attribute value, possibly relative or missing.

    Returns:
        The absolute URL, or None if ``href`` is missing or blank.
    """
    if href is None:
        return None
    href = href.strip()
    if not href:
        return None
    return urljoin(base_url, href)


def extract_domain(url: str) -> str:
    """Extract domain name from URL.

    Args:
        url: The URL to extract the domain from.

    Returns:
        The domain name (without 'www.' prefix), or "Unknown" if extraction fails.
    """
    domain = urlparse(url).netloc
    if not domain:
        logger.warning(f"Could not get domain from url {url}")
        return "Unknown"
    if domain.startswith("www."):
        domain = domain[4:]
    return domain
