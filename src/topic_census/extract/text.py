"""Parsing helpers for counters and timestamps found in listings."""

from __future__ import annotations

import logging
import re
from datetime import datetime

from bs4 import Tag

logger = logging.getLogger(__name__)

PUBLISH_TIME_FORMAT = "%Y-%m-%d %H:%M"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_count(text: str | None) -> int:
    """Parse the leading integer of a counter label, defaulting to 0.

    Examples:
        >>> parse_count(" 128\\n")
        128
        >>> parse_count("")
        0
    """
    if not text:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def count_after_icon(container: Tag | None, icon_selector: str) -> int:
    """Read the counter in the text node that follows an icon element.

    Listings render counters as ``<i class="ic-..."></i> 42``. A missing icon
    or a missing/non-text sibling yields 0.
    """
    if container is None:
        return 0
    icon = container.select_one(icon_selector)
    if icon is None:
        return 0
    sibling = icon.next_sibling
    if sibling is None or isinstance(sibling, Tag):
        return 0
    return parse_count(str(sibling))


def format_publish_time(raw: str | None) -> str | None:
    """Format an ISO-8601 timestamp as ``YYYY-MM-DD HH:mm``.

    The wall-clock time is kept in the timestamp's own offset.

    Returns:
        The formatted time, or None if ``raw`` is missing or unparsable.
    """
    if not raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw.strip())
    except ValueError:
        logger.warning(f"Unparsable publish time {raw!r}")
        return None
    return parsed.strftime(PUBLISH_TIME_FORMAT)
