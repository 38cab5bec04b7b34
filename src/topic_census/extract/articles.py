"""Article stub extraction from a topic listing."""

import logging

from bs4 import BeautifulSoup

from topic_census.data import ArticleStub
from topic_census.extract import selectors
from topic_census.extract.text import count_after_icon
from topic_census.url import absolute_url

logger = logging.getLogger(__name__)


def extract_article_stubs(document: BeautifulSoup, page_url: str) -> list[ArticleStub]:
    """Extract article stubs from a fully paginated topic listing.

    Entries without a title or an author nickname are skipped. Star and
    comment counters sit next to the nickname; missing counters read as 0.

    Args:
        document: Rendered topic page.
        page_url: URL the page was rendered from.

    Returns:
        Stubs in document order.
    """
    stubs: list[ArticleStub] = []
    skipped = 0
    for item in document.select(selectors.NOTE_ITEM):
        title = item.select_one(selectors.NOTE_TITLE)
        author = item.select_one(selectors.NOTE_AUTHOR)
        if title is None or author is None:
            skipped += 1
            continue

        meta = author.parent
        stubs.append(
            ArticleStub(
                title=title.get_text().strip(),
                url=absolute_url(page_url, title.get("href")) or "",
                author_name=author.get_text().strip(),
                author_home_url=absolute_url(page_url, author.get("href")) or "",
                star_count=count_after_icon(meta, selectors.STAR_ICON),
                comment_count=count_after_icon(meta, selectors.COMMENT_ICON),
            )
        )

    if skipped:
        logger.debug(f"Skipped {skipped} malformed entries on {page_url}")
    return stubs
