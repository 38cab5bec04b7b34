"""Article detail extraction from an author's homepage."""

from bs4 import BeautifulSoup

from topic_census.data import ArticleDetail
from topic_census.extract import selectors
from topic_census.extract.text import count_after_icon, format_publish_time
from topic_census.url import absolute_url


def extract_article_details(document: BeautifulSoup, page_url: str) -> list[ArticleDetail]:
    """Extract read counts and publish times from a fully paginated homepage.

    One record is produced per listing item. Items without a title link give
    an empty record (``url=None``) which callers must discard.
    """
    details: list[ArticleDetail] = []
    for item in document.select(selectors.NOTE_ITEM):
        title = item.select_one(selectors.NOTE_TITLE)
        if title is None:
            details.append(ArticleDetail(url=None))
            continue

        time_el = item.select_one(selectors.PUBLISH_TIME)
        raw_time = time_el.get(selectors.PUBLISH_TIME_ATTR) if time_el is not None else None
        details.append(
            ArticleDetail(
                url=absolute_url(page_url, title.get("href")),
                read_count=count_after_icon(item, selectors.READ_ICON),
                publish_time=format_publish_time(raw_time),
            )
        )
    return details
