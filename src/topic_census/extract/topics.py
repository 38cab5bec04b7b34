"""Topic discovery from an account profile page."""

import logging

from bs4 import BeautifulSoup

from topic_census.data import Topic
from topic_census.extract import selectors
from topic_census.url import absolute_url

logger = logging.getLogger(__name__)


def extract_topics(
    document: BeautifulSoup,
    page_url: str,
    *,
    section_label: str = selectors.TOPIC_SECTION_LABEL,
) -> list[Topic]:
    """Extract the topics listed under the account's own-collections heading.

    The section is the element immediately after the heading whose text is
    exactly ``section_label``. A profile without that heading owns no topics.

    Args:
        document: Rendered profile page.
        page_url: URL the page was rendered from.
        section_label: Heading text of the collections section.

    Returns:
        Topics in document order, with no articles attached.
    """
    heading = next(
        (
            el
            for el in document.select(selectors.SECTION_HEADING)
            if el.get_text().strip() == section_label
        ),
        None,
    )
    if heading is None:
        logger.info(f"No {section_label!r} section on {page_url}")
        return []

    section = heading.find_next_sibling()
    if section is None:
        return []

    topics: list[Topic] = []
    for item in section.select(selectors.TOPIC_ITEM):
        name = item.select_one(selectors.TOPIC_NAME)
        if name is None:
            continue
        home_url = absolute_url(page_url, name.get("href"))
        if home_url is None:
            logger.debug(f"Topic {name.get_text().strip()!r} has no link; skipped")
            continue
        topics.append(Topic(name=name.get_text().strip(), home_url=home_url))
    return topics
