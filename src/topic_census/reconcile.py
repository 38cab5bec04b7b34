"""Join topics, article stubs and author details into one graph.

Both joins are equi-joins on the article URL, left-outer from the stub
side: every stub becomes exactly one Article whether or not its author's
homepage lists a matching detail. Each Article is built once and the same
value is referenced from its topic and from its author.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace

from topic_census.data import Article, ArticleDetail, ArticleStub, Author, CrawlResult, Topic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopicListing:
    """A discovered topic with the stubs extracted from its listing."""

    topic: Topic
    stubs: tuple[ArticleStub, ...] = ()


def group_by_author(listings: Iterable[TopicListing]) -> dict[str, str]:
    """Map each distinct author home URL to its first-seen author name.

    Iteration order of the result is first-seen order across all listings.
    """
    authors: dict[str, str] = {}
    for listing in listings:
        for stub in listing.stubs:
            authors.setdefault(stub.author_home_url, stub.author_name)
    return authors


def index_details(details: Iterable[ArticleDetail]) -> dict[str, ArticleDetail]:
    """Index details by URL, keeping the first record per URL.

    Empty records (no URL) are dropped.
    """
    index: dict[str, ArticleDetail] = {}
    for detail in details:
        if detail.is_empty:
            continue
        index.setdefault(detail.url, detail)  # type: ignore[arg-type]
    return index


def reconcile(
    listings: Sequence[TopicListing],
    details_by_author: Mapping[str, Iterable[ArticleDetail]],
) -> CrawlResult:
    """Build the joined topic/author graph.

    Args:
        listings: Topics with their stubs, in discovery order.
        details_by_author: Details extracted from each author's homepage,
            keyed by author home URL. Authors missing here simply get no
            detail matches.

    Returns:
        CrawlResult whose topics keep discovery order and whose authors keep
        first-seen order; articles within each keep listing order.
    """
    author_names = group_by_author(listings)
    indexes = {home: index_details(details) for home, details in details_by_author.items()}
    author_articles: dict[str, list[Article]] = {home: [] for home in author_names}

    topics: list[Topic] = []
    unmatched = 0
    for listing in listings:
        built: list[Article] = []
        for stub in listing.stubs:
            detail = indexes.get(stub.author_home_url, {}).get(stub.url)
            if detail is None:
                unmatched += 1
            article = Article.build(listing.topic, stub, detail)
            built.append(article)
            author_articles[stub.author_home_url].append(article)
        topics.append(replace(listing.topic, articles=tuple(built)))

    authors = tuple(
        Author(name=name, home_url=home, articles=tuple(author_articles[home]))
        for home, name in author_names.items()
    )

    if unmatched:
        logger.info(f"{unmatched} articles had no matching detail on their author's homepage")
    return CrawlResult(topics=tuple(topics), authors=authors)
