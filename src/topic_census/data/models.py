"""Core data models for topic-census."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ArticleStub:
    """An article as listed on a topic page (no read count or publish time)."""

    title: str
    url: str
    author_name: str
    author_home_url: str
    star_count: int = 0
    comment_count: int = 0


@dataclass(frozen=True)
class ArticleDetail:
    """Per-article fields only visible on the author's own homepage.

    Listing items without a title link produce a detail with ``url=None``;
    such records carry no identity and are dropped during reconciliation.
    """

    url: str | None
    read_count: int = 0
    publish_time: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.url


@dataclass(frozen=True)
class Article:
    """An article stub joined with its owning topic and optional detail."""

    topic_name: str
    topic_home_url: str
    author_name: str
    author_home_url: str
    title: str
    url: str
    star_count: int = 0
    comment_count: int = 0
    read_count: int = 0
    publish_time: str | None = None

    @classmethod
    def build(
        cls,
        topic: Topic,
        stub: ArticleStub,
        detail: ArticleDetail | None = None,
    ) -> Article:
        """Build an article from its topic, stub, and matching detail.

        When ``detail`` is None the detail fields keep their defaults
        (``read_count=0``, ``publish_time=None``).
        """
        return cls(
            topic_name=topic.name,
            topic_home_url=topic.home_url,
            author_name=stub.author_name,
            author_home_url=stub.author_home_url,
            title=stub.title,
            url=stub.url,
            star_count=stub.star_count,
            comment_count=stub.comment_count,
            read_count=detail.read_count if detail is not None else 0,
            publish_time=detail.publish_time if detail is not None else None,
        )


@dataclass(frozen=True)
class Topic:
    """A topic collection owned by the crawled account."""

    name: str
    home_url: str
    articles: tuple[Article, ...] = ()


@dataclass(frozen=True)
class Author:
    """An author grouping every collected article that links to their homepage."""

    name: str
    home_url: str
    articles: tuple[Article, ...] = ()


@dataclass(frozen=True)
class CrawlResult:
    """The joined topic/article/author graph produced by a crawl."""

    topics: tuple[Topic, ...] = ()
    authors: tuple[Author, ...] = ()

    @property
    def articles(self) -> list[Article]:
        """Every article exactly once, in author-grouped order."""
        return [article for author in self.authors for article in author.articles]
