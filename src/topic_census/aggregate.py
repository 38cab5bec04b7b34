"""Totals and ranked report views over a reconciled crawl.

All rankings are descending and stable: entries with equal keys keep the
order they had in the crawl result.
"""

from collections.abc import Sequence

from topic_census.data import Article, Author, CrawlResult, Topic
from topic_census.report.models import (
    ArticleEntry,
    ArticleListReport,
    AuthorEntry,
    AuthorReport,
    Report,
    TopicEntry,
    TopicReport,
)


def total_reads(articles: Sequence[Article]) -> int:
    return sum(article.read_count for article in articles)


def rank_articles(articles: Sequence[Article]) -> list[ArticleEntry]:
    """Order articles by read count, highest first."""
    ranked = sorted(articles, key=lambda a: a.read_count, reverse=True)
    return [ArticleEntry.from_article(article) for article in ranked]


def _topic_entry(topic: Topic) -> TopicEntry:
    return TopicEntry(
        article_count=len(topic.articles),
        read_count=total_reads(topic.articles),
        topic_name=topic.name,
        topic_home_url=topic.home_url,
        articles=rank_articles(topic.articles),
    )


def _author_entry(author: Author) -> AuthorEntry:
    return AuthorEntry(
        article_count=len(author.articles),
        read_count=total_reads(author.articles),
        author_name=author.name,
        author_home_url=author.home_url,
        articles=rank_articles(author.articles),
    )


def aggregate(result: CrawlResult) -> Report:
    """Compute the flat, per-topic and per-author views.

    Grand totals are computed once over the flat article set and repeated in
    each view.

    Args:
        result: Reconciled crawl graph.

    Returns:
        Report holding the three views.
    """
    articles = result.articles
    article_count = len(articles)
    read_count = total_reads(articles)

    topics = sorted(result.topics, key=lambda t: len(t.articles), reverse=True)
    authors = sorted(result.authors, key=lambda a: len(a.articles), reverse=True)

    return Report(
        articles=ArticleListReport(
            article_count=article_count,
            read_count=read_count,
            articles=rank_articles(articles),
        ),
        topics=TopicReport(
            article_count=article_count,
            read_count=read_count,
            topic_count=len(topics),
            topics=[_topic_entry(topic) for topic in topics],
        ),
        authors=AuthorReport(
            article_count=article_count,
            read_count=read_count,
            author_count=len(authors),
            authors=[_author_entry(author) for author in authors],
        ),
    )
