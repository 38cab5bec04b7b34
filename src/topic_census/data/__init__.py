"""Data models for topic-census."""

from topic_census.data.models import (
    Article,
    ArticleDetail,
    ArticleStub,
    Author,
    CrawlResult,
    Topic,
)

__all__ = [
    "Article",
    "ArticleDetail",
    "ArticleStub",
    "Author",
    "CrawlResult",
    "Topic",
]
