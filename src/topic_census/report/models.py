"""Pydantic models for the three report artifacts.

Field declaration order is the key order of the serialized JSON, and the
aliases are the key names consumers read.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from topic_census.data import Article


class _ReportModel(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}


class ArticleEntry(_ReportModel):
    """One article as it appears in every report."""

    topic_name: str = Field(alias="topicName")
    topic_home_url: str = Field(alias="topicHome")
    author_name: str = Field(alias="authorName")
    author_home_url: str = Field(alias="authorHome")
    title: str
    url: str
    star_count: int = Field(default=0, alias="stars")
    comment_count: int = Field(default=0, alias="comments")
    read_count: int = Field(default=0, alias="readCount")
    publish_time: str | None = Field(default=None, alias="publishTime")

    @classmethod
    def from_article(cls, article: Article) -> ArticleEntry:
        return cls(
            topic_name=article.topic_name,
            topic_home_url=article.topic_home_url,
            author_name=article.author_name,
            author_home_url=article.author_home_url,
            title=article.title,
            url=article.url,
            star_count=article.star_count,
            comment_count=article.comment_count,
            read_count=article.read_count,
            publish_time=article.publish_time,
        )


class TopicEntry(_ReportModel):
    """A topic with its totals and ranked articles."""

    article_count: int = Field(alias="articleCount")
    read_count: int = Field(alias="readCount")
    topic_name: str = Field(alias="topicName")
    topic_home_url: str = Field(alias="topicHome")
    articles: list[ArticleEntry] = Field(default_factory=list)


class AuthorEntry(_ReportModel):
    """An author with their totals and ranked articles."""

    article_count: int = Field(alias="articleCount")
    read_count: int = Field(alias="readCount")
    author_name: str = Field(alias="authorName")
    author_home_url: str = Field(alias="authorHome")
    articles: list[ArticleEntry] = Field(default_factory=list)


class ArticleListReport(_ReportModel):
    """Every article ranked by read count."""

    article_count: int = Field(alias="articleCount")
    read_count: int = Field(alias="readCount")
    articles: list[ArticleEntry] = Field(default_factory=list)


class TopicReport(_ReportModel):
    """Per-topic statistics ranked by article count."""

    article_count: int = Field(alias="articleCount")
    read_count: int = Field(alias="readCount")
    topic_count: int = Field(alias="topicCount")
    topics: list[TopicEntry] = Field(default_factory=list)


class AuthorReport(_ReportModel):
    """Per-author statistics ranked by article count."""

    article_count: int = Field(alias="articleCount")
    read_count: int = Field(alias="readCount")
    author_count: int = Field(alias="authorCount")
    authors: list[AuthorEntry] = Field(default_factory=list)


class Report(_ReportModel):
    """The three views produced by one crawl."""

    articles: ArticleListReport
    topics: TopicReport
    authors: AuthorReport
