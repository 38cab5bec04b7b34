"""Report views and their JSON writer."""

from topic_census.report.models import (
    ArticleEntry,
    ArticleListReport,
    AuthorEntry,
    AuthorReport,
    Report,
    TopicEntry,
    TopicReport,
)
from topic_census.report.writer import ReportWriter

__all__ = [
    "ArticleEntry",
    "ArticleListReport",
    "AuthorEntry",
    "AuthorReport",
    "Report",
    "ReportWriter",
    "TopicEntry",
    "TopicReport",
]
