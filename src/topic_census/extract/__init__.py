"""Pure extractors over rendered documents."""

from topic_census.extract.articles import extract_article_stubs
from topic_census.extract.details import extract_article_details
from topic_census.extract.topics import extract_topics

__all__ = [
    "extract_article_details",
    "extract_article_stubs",
    "extract_topics",
]
