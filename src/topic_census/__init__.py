"""topic-census: crawl a Jianshu account's topics and rank their articles and authors."""

from topic_census.aggregate import aggregate, rank_articles
from topic_census.config import TopicCensusConfig, create_from_config, load_config
from topic_census.data import (
    Article,
    ArticleDetail,
    ArticleStub,
    Author,
    CrawlResult,
    Topic,
)
from topic_census.driver import PageDriver, PlaywrightDriver, StaticDriver
from topic_census.extract import extract_article_details, extract_article_stubs, extract_topics
from topic_census.paginate import Paginator
from topic_census.pipeline import CrawlPipeline, run
from topic_census.reconcile import TopicListing, group_by_author, index_details, reconcile
from topic_census.report import (
    ArticleListReport,
    AuthorReport,
    Report,
    ReportWriter,
    TopicReport,
)
from topic_census.run_logger import RunLogger
from topic_census.safe import safe_call

__all__ = [
    # Models
    "Article",
    "ArticleDetail",
    "ArticleStub",
    "Author",
    "CrawlResult",
    "Topic",
    "TopicListing",
    # Reports
    "ArticleListReport",
    "AuthorReport",
    "Report",
    "TopicReport",
    # Protocols
    "PageDriver",
    # Drivers
    "PlaywrightDriver",
    "StaticDriver",
    # Extraction
    "extract_article_details",
    "extract_article_stubs",
    "extract_topics",
    # Pipeline
    "CrawlPipeline",
    "Paginator",
    "aggregate",
    "group_by_author",
    "index_details",
    "rank_articles",
    "reconcile",
    "run",
    "safe_call",
    # Output & logging
    "ReportWriter",
    "RunLogger",
    # Config
    "TopicCensusConfig",
    "create_from_config",
    "load_config",
]
