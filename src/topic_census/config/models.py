"""Pydantic configuration models for topic-census components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from topic_census.driver.static import DEFAULT_USER_AGENT
from topic_census.extract.selectors import TOPIC_SECTION_LABEL
from topic_census.report.writer import (
    DEFAULT_ARTICLE_LIST_FILENAME,
    DEFAULT_AUTHOR_REPORT_FILENAME,
    DEFAULT_TOPIC_REPORT_FILENAME,
)

DEFAULT_ACCOUNT_URL = "https://www.jianshu.com/u/9b797d42a0cc"

# ============================================================
# Driver Configs
# ============================================================


class PlaywrightDriverConfig(BaseModel):
    """Configuration for PlaywrightDriver."""

    type: Literal["playwright"] = "playwright"
    headless: bool = True
    # Seconds; 0 disables the navigation timeout entirely
    navigation_timeout: float = Field(default=60.0, ge=0)
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = "networkidle"
    interaction_timeout: float = Field(default=5.0, gt=0)
    user_agent: str | None = None

    model_config = {"frozen": True}


class StaticDriverConfig(BaseModel):
    """Configuration for StaticDriver."""

    type: Literal["static"] = "static"
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    model_config = {"frozen": True}


DriverConfig = Annotated[
    PlaywrightDriverConfig | StaticDriverConfig,
    Field(discriminator="type"),
]


# ============================================================
# Crawl Configs
# ============================================================


class CrawlConfig(BaseModel):
    """What to crawl and how to find it on the profile page."""

    account_url: str = DEFAULT_ACCOUNT_URL
    topic_section_label: str = TOPIC_SECTION_LABEL
    interaction_settle: float = Field(default=1.0, ge=0)

    model_config = {"frozen": True}


class PaginationConfig(BaseModel):
    """Configuration for the auto-scrolling Paginator."""

    poll_interval: float = Field(default=0.5, ge=0)
    # Seconds; null disables the guard
    timeout: float | None = Field(default=300.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Output Configs
# ============================================================


class OutputConfig(BaseModel):
    """Where and how the report artifacts are written."""

    output_dir: str = "."
    article_list_filename: str = DEFAULT_ARTICLE_LIST_FILENAME
    topic_report_filename: str = DEFAULT_TOPIC_REPORT_FILENAME
    author_report_filename: str = DEFAULT_AUTHOR_REPORT_FILENAME
    indent: int | None = None

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """Configuration for console logging and the per-run JSON log."""

    enabled: bool = False
    log_dir: str = "logs"
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class TopicCensusConfig(BaseModel):
    """Root configuration for topic-census."""

    driver: DriverConfig = Field(default_factory=PlaywrightDriverConfig)
    crawl: CrawlConfig = Field(default_factory=CrawlConfig)
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
