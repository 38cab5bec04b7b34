"""Configuration module for topic-census."""

from topic_census.config.factory import create_from_config
from topic_census.config.loader import get_default_config_path, load_config
from topic_census.config.models import (
    CrawlConfig,
    DriverConfig,
    LoggingConfig,
    OutputConfig,
    PaginationConfig,
    PlaywrightDriverConfig,
    StaticDriverConfig,
    TopicCensusConfig,
)

__all__ = [
    "CrawlConfig",
    "DriverConfig",
    "LoggingConfig",
    "OutputConfig",
    "PaginationConfig",
    "PlaywrightDriverConfig",
    "StaticDriverConfig",
    "TopicCensusConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
