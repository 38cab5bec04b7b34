"""Factory functions to create components from configuration."""

from pathlib import Path

from topic_census.config.models import (
    DriverConfig,
    OutputConfig,
    PaginationConfig,
    PlaywrightDriverConfig,
    StaticDriverConfig,
    TopicCensusConfig,
)
from topic_census.driver.browser import PlaywrightDriver
from topic_census.driver.static import StaticDriver
from topic_census.paginate import Paginator
from topic_census.report.writer import ReportWriter
from topic_census.run_logger import RunLogger


def create_driver(config: DriverConfig) -> PlaywrightDriver | StaticDriver:
    """Create an (unstarted) page driver from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, PlaywrightDriverConfig):
        return PlaywrightDriver(
            headless=config.headless,
            navigation_timeout=config.navigation_timeout,
            wait_until=config.wait_until,
            interaction_timeout=config.interaction_timeout,
            user_agent=config.user_agent,
        )
    if isinstance(config, StaticDriverConfig):
        return StaticDriver(timeout=config.timeout, user_agent=config.user_agent)
    msg = f"Unknown driver config type: {type(config)}"
    raise ValueError(msg)


def create_paginator(config: PaginationConfig) -> Paginator:
    """Create the auto-scrolling paginator from config."""
    return Paginator(poll_interval=config.poll_interval, timeout=config.timeout)


def create_writer(config: OutputConfig, *, output_dir_override: str | None = None) -> ReportWriter:
    """Create the report writer from config."""
    output_dir = output_dir_override if output_dir_override is not None else config.output_dir
    return ReportWriter(
        Path(output_dir),
        article_list_filename=config.article_list_filename,
        topic_report_filename=config.topic_report_filename,
        author_report_filename=config.author_report_filename,
        indent=config.indent,
    )


def create_from_config(
    config: TopicCensusConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
    output_dir_override: str | None = None,
) -> tuple[PlaywrightDriver | StaticDriver, ReportWriter, RunLogger | None]:
    """Create the crawl components from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.
        output_dir_override: Override the config's output.output_dir setting.

    Returns:
        Tuple of (driver, writer, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    driver = create_driver(config.driver)
    writer = create_writer(config.output, output_dir_override=output_dir_override)
    return (driver, writer, run_logger)
