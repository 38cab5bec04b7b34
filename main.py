#!/usr/bin/env python
"""CLI for the topic-census crawler."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from topic_census.config import create_from_config, get_default_config_path, load_config
from topic_census.pipeline import run as run_pipeline

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path
    account_url: str | None = None
    output_dir: str | None = None
    log: bool = False
    log_dir: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("account_url")
    @classmethod
    def account_url_must_be_http(cls, v: str | None) -> str | None:
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError(f"Account URL must be http(s): {v}")
        return v


async def run(args: CLIArgs) -> None:
    """Crawl, aggregate and write the three report artifacts.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    if args.account_url:
        config = config.model_copy(
            update={"crawl": config.crawl.model_copy(update={"account_url": args.account_url})}
        )
    logging.getLogger().setLevel(config.logging.level)

    driver, writer, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir,
        output_dir_override=args.output_dir,
    )

    logger.info(f"Crawling topics of {config.crawl.account_url}")
    logger.info(f"Config: {args.config}")

    async with driver:
        report = await run_pipeline(driver, config, run_logger)

    paths = writer.write(report)

    logger.info("\n--- Summary ---")
    logger.info(f"Topics: {report.topics.topic_count}")
    logger.info(f"Authors: {report.authors.author_count}")
    logger.info(f"Articles: {report.articles.article_count}")
    logger.info(f"Total reads: {report.articles.read_count:,}")
    for path in paths:
        logger.info(f"Report written to: {path}")

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Rank the articles and authors of an account's topic collections."
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--account-url",
        type=str,
        default=None,
        help="Profile URL to crawl (overrides crawl.account_url)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for the report files (overrides output.output_dir)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable intermediate crawl logging to JSON file",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for run log files (overrides logging.log_dir)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            config=config_path,
            account_url=ns.account_url,
            output_dir=ns.output_dir,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
