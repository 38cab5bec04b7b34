"""Sequential crawl pipeline."""

from __future__ import annotations

import asyncio
import logging
import time
from functools import partial
from typing import TYPE_CHECKING

from topic_census.aggregate import aggregate
from topic_census.config.factory import create_paginator
from topic_census.data import ArticleDetail, ArticleStub, Topic
from topic_census.driver.base import PageDriver
from topic_census.extract import (
    extract_article_details,
    extract_article_stubs,
    extract_topics,
    selectors,
)
from topic_census.paginate import Paginator
from topic_census.reconcile import TopicListing, group_by_author, reconcile
from topic_census.report.models import Report
from topic_census.run_logger import RunLogger

if TYPE_CHECKING:
    from topic_census.config.models import TopicCensusConfig

logger = logging.getLogger(__name__)


class CrawlPipeline:
    """Crawl an account's topics and their authors over one shared driver.

    Flow:
    1. Discover the account's topics on its profile page
    2. Visit each topic listing, paginate, extract article stubs
    3. Group stubs by author home URL
    4. Visit each author homepage, paginate, extract article details
    5. Reconcile stubs with details and aggregate the three report views

    Every navigation is awaited before the next starts; the driver is never
    used concurrently. Navigation and extraction errors propagate.

    Args:
        driver: Page driver shared by every stage.
        paginator: Auto-scroller run before each listing extraction.
        section_label: Profile heading that introduces the account's topics.
        interaction_settle: Seconds to wait after revealing more topics.
        run_logger: Optional RunLogger for intermediate result logging.
    """

    def __init__(
        self,
        driver: PageDriver,
        *,
        paginator: Paginator | None = None,
        section_label: str = selectors.TOPIC_SECTION_LABEL,
        interaction_settle: float = 1.0,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._driver = driver
        self._paginator = paginator or Paginator()
        self._section_label = section_label
        self._interaction_settle = interaction_settle
        self._run_logger = run_logger

    async def run(self, account_url: str) -> Report:
        """Execute the crawl.

        Args:
            account_url: Profile URL of the account whose topics are crawled.

        Returns:
            The aggregated report.
        """
        if self._run_logger:
            self._run_logger.start_run(account_url)

        topics = await self.discover_topics(account_url)
        logger.info(f"Found {len(topics)} topics")

        listings: list[TopicListing] = []
        for i, topic in enumerate(topics, 1):
            stubs = await self.collect_stubs(topic)
            logger.info(f"[{i}/{len(topics)}] {topic.name}: {len(stubs)} articles")
            listings.append(TopicListing(topic=topic, stubs=tuple(stubs)))

        authors = group_by_author(listings)
        details_by_author: dict[str, list[ArticleDetail]] = {}
        for i, (home_url, name) in enumerate(authors.items(), 1):
            details = await self.collect_details(home_url)
            logger.info(f"[{i}/{len(authors)}] {name}: {len(details)} listed articles")
            details_by_author[home_url] = details

        t0 = time.monotonic()
        result = reconcile(listings, details_by_author)
        report = aggregate(result)

        if self._run_logger:
            self._run_logger.log_stage(
                stage="aggregation",
                target=account_url,
                input_data={
                    "topic_count": len(result.topics),
                    "author_count": len(result.authors),
                },
                output_data={
                    "article_count": report.articles.article_count,
                    "read_count": report.articles.read_count,
                },
                duration_seconds=time.monotonic() - t0,
            )
            self._run_logger.finish_run(report)

        return report

    async def discover_topics(self, account_url: str) -> list[Topic]:
        """Return the topics listed on the account's profile page."""
        t0 = time.monotonic()
        await self._driver.navigate(account_url)
        if await self._driver.try_interact(selectors.SHOW_MORE_TOPICS):
            await asyncio.sleep(self._interaction_settle)
        else:
            logger.debug("No 'show more' control on profile; using visible topics")

        topics = await self._driver.evaluate(
            partial(extract_topics, section_label=self._section_label)
        )
        self._log_stage("topic_discovery", account_url, None, topics, t0)
        return topics

    async def collect_stubs(self, topic: Topic) -> list[ArticleStub]:
        """Return the article stubs of one fully paginated topic listing."""
        t0 = time.monotonic()
        await self._driver.navigate(topic.home_url)
        await self._paginator.paginate(self._driver)
        stubs = await self._driver.evaluate(extract_article_stubs)
        self._log_stage("article_extraction", topic.home_url, topic, stubs, t0)
        return stubs

    async def collect_details(self, author_home_url: str) -> list[ArticleDetail]:
        """Return the article details listed on one author's homepage."""
        t0 = time.monotonic()
        await self._driver.navigate(author_home_url)
        await self._paginator.paginate(self._driver)
        details = await self._driver.evaluate(extract_article_details)
        self._log_stage("author_details", author_home_url, None, details, t0)
        return details

    def _log_stage(
        self, stage: str, target: str, input_data: object, output_data: object, t0: float
    ) -> None:
        if self._run_logger:
            self._run_logger.log_stage(
                stage=stage,
                target=target,
                input_data=input_data,
                output_data=output_data,
                duration_seconds=time.monotonic() - t0,
            )


async def run(
    driver: PageDriver,
    config: TopicCensusConfig,
    run_logger: RunLogger | None = None,
) -> Report:
    """Crawl the configured account with an already started driver.

    Args:
        driver: Started page driver.
        config: Root configuration; ``crawl`` and ``pagination`` are used.
        run_logger: Optional RunLogger for intermediate result logging.

    Returns:
        The aggregated report.
    """
    pipeline = CrawlPipeline(
        driver,
        paginator=create_paginator(config.pagination),
        section_label=config.crawl.topic_section_label,
        interaction_settle=config.crawl.interaction_settle,
        run_logger=run_logger,
    )
    return await pipeline.run(config.crawl.account_url)
