from topic_census.pipeline.crawl import CrawlPipeline, run

__all__ = ["CrawlPipeline", "run"]
