"""Tests for totals and ranked report views."""

from collections import Counter

import pytest

from topic_census.aggregate import aggregate, rank_articles
from topic_census.data import ArticleDetail, ArticleStub, CrawlResult, Topic
from topic_census.reconcile import TopicListing, reconcile

ALICE = "https://www.jianshu.com/u/alice"
BOB = "https://www.jianshu.com/u/bob"


def stub(slug: str, author_home: str = ALICE) -> ArticleStub:
    return ArticleStub(
        title=slug,
        url=f"https://www.jianshu.com/p/{slug}",
        author_name=author_home.rsplit("/", 1)[-1].title(),
        author_home_url=author_home,
    )


def detail(slug: str, reads: int) -> ArticleDetail:
    return ArticleDetail(url=f"https://www.jianshu.com/p/{slug}", read_count=reads)


@pytest.fixture
def same_author_result() -> CrawlResult:
    """Topic A [url1(5), url2(10)], Topic B [url3 without detail], one author."""
    topic_a = Topic(name="A", home_url="https://www.jianshu.com/c/a")
    topic_b = Topic(name="B", home_url="https://www.jianshu.com/c/b")
    listings = [
        TopicListing(topic_a, (stub("url1"), stub("url2"))),
        TopicListing(topic_b, (stub("url3"),)),
    ]
    return reconcile(listings, {ALICE: [detail("url1", 5), detail("url2", 10)]})


@pytest.fixture
def mixed_result() -> CrawlResult:
    topics = [
        Topic(name="Small", home_url="https://www.jianshu.com/c/s"),
        Topic(name="Large", home_url="https://www.jianshu.com/c/l"),
        Topic(name="Empty", home_url="https://www.jianshu.com/c/e"),
    ]
    listings = [
        TopicListing(topics[0], (stub("b1", BOB),)),
        TopicListing(topics[1], (stub("a1"), stub("a2"), stub("b2", BOB), stub("a3"))),
        TopicListing(topics[2], ()),
    ]
    details = {
        ALICE: [detail("a1", 3), detail("a2", 30), detail("a3", 3)],
        BOB: [detail("b1", 7), detail("b2", 100)],
    }
    return reconcile(listings, details)


def _slug(entry) -> str:
    return entry.url.rsplit("/", 1)[-1]


class TestSameAuthorScenario:
    def test_author_view(self, same_author_result: CrawlResult) -> None:
        report = aggregate(same_author_result)
        assert report.authors.author_count == 1
        author = report.authors.authors[0]
        assert author.article_count == 3
        assert author.read_count == 15
        assert [_slug(a) for a in author.articles] == ["url2", "url1", "url3"]

    def test_unmatched_article_in_every_view(self, same_author_result: CrawlResult) -> None:
        report = aggregate(same_author_result)
        flat = {_slug(a): a for a in report.articles.articles}
        assert flat["url3"].read_count == 0
        assert flat["url3"].publish_time is None
        topic_b = next(t for t in report.topics.topics if t.topic_name == "B")
        assert [_slug(a) for a in topic_b.articles] == ["url3"]

    def test_grand_totals_repeated_in_every_view(self, same_author_result: CrawlResult) -> None:
        report = aggregate(same_author_result)
        for view in (report.articles, report.topics, report.authors):
            assert view.article_count == 3
            assert view.read_count == 15


class TestInvariants:
    def test_sum_invariant(self, mixed_result: CrawlResult) -> None:
        report = aggregate(mixed_result)
        for entry in [*report.topics.topics, *report.authors.authors]:
            assert entry.read_count == sum(a.read_count for a in entry.articles)
            assert entry.article_count == len(entry.articles)
        assert report.articles.read_count == sum(a.read_count for a in report.articles.articles)

    def test_join_completeness(self, mixed_result: CrawlResult) -> None:
        report = aggregate(mixed_result)
        flat = Counter(a.url for a in report.articles.articles)
        in_topics = Counter(a.url for t in report.topics.topics for a in t.articles)
        in_authors = Counter(a.url for au in report.authors.authors for a in au.articles)
        assert flat == in_topics == in_authors
        assert all(count == 1 for count in flat.values())

    def test_flat_view_sorted_by_reads(self, mixed_result: CrawlResult) -> None:
        reads = [a.read_count for a in aggregate(mixed_result).articles.articles]
        assert reads == sorted(reads, reverse=True)

    def test_groups_sorted_by_article_count(self, mixed_result: CrawlResult) -> None:
        report = aggregate(mixed_result)
        assert [t.topic_name for t in report.topics.topics] == ["Large", "Small", "Empty"]
        assert [a.author_name for a in report.authors.authors] == ["Alice", "Bob"]
        for entry in [*report.topics.topics, *report.authors.authors]:
            reads = [a.read_count for a in entry.articles]
            assert reads == sorted(reads, reverse=True)

    def test_ties_keep_prior_order(self, mixed_result: CrawlResult) -> None:
        large = next(t for t in aggregate(mixed_result).topics.topics if t.topic_name == "Large")
        assert [_slug(a) for a in large.articles] == ["b2", "a2", "a1", "a3"]

    def test_reaggregation_is_idempotent(self, mixed_result: CrawlResult) -> None:
        assert aggregate(mixed_result) == aggregate(mixed_result)

    def test_empty_topic_has_zero_counts(self, mixed_result: CrawlResult) -> None:
        empty = next(t for t in aggregate(mixed_result).topics.topics if t.topic_name == "Empty")
        assert empty.article_count == 0
        assert empty.read_count == 0
        assert empty.articles == []


def test_empty_crawl_reports_zero() -> None:
    report = aggregate(CrawlResult())
    assert report.articles.article_count == 0
    assert report.articles.read_count == 0
    assert report.topics.topic_count == 0
    assert report.authors.author_count == 0


def test_rank_articles_empty() -> None:
    assert rank_articles([]) == []
