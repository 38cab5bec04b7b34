"""Tests for the page drivers (no real browser or network)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from pages import BASE, Note, listing_html

from topic_census.driver import PlaywrightDriver, StaticDriver
from topic_census.extract import extract_article_stubs


class TestStaticDriver:
    """Tests for StaticDriver."""

    @pytest.fixture
    def mock_response(self) -> MagicMock:
        response = MagicMock()
        response.text = listing_html([Note("p1"), Note("p2")])
        response.url = httpx.URL(f"{BASE}/c/a")
        response.raise_for_status = MagicMock()
        return response

    async def test_navigate_then_evaluate(
        self, mock_response: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        requested: list[str] = []

        async def mock_get(self, url, **kwargs):
            requested.append(url)
            return mock_response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        async with StaticDriver() as driver:
            await driver.navigate(f"{BASE}/c/a")
            stubs = await driver.evaluate(extract_article_stubs)

        assert requested == [f"{BASE}/c/a"]
        assert [s.url for s in stubs] == [f"{BASE}/p/p1", f"{BASE}/p/p2"]

    async def test_http_error_propagates(
        self, mock_response: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        request = httpx.Request("GET", f"{BASE}/c/a")
        mock_response.raise_for_status = MagicMock(
            side_effect=httpx.HTTPStatusError(
                "404", request=request, response=httpx.Response(404, request=request)
            )
        )

        async def mock_get(self, url, **kwargs):
            return mock_response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        async with StaticDriver() as driver:
            with pytest.raises(httpx.HTTPStatusError):
                await driver.navigate(f"{BASE}/c/a")

    async def test_navigate_requires_context(self) -> None:
        with pytest.raises(RuntimeError, match="not started"):
            await StaticDriver().navigate(f"{BASE}/c/a")

    async def test_cannot_interact_or_scroll(self) -> None:
        driver = StaticDriver()
        assert await driver.try_interact(".list .check-more") is False
        assert await driver.scroll_height() == await driver.scroll_height()
        assert await driver.scroll_to_bottom() is None


class TestPlaywrightDriver:
    """Tests for PlaywrightDriver with a mocked page."""

    @pytest.fixture
    def page(self) -> MagicMock:
        page = MagicMock()
        page.url = f"{BASE}/c/a"
        page.goto = AsyncMock()
        page.click = AsyncMock()
        page.content = AsyncMock(return_value=listing_html([Note("p1")]))
        page.evaluate = AsyncMock(return_value=1234)
        return page

    @pytest.fixture
    def driver(self, page: MagicMock) -> PlaywrightDriver:
        driver = PlaywrightDriver(wait_until="load", interaction_timeout=2.0)
        driver._page = page
        return driver

    async def test_navigate_uses_default_wait(self, driver: PlaywrightDriver, page: MagicMock) -> None:
        await driver.navigate(f"{BASE}/c/a")
        page.goto.assert_awaited_once_with(f"{BASE}/c/a", wait_until="load")

    async def test_navigate_override_wait(self, driver: PlaywrightDriver, page: MagicMock) -> None:
        await driver.navigate(f"{BASE}/c/a", wait_until="networkidle")
        page.goto.assert_awaited_once_with(f"{BASE}/c/a", wait_until="networkidle")

    async def test_evaluate_runs_extractor_on_rendered_html(self, driver: PlaywrightDriver) -> None:
        stubs = await driver.evaluate(extract_article_stubs)
        assert [s.url for s in stubs] == [f"{BASE}/p/p1"]

    async def test_try_interact_success(self, driver: PlaywrightDriver, page: MagicMock) -> None:
        assert await driver.try_interact(".check-more") is True
        page.click.assert_awaited_once_with(".check-more", timeout=2000.0)

    async def test_try_interact_never_raises(self, driver: PlaywrightDriver, page: MagicMock) -> None:
        page.click = AsyncMock(side_effect=Exception("Timeout 2000ms exceeded"))
        assert await driver.try_interact(".check-more") is False

    async def test_scroll_height(self, driver: PlaywrightDriver) -> None:
        assert await driver.scroll_height() == 1234

    async def test_exit_closes_context_then_browser(self, driver: PlaywrightDriver, page: MagicMock) -> None:
        calls: list[str] = []
        context = MagicMock()
        context.close = AsyncMock(side_effect=lambda: calls.append("context"))
        browser = MagicMock()
        browser.close = AsyncMock(side_effect=lambda: calls.append("browser"))
        playwright = MagicMock()
        playwright.stop = AsyncMock(side_effect=lambda: calls.append("playwright"))
        driver._context = context
        driver._browser = browser
        driver._playwright = playwright

        await driver.__aexit__(None, None, None)

        assert calls == ["context", "browser", "playwright"]
        assert driver._context is None
        assert driver._browser is None
        with pytest.raises(RuntimeError, match="not started"):
            _ = driver.page

    def test_page_requires_context(self) -> None:
        with pytest.raises(RuntimeError, match="not started"):
            _ = PlaywrightDriver().page
