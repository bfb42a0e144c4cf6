# File: tests/conftest.py
import asyncio
from collections import Counter
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any, Dict, Tuple, Union

import pytest
import pytest_asyncio
from aiohttp import web

from site_meta.config import CrawlerConfig
from site_meta.crawler.models import PageData

RouteBody = Union[str, bytes, Dict[str, Any]]
StartSite = Callable[[Dict[str, RouteBody]], Awaitable[Tuple[str, Counter]]]


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


def _handler(path: str, route: Dict[str, Any], hits: Counter):
    async def handle(_request: web.Request) -> web.Response:
        hits[path] += 1
        if route.get("delay"):
            await asyncio.sleep(route["delay"])
        body = route.get("body", b"")
        if isinstance(body, str):
            body = body.encode("utf-8")
        return web.Response(
            body=body,
            status=route.get("status", 200),
            content_type=route.get("content_type", "text/html"),
        )

    return handle


@pytest.fixture()
def crawler_config() -> CrawlerConfig:
    """Fast config for tests: short timeout, no retries."""
    return CrawlerConfig(
        timeout=2.0,
        user_agent="TestAgent/1.0",
        concurrency=4,
        retry_times=0,
        retry_backoff=0.0,
    )


@pytest.fixture()
def sitemap_xml() -> Callable[..., str]:
    """Build a standard namespaced sitemap from a list of locations."""

    def build(*locations: str) -> str:
        urls = "".join(f"<url><loc>{loc}</loc></url>" for loc in locations)
        return (
            '<?xml version="1.0" encoding="UTF-8"?>'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
            f"{urls}</urlset>"
        )

    return build


@pytest_asyncio.fixture
async def site_server(unused_tcp_port_factory) -> AsyncIterator[StartSite]:
    """
    Factory fixture: ``base, hits = await site_server({"/": "<html>..."})``.

    A route value is either the body (str/bytes) or a dict with ``body``,
    ``status``, ``content_type`` and ``delay`` keys. ``hits`` counts requests
    per path.
    """
    runners: list[web.AppRunner] = []

    async def start(routes: Dict[str, RouteBody]) -> Tuple[str, Counter]:
        hits: Counter = Counter()
        app = web.Application()
        for path, route in routes.items():
            if not isinstance(route, dict):
                route = {"body": route}
            app.router.add_get(path, _handler(path, route, hits))
        runner = web.AppRunner(app)
        await runner.setup()
        port = unused_tcp_port_factory()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{port}", hits

    try:
        yield start
    finally:
        for runner in runners:
            await runner.cleanup()


class FakeFetcher:
    """Fetcher stand-in returning canned bodies or raising canned errors."""

    def __init__(self, pages: Dict[str, Union[PageData, Exception]]) -> None:
        self.pages = pages
        self.calls: list[str] = []

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        result = self.pages[url]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture()
def fake_fetcher() -> Callable[[Dict[str, Union[PageData, Exception]]], FakeFetcher]:
    return FakeFetcher


@pytest.fixture()
def html_page() -> Callable[..., PageData]:
    """PageData with an HTML body for *url*."""

    def build(url: str, html: str, charset: str | None = "utf-8") -> PageData:
        return PageData(url=url, status=200, content=html.encode(charset or "utf-8"), charset=charset)

    return build
