# site_meta/crawler/fetcher.py
"""
Fetcher module: HTTP GET with per-request timeout and retry/backoff on 5xx/429.
"""
from __future__ import annotations

import asyncio
import random
from typing import Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout, InvalidURL

from site_meta.config import CrawlerConfig
from site_meta.crawler.models import PageData
from site_meta.errors import PageFetchFailed
from site_meta.logger import logger

RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)


def create_session(config: CrawlerConfig) -> ClientSession:
    """Session with the configured User-Agent and a total timeout per request."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


class Fetcher:
    """Fetches URLs through a shared session; every failure becomes PageFetchFailed."""

    def __init__(
        self,
        session: ClientSession,
        config: CrawlerConfig,
        retry_status: Sequence[int] = RETRY_STATUS,
    ) -> None:
        self.session = session
        self.config = config
        self._retry_status = retry_status

    async def fetch(self, url: str) -> PageData:
        """
        GET *url* and return its body.

        Retries on retryable statuses and client errors up to
        ``config.retry_times`` with exponential backoff. Timeouts are not
        retried. Any non-2xx final status or an unusable URL raises
        PageFetchFailed.
        """
        attempts = 0
        while True:
            try:
                async with self.session.get(url) as resp:
                    if resp.status in self._retry_status:
                        raise ClientError(f"retryable status {resp.status}")
                    if not 200 <= resp.status < 300:
                        raise PageFetchFailed(url, f"HTTP {resp.status}")
                    body = await resp.read()
                    return PageData(url, resp.status, body, resp.charset)
            except asyncio.TimeoutError as exc:
                raise PageFetchFailed(url, f"timed out after {self.config.timeout} s") from exc
            except InvalidURL as exc:
                raise PageFetchFailed(url, "invalid URL") from exc
            except (UnicodeError, ValueError) as exc:
                # idna rejects over-long or empty host labels before any I/O
                raise PageFetchFailed(url, f"invalid URL ({exc})") from exc
            except ClientError as exc:
                attempts += 1
                if attempts > self.config.retry_times:
                    raise PageFetchFailed(url, str(exc) or type(exc).__name__) from exc
                backoff = min(60.0, self.config.retry_backoff * (2 ** attempts + random.random()))
                logger.debug(
                    "Retry %d/%d for %s after %.2f s", attempts, self.config.retry_times, url, backoff
                )
                await asyncio.sleep(backoff)
