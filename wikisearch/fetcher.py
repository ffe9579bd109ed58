# fetcher.py

import asyncio
import logging
from typing import Optional

import aiohttp

from . import config

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    Asynchronously fetches article bodies with a shared `aiohttp` session.

    Any network failure is isolated to the page being fetched: the error is
    logged and the page is treated as having an empty body.
    """

    def __init__(
        self,
        base_url: str = config.BASE_URL,
        timeout: float = config.FETCH_TIMEOUT,
        user_agent: str = config.USER_AGENT,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {"User-Agent": user_agent}
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(
            timeout=self.timeout, headers=self.headers
        )
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        if self.session is not None:
            await self.session.close()
            self.session = None

    def url_for(self, page_id: str) -> str:
        return f"{self.base_url}{page_id}"

    async def fetch(self, page_id: str) -> str:
        """
        Returns the raw body of `page_id`, or "" if it could not be fetched.
        """
        if self.session is None:
            raise RuntimeError("PageFetcher must be used as an async context manager")

        url = self.url_for(page_id)
        try:
            async with self.session.get(url) as response:
                if response.status != 200:
                    logger.warning(
                        "Failed to fetch %s with status: %s", url, response.status
                    )
                    return ""
                return await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
            logger.warning("Error fetching %s: %r", url, e)
            return ""
