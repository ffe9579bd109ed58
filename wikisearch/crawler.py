# crawler.py

import asyncio
import logging
import time
from typing import Callable, List, Optional, Set

from . import config
from .fetcher import PageFetcher
from .parser import ContentExtractor
from .store import CorpusStore

logger = logging.getLogger(__name__)


class WikiCrawler:
    """
    Bounded breadth-first crawler.

    A FIFO frontier is drained by `concurrency` asyncio workers. Popping a
    page, checking it against the visited set and marking it visited happen
    without an `await` in between, so no page is visited twice and the number
    of visited pages never exceeds the limit. With a single worker the visit
    order is exactly breadth-first.
    """

    def __init__(
        self,
        store: CorpusStore,
        fetcher_factory: Callable[[], PageFetcher] = PageFetcher,
        extractor: Optional[ContentExtractor] = None,
        concurrency: int = config.CRAWL_CONCURRENCY,
    ):
        if concurrency <= 0:
            raise ValueError("concurrency must be positive")
        self.store = store
        self.fetcher_factory = fetcher_factory
        self.extractor = extractor or ContentExtractor()
        self.concurrency = concurrency

    async def crawl(self, seed: str, max_pages: int) -> List[str]:
        """
        Rebuilds the corpus starting from `seed`, visiting at most `max_pages`
        pages. Returns the visited page ids in visit order.
        """
        if not seed:
            raise ValueError("seed page is required")
        if max_pages <= 0:
            raise ValueError("max_pages must be positive")

        start_time = time.time()
        self.store.clear()

        visited: Set[str] = set()
        order: List[str] = []
        frontier: asyncio.Queue = asyncio.Queue()
        frontier.put_nowait(seed)

        async with self.fetcher_factory() as fetcher:
            workers = [
                asyncio.ensure_future(
                    self._worker(fetcher, frontier, visited, order, max_pages)
                )
                for _ in range(self.concurrency)
            ]
            drained = asyncio.ensure_future(frontier.join())
            # Workers only finish by raising; the frontier drains otherwise.
            await asyncio.wait(
                [drained, *workers], return_when=asyncio.FIRST_COMPLETED
            )
            drained.cancel()
            for worker in workers:
                worker.cancel()
            await asyncio.gather(drained, *workers, return_exceptions=True)

            for worker in workers:
                if not worker.cancelled() and worker.exception() is not None:
                    raise worker.exception()

        logger.info(
            "Crawl from %s finished in %.2f seconds, visited %d pages.",
            seed,
            time.time() - start_time,
            len(order),
        )
        return order

    async def _worker(self, fetcher, frontier, visited, order, max_pages):
        while True:
            page_id = await frontier.get()
            try:
                if page_id in visited or len(visited) >= max_pages:
                    continue
                visited.add(page_id)
                order.append(page_id)
                logger.debug("Crawling: %s (%d/%d)", page_id, len(visited), max_pages)

                content = await fetcher.fetch(page_id)
                record = self.extractor.extract(page_id, content)
                self.store.save(record)

                for link in record.links:
                    if link not in visited:
                        frontier.put_nowait(link)
            finally:
                frontier.task_done()
