# service.py

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import List, Optional

from . import config
from .crawler import WikiCrawler
from .engine import Generation, QueryEngine
from .errors import CrawlInProgressError
from .models import SearchResult
from .query_processor import QueryProcessor
from .store import CorpusStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScrapeSummary:
    seed: str
    pages: int
    generation: int
    seconds: float


class SearchService:
    """
    Composes crawler, store and query engine behind the two operations the
    outside world uses: `scrape` and `search`.

    Crawls are single-flight. A scrape requested while another is running is
    rejected with `CrawlInProgressError`; searches keep being served from the
    last published generation in the meantime.
    """

    def __init__(
        self,
        store: Optional[CorpusStore] = None,
        crawler: Optional[WikiCrawler] = None,
        engine: Optional[QueryEngine] = None,
        query_processor: Optional[QueryProcessor] = None,
    ):
        self.store = store or CorpusStore(config.DATA_DIR)
        self.crawler = crawler or WikiCrawler(self.store)
        self.engine = engine or QueryEngine(self.store)
        self.query_processor = query_processor or QueryProcessor()
        self._crawl_lock = threading.Lock()

    @property
    def crawl_in_progress(self) -> bool:
        return self._crawl_lock.locked()

    @property
    def generation(self) -> Generation:
        return self.engine.generation

    def scrape(self, seed: str, number_of_pages: int) -> ScrapeSummary:
        """Crawls from an already canonical `seed` and publishes a new generation."""
        if not self._crawl_lock.acquire(blocking=False):
            raise CrawlInProgressError()
        try:
            logger.info("Scraping %d pages starting at %s", number_of_pages, seed)
            start_time = time.time()
            visited = asyncio.run(self.crawler.crawl(seed, number_of_pages))
            generation = self.engine.on_scrape_complete()
        finally:
            self._crawl_lock.release()

        return ScrapeSummary(
            seed=seed,
            pages=len(visited),
            generation=generation.number,
            seconds=time.time() - start_time,
        )

    def scrape_phrase(self, phrase: str, number_of_pages: int) -> ScrapeSummary:
        """Like `scrape`, but from a free-text title such as "alan turing"."""
        seed, number_of_pages = self.query_processor.parse_scrape_request(
            {"startPage": phrase, "numberOfPages": number_of_pages}
        )
        return self.scrape(seed, number_of_pages)

    def search(
        self, query: str, generation: Optional[Generation] = None
    ) -> List[SearchResult]:
        query = self.query_processor.process(query)
        return self.engine.query(query, generation)
