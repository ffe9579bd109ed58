# engine.py

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .indexer import InvertedIndex, build_index
from .models import PageRecord, SearchResult
from .ranker import FrequencyLocationRanker
from .store import CorpusStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Generation:
    """
    One consistent corpus and the index built from it.

    Handles are never mutated; a finished scrape publishes a new one.
    """

    number: int
    corpus: Mapping[str, PageRecord] = field(repr=False)
    index: InvertedIndex = field(repr=False)

    @property
    def page_count(self) -> int:
        return len(self.corpus)


class QueryEngine:
    def __init__(
        self, store: CorpusStore, ranker: Optional[FrequencyLocationRanker] = None
    ):
        self.store = store
        self.ranker = ranker or FrequencyLocationRanker()
        self._publish_lock = threading.Lock()
        self._generation = self._build(0)

    @property
    def generation(self) -> Generation:
        """The current generation. Hold on to it to read a stable snapshot."""
        return self._generation

    def _build(self, number: int) -> Generation:
        corpus = self.store.load()
        return Generation(number=number, corpus=corpus, index=build_index(corpus))

    def on_scrape_complete(self) -> Generation:
        """
        Builds a generation from the freshly persisted corpus and swaps it in.

        Readers keep using the previous generation until the new index is
        fully built; the swap itself is a single reference assignment.
        """
        with self._publish_lock:
            generation = self._build(self._generation.number + 1)
            self._generation = generation
        logger.info(
            "Published generation %d with %d pages.",
            generation.number,
            generation.page_count,
        )
        return generation

    def query(
        self, text: str, generation: Optional[Generation] = None
    ) -> List[SearchResult]:
        generation = generation or self._generation
        return self.ranker.rank(text, generation.index)
