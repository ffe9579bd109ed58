# indexer.py

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Tuple

from .models import PageRecord, Posting

logger = logging.getLogger(__name__)


def tokenize(text: str) -> List[str]:
    """Whitespace tokenizer; no stemming and no stopword removal."""
    return text.split()


class InvertedIndex:
    """
    Read-only mapping term -> {page: ascending token positions}.

    Built once per corpus generation by `InvertedIndexer`.
    """

    def __init__(
        self,
        postings: Mapping[str, Mapping[str, Tuple[int, ...]]],
        doc_lengths: Mapping[str, int],
    ):
        self._postings = postings
        self._doc_lengths = doc_lengths

    def __contains__(self, term: str) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)

    @property
    def terms(self) -> List[str]:
        return sorted(self._postings)

    @property
    def pages(self) -> List[str]:
        return sorted(self._doc_lengths)

    @property
    def page_count(self) -> int:
        return len(self._doc_lengths)

    def doc_length(self, page: str) -> int:
        return self._doc_lengths.get(page, 0)

    def postings(self, term: str) -> List[Posting]:
        """Postings for `term`, ordered by page id. Unknown terms have none."""
        pages = self._postings.get(term, {})
        return [Posting(page, pages[page]) for page in sorted(pages)]

    def positions(self, term: str, page: str) -> Tuple[int, ...]:
        return self._postings.get(term, {}).get(page, ())


class InvertedIndexer:
    def __init__(self):
        # inverted_index: {word: {page: [pos1, pos2, ...], ...}}
        self.inverted_index: defaultdict = defaultdict(lambda: defaultdict(list))
        self.doc_lengths: Dict[str, int] = {}

    def add_document(self, record: PageRecord):
        """
        Adds a page to the index. Positions are 0-based indices into the
        whitespace-tokenized text, so they are appended in ascending order.
        """
        if record.id in self.doc_lengths:
            raise ValueError(f"page {record.id!r} is already indexed")

        tokens = tokenize(record.text)
        self.doc_lengths[record.id] = len(tokens)
        for i, token in enumerate(tokens):
            self.inverted_index[token][record.id].append(i)

    def index_documents(self, records: Iterable[PageRecord]) -> "InvertedIndexer":
        for record in records:
            self.add_document(record)
        return self

    def build(self) -> InvertedIndex:
        """Freezes what has been added so far into an `InvertedIndex`."""
        frozen = {
            word: {page: tuple(positions) for page, positions in postings.items()}
            for word, postings in self.inverted_index.items()
        }
        return InvertedIndex(frozen, dict(self.doc_lengths))


def build_index(corpus: Mapping[str, PageRecord]) -> InvertedIndex:
    """Full rebuild of the inverted index for one corpus generation."""
    index = InvertedIndexer().index_documents(corpus.values()).build()
    logger.info("Indexed %d pages, %d terms.", index.page_count, len(index))
    return index
