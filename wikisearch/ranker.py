# ranker.py

from typing import Dict, List

from . import config
from .indexer import InvertedIndex, tokenize
from .models import SearchResult


class FrequencyLocationRanker:
    """
    Scores pages on how often and how early the query terms occur.

    For the candidate pages (those containing at least one query term):

    * freqScore = occurrences of the query terms on the page (a term repeated
      in the query counts once per repetition), divided by the largest such
      count among the candidates. Range (0, 1].
    * locScore  = 1 / (1 + p), where p is the earliest token position of any
      query term on the page. Range (0, 1].
    * score     = frequency_weight * freqScore + location_weight * locScore.

    Both weights are non-negative, so raising either component never lowers
    the score. Ties are broken by page name.
    """

    def __init__(
        self,
        frequency_weight: float = config.FREQUENCY_WEIGHT,
        location_weight: float = config.LOCATION_WEIGHT,
    ):
        if frequency_weight < 0 or location_weight < 0:
            raise ValueError("ranking weights must not be negative")
        self.frequency_weight = frequency_weight
        self.location_weight = location_weight

    def query_terms(self, query: str) -> List[str]:
        return tokenize(query.lower().strip())

    def rank(self, query: str, index: InvertedIndex) -> List[SearchResult]:
        """
        Ranks every page holding at least one query term, best first.

        Args:
            query (str): The raw search query.
            index (InvertedIndex): The index of the generation being searched.

        Returns:
            list: `SearchResult`s ordered by descending score, then name.
        """
        counts: Dict[str, int] = {}
        first_positions: Dict[str, int] = {}
        for term in self.query_terms(query):
            for posting in index.postings(term):
                counts[posting.page] = counts.get(posting.page, 0) + posting.count
                earliest = posting.positions[0]
                if earliest < first_positions.get(posting.page, earliest + 1):
                    first_positions[posting.page] = earliest

        if not counts:
            return []

        max_count = max(counts.values())
        results = []
        for page, count in counts.items():
            freq_score = self.frequency_score(count, max_count)
            loc_score = self.location_score(first_positions[page])
            results.append(
                SearchResult(
                    name=page,
                    score=self.combine(freq_score, loc_score),
                    freq_score=freq_score,
                    loc_score=loc_score,
                )
            )

        results.sort(key=lambda r: (-r.score, r.name))
        return results

    @staticmethod
    def frequency_score(count: int, max_count: int) -> float:
        return count / max_count if max_count else 0.0

    @staticmethod
    def location_score(position: int) -> float:
        return 1.0 / (1 + position)

    def combine(self, freq_score: float, loc_score: float) -> float:
        return self.frequency_weight * freq_score + self.location_weight * loc_score
