# models.py

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class PageRecord:
    id: str
    text: str
    links: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Posting:
    page: str
    positions: Tuple[int, ...]

    @property
    def count(self) -> int:
        return len(self.positions)


@dataclass(frozen=True)
class SearchResult:
    name: str
    score: float
    freq_score: float
    loc_score: float

    def to_dict(self) -> Dict[str, float]:
        """Payload shape returned to callers."""
        return {
            "name": self.name,
            "score": self.score,
            "freqScore": self.freq_score,
            "locScore": self.loc_score,
        }
