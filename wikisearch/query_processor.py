# query_processor.py

from typing import Any, Mapping, Tuple

from . import config
from .errors import InvalidQueryError, InvalidScrapeRequestError


class QueryProcessor:
    """Validates and normalizes what callers send to the search engine."""

    def __init__(self, article_prefix: str = config.ARTICLE_PREFIX):
        self.article_prefix = article_prefix

    def process(self, query: Any) -> str:
        """Lowercases and trims a query, rejecting anything empty."""
        if not isinstance(query, str):
            raise InvalidQueryError("No search query provided")
        query = query.lower().strip()
        if not query:
            raise InvalidQueryError("No search query provided")
        return query

    def canonical_page_id(self, phrase: str) -> str:
        """
        "python programming language" -> "/wiki/Python_Programming_Language".

        Only the first letter of each word is changed; the rest is kept as typed.
        """
        words = phrase.split()
        title = "_".join(word[:1].upper() + word[1:] for word in words)
        return f"{self.article_prefix}{title}"

    def parse_scrape_request(self, payload: Mapping[str, Any]) -> Tuple[str, int]:
        """Returns `(seed page id, number of pages)` or raises."""
        start_page = payload.get("startPage")
        number_of_pages = payload.get("numberOfPages")

        if not start_page or number_of_pages is None:
            raise InvalidScrapeRequestError("Missing start page or number of pages")
        if not isinstance(start_page, str) or not start_page.strip():
            raise InvalidScrapeRequestError("startPage must be a non-empty string")
        if (
            isinstance(number_of_pages, bool)
            or not isinstance(number_of_pages, int)
            or number_of_pages <= 0
        ):
            raise InvalidScrapeRequestError(
                "numberOfPages must be a positive integer"
            )
        return self.canonical_page_id(start_page), number_of_pages

    def parse_search_request(self, payload: Mapping[str, Any]) -> str:
        return self.process(payload.get("query"))
