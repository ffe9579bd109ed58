class WikiSearchError(Exception):
    """Base class for errors raised by wikisearch."""


class InvalidRequestError(WikiSearchError):
    """A caller supplied missing or malformed input."""


class InvalidQueryError(InvalidRequestError):
    pass


class InvalidScrapeRequestError(InvalidRequestError):
    pass


class CrawlInProgressError(WikiSearchError):
    """Raised when a scrape is requested while another crawl is still running."""

    def __init__(self, message="A crawl is already in progress"):
        super().__init__(message)
