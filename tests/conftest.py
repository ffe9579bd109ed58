import asyncio

import pytest

from wikisearch.crawler import WikiCrawler
from wikisearch.engine import QueryEngine
from wikisearch.service import SearchService
from wikisearch.store import CorpusStore


def article_html(*paragraphs, outside=""):
    """Wraps paragraph HTML the way an article body is laid out."""
    body = "".join(f"<p>{p}</p>" for p in paragraphs)
    return (
        "<html><head><title>t</title></head><body>"
        f"{outside}"
        f'<div id="mw-content-text"><div class="mw-parser-output">{body}</div></div>'
        "</body></html>"
    )


def linking_to(*page_ids, text="filler"):
    anchors = " ".join(f'<a href="{p}">{p}</a>' for p in page_ids)
    return article_html(f"{text} {anchors}")


class FakeFetcher:
    """In-memory stand-in for `PageFetcher`; unknown pages come back empty."""

    def __init__(self, pages):
        self.pages = pages
        self.requested = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def fetch(self, page_id):
        self.requested.append(page_id)
        await asyncio.sleep(0)
        return self.pages.get(page_id, "")


@pytest.fixture
def store(tmp_path):
    return CorpusStore(str(tmp_path / "wikipedia"))


@pytest.fixture
def site():
    return {
        "/wiki/Cat": article_html(
            'A <a href="/wiki/Cat">cat</a> sat on a <a href="/wiki/Mat">mat</a>.',
            'See <a href="/wiki/Dog">dogs</a> and <a href="/wiki/Help:Contents">help</a>.',
        ),
        "/wiki/Dog": article_html(
            'The cat chased the <a href="/wiki/Cat">dog</a>; the cat ran.'
        ),
        "/wiki/Mat": article_html("A mat is a piece of fabric."),
    }


@pytest.fixture
def fetcher(site):
    return FakeFetcher(site)


@pytest.fixture
def make_crawler(store, fetcher):
    def factory(concurrency=1):
        return WikiCrawler(store, fetcher_factory=lambda: fetcher, concurrency=concurrency)

    return factory


@pytest.fixture
def service(store, make_crawler):
    return SearchService(store=store, crawler=make_crawler(), engine=QueryEngine(store))
