# parser.py

import re
from typing import Any, Iterable, List, Optional

from bs4 import BeautifulSoup

from . import config
from .models import PageRecord

# Anything that is not an ASCII word character or "+" (underscores included) is noise.
NON_TEXT_RE = re.compile(r"(?:[^\w+]|_)+", re.ASCII)
WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """
    Cleans text by converting to lowercase, replacing every run of characters
    that are neither ASCII word characters nor "+" with a space, and normalizing
    whitespace.
    """
    if not text:
        return ""
    text = text.lower()
    text = NON_TEXT_RE.sub(" ", text)
    text = WHITESPACE_RE.sub(" ", text).strip()
    return text


class HTMLParser:
    """
    The only part of the extractor that knows about BeautifulSoup.

    Anything implementing these four methods can stand in for it, which keeps
    the extraction rules testable against synthetic trees.
    """

    def parse_body(self, raw: str) -> Any:
        return BeautifulSoup(raw or "", "html.parser")

    def query_elements(self, tree: Any, selector: str) -> List[Any]:
        return tree.select(selector)

    def text_of(self, element: Any) -> str:
        return element.get_text()

    def attribute_of(self, element: Any, name: str) -> Optional[str]:
        return element.get(name)


class ContentExtractor:
    def __init__(
        self,
        parser: Optional[HTMLParser] = None,
        content_selector: str = config.CONTENT_SELECTOR,
        link_selector: str = config.LINK_SELECTOR,
        article_prefix: str = config.ARTICLE_PREFIX,
        excluded_namespaces: Iterable[str] = config.EXCLUDED_NAMESPACES,
    ):
        self.parser = parser or HTMLParser()
        self.content_selector = content_selector
        self.link_selector = link_selector
        self.article_prefix = article_prefix
        self.excluded_prefixes = tuple(
            article_prefix + namespace for namespace in excluded_namespaces
        )

    def extract_text(self, content: str, tree: Any = None) -> str:
        """
        Joins the text of every body paragraph, in document order, and cleans it.
        """
        if tree is None:
            tree = self.parser.parse_body(content)
        paragraphs = self.parser.query_elements(tree, self.content_selector)
        return clean_text(" ".join(self.parser.text_of(p) for p in paragraphs))

    def extract_links(self, content: str, tree: Any = None) -> List[str]:
        """
        Returns the article links found inside body paragraphs, in document
        order. Duplicates are kept; administrative namespaces are dropped.
        """
        if tree is None:
            tree = self.parser.parse_body(content)
        links = []
        for anchor in self.parser.query_elements(tree, self.link_selector):
            href = self.parser.attribute_of(anchor, "href")
            if self.is_article_link(href):
                links.append(href.strip())
        return links

    def is_article_link(self, href: Optional[str]) -> bool:
        if not href or not href.startswith(self.article_prefix):
            return False
        return not href.startswith(self.excluded_prefixes)

    def extract(self, page_id: str, content: str) -> PageRecord:
        """Parses `content` once and builds the record for `page_id`."""
        tree = self.parser.parse_body(content)
        return PageRecord(
            id=page_id,
            text=self.extract_text(content, tree),
            links=tuple(self.extract_links(content, tree)),
        )
