# store.py

import logging
import os
import re
import shutil
from typing import Dict, List

from . import config
from .models import PageRecord

logger = logging.getLogger(__name__)

UNSAFE_NAME_RE = re.compile(r"[\W_]+")


def sanitize_page_id(page_id: str) -> str:
    """
    Turns a page id such as "/wiki/C++_(language)" into a filesystem-safe
    artifact name ("C_language_"). Everything after the article prefix
    is kept, so "/wiki/AC/DC" and "/wiki/DC" stay distinct.
    """
    if page_id.startswith(config.ARTICLE_PREFIX):
        page_id = page_id[len(config.ARTICLE_PREFIX) :]
    name = UNSAFE_NAME_RE.sub("_", page_id)
    return name or "Unknown"


class CorpusStore:
    """
    Durable corpus for one crawl generation.

    Two parallel directories hold one artifact per sanitized page id: the
    cleaned body text under `Words/` and the newline-separated outbound links
    under `Links/`.
    """

    def __init__(self, data_dir: str = config.DATA_DIR):
        self.data_dir = data_dir
        self.words_dir = os.path.join(data_dir, config.WORDS_DIRNAME)
        self.links_dir = os.path.join(data_dir, config.LINKS_DIRNAME)

    def clear(self):
        """Empties both directories, creating them if needed."""
        for directory in (self.words_dir, self.links_dir):
            if os.path.isdir(directory):
                shutil.rmtree(directory)
            os.makedirs(directory, exist_ok=True)
        logger.info("Cleared corpus under %s", self.data_dir)

    def save(self, record: PageRecord) -> str:
        """Persists `record` and returns the artifact name it was stored under."""
        name = sanitize_page_id(record.id)
        if os.path.exists(os.path.join(self.words_dir, name)):
            logger.warning("Overwriting artifact %s for page %s", name, record.id)
        self._write(os.path.join(self.words_dir, name), record.text)
        self._write(os.path.join(self.links_dir, name), "\n".join(record.links))
        return name

    def _write(self, path: str, content: str):
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)

    def names(self) -> List[str]:
        if not os.path.isdir(self.words_dir):
            return []
        return sorted(
            name
            for name in os.listdir(self.words_dir)
            if os.path.isfile(os.path.join(self.words_dir, name))
        )

    def load(self) -> Dict[str, PageRecord]:
        """
        Reads the persisted corpus back. Records are keyed (and identified) by
        their artifact name; a missing link artifact means no links.
        """
        corpus = {}
        for name in self.names():
            with open(os.path.join(self.words_dir, name), "r", encoding="utf-8") as f:
                text = f.read()
            links_path = os.path.join(self.links_dir, name)
            links = ()
            if os.path.exists(links_path):
                with open(links_path, "r", encoding="utf-8") as f:
                    links = tuple(line for line in f.read().split("\n") if line)
            corpus[name] = PageRecord(id=name, text=text, links=links)
        logger.info("Loaded %d pages from %s", len(corpus), self.data_dir)
        return corpus

    def __len__(self):
        return len(self.names())
