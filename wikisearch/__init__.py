from .crawler import WikiCrawler
from .engine import Generation, QueryEngine
from .fetcher import PageFetcher
from .indexer import InvertedIndex, InvertedIndexer, build_index
from .models import PageRecord, Posting, SearchResult
from .parser import ContentExtractor, HTMLParser, clean_text
from .query_processor import QueryProcessor
from .ranker import FrequencyLocationRanker
from .service import SearchService
from .store import CorpusStore, sanitize_page_id
