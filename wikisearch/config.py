# config.py

import os


def _env(name, default):
    return os.getenv(f"WIKISEARCH_{name}", default)


def _env_int(name, default):
    value = int(_env(name, default))
    if value <= 0:
        raise ValueError(f"WIKISEARCH_{name} must be positive, got {value}")
    return value


def _env_float(name, default):
    value = float(_env(name, default))
    if value < 0:
        raise ValueError(f"WIKISEARCH_{name} must not be negative, got {value}")
    return value


# Configuration for the crawler
BASE_URL = _env("BASE_URL", "https://en.wikipedia.org")
ARTICLE_PREFIX = "/wiki/"
EXCLUDED_NAMESPACES = (
    "Wikipedia:",
    "Wikipedia_talk:",
    "Portal:",
    "Portal_talk:",
    "Help:",
    "Help_talk:",
    "Talk:",
    "User_talk:",
    "File:",
    "File_talk:",
    "Media:",
)
CONTENT_SELECTOR = "#mw-content-text p"
LINK_SELECTOR = "#mw-content-text p a"
USER_AGENT = _env("USER_AGENT", "wikisearch/0.1 (+https://en.wikipedia.org)")

FETCH_TIMEOUT = _env_float("FETCH_TIMEOUT", "10")
CRAWL_CONCURRENCY = _env_int("CRAWL_CONCURRENCY", "1")

DEFAULT_START_PAGE = _env("DEFAULT_START_PAGE", "Alan Turing")
DEFAULT_NUMBER_OF_PAGES = _env_int("DEFAULT_NUMBER_OF_PAGES", "200")

# Persisted corpus layout
DATA_DIR = _env("DATA_DIR", "wikipedia")
WORDS_DIRNAME = "Words"
LINKS_DIRNAME = "Links"

# Ranking
FREQUENCY_WEIGHT = _env_float("FREQUENCY_WEIGHT", "1.0")
LOCATION_WEIGHT = _env_float("LOCATION_WEIGHT", "0.8")
DISPLAY_LIMIT = _env_int("DISPLAY_LIMIT", "5")

# HTTP server
HOST = _env("HOST", "127.0.0.1")
PORT = _env_int("PORT", "3030")
CACHE_TYPE = _env("CACHE_TYPE", "SimpleCache")
CACHE_DEFAULT_TIMEOUT = _env_int("CACHE_DEFAULT_TIMEOUT", "300")
RATELIMIT_DEFAULT = _env("RATELIMIT_DEFAULT", "200 per day;50 per hour")
SEARCH_RATE_LIMIT = _env("SEARCH_RATE_LIMIT", "60/minute")
SCRAPE_RATE_LIMIT = _env("SCRAPE_RATE_LIMIT", "5/minute")

LOG_FILE = _env("LOG_FILE", "search_engine.log")
LOG_LEVEL = _env("LOG_LEVEL", "INFO")
