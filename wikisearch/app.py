# app.py

import logging
from logging.handlers import RotatingFileHandler

import bleach
from flask import Blueprint, Flask, current_app, jsonify, request
from flask_caching import Cache
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from . import config
from .errors import CrawlInProgressError, InvalidRequestError
from .service import SearchService
from .store import CorpusStore

logger = logging.getLogger(__name__)

cache = Cache()
limiter = Limiter(get_remote_address, storage_uri="memory://")
bp = Blueprint("wikisearch", __name__)


# --- Logging Setup ---
def configure_logging(log_file=config.LOG_FILE, level=config.LOG_LEVEL):
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=5)
    file_handler.setFormatter(formatter)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=[file_handler, stream_handler])


def sanitize_query(query):
    """
    Sanitize user input to prevent XSS attacks.
    """
    return bleach.clean(query.strip(), tags=[], strip=True)


def get_service() -> SearchService:
    return current_app.extensions["wikisearch"]


def request_payload():
    if request.method == "GET":
        return request.args
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    return payload


# --- Routes ---
@bp.route("/search", methods=["GET", "POST"])
@limiter.limit(lambda: current_app.config["SEARCH_RATE_LIMIT"])
def search():
    """
    Ranks the current generation against `query` and returns every match.
    """
    service = get_service()
    raw_query = request_payload().get("query")
    if isinstance(raw_query, str):
        raw_query = sanitize_query(raw_query)
    query = service.query_processor.process(raw_query)

    generation = service.generation
    cache_key = f"search:{generation.number}:{query}"
    results = cache.get(cache_key)
    if results is None:
        results = [r.to_dict() for r in service.search(query, generation)]
        cache.set(cache_key, results)
    return jsonify(results)


@bp.route("/scrape", methods=["POST"])
@limiter.limit(lambda: current_app.config["SCRAPE_RATE_LIMIT"])
def scrape():
    """
    Rebuilds the corpus from `startPage`, visiting at most `numberOfPages`.
    """
    service = get_service()
    seed, number_of_pages = service.query_processor.parse_scrape_request(
        request_payload()
    )
    summary = service.scrape(seed, number_of_pages)
    return jsonify(
        {
            "message": "Scraping complete",
            "pages": summary.pages,
            "generation": summary.generation,
            "seconds": round(summary.seconds, 4),
        }
    )


@bp.route("/status")
def status():
    service = get_service()
    generation = service.generation
    return jsonify(
        {
            "generation": generation.number,
            "pages": generation.page_count,
            "terms": len(generation.index),
            "crawlInProgress": service.crawl_in_progress,
        }
    )


# HACK: for debug
@bp.route("/ping")
def ping():
    return "pong"


@bp.app_errorhandler(InvalidRequestError)
def handle_invalid_request(e):
    return jsonify({"error": str(e)}), 400


@bp.app_errorhandler(CrawlInProgressError)
def handle_crawl_in_progress(e):
    logger.warning("Rejected scrape: %s", e)
    return jsonify({"error": str(e)}), 409


def create_app(overrides=None, service=None) -> Flask:
    """
    Application factory. The search service is passed in explicitly (or built
    from config) and registered on `app.extensions["wikisearch"]`.
    """
    app = Flask(__name__)
    app.json.sort_keys = False
    app.config.update(
        CACHE_TYPE=config.CACHE_TYPE,
        CACHE_DEFAULT_TIMEOUT=config.CACHE_DEFAULT_TIMEOUT,
        RATELIMIT_DEFAULT=config.RATELIMIT_DEFAULT,
        RATELIMIT_STORAGE_URI="memory://",
        SEARCH_RATE_LIMIT=config.SEARCH_RATE_LIMIT,
        SCRAPE_RATE_LIMIT=config.SCRAPE_RATE_LIMIT,
        DATA_DIR=config.DATA_DIR,
    )
    if overrides:
        app.config.update(overrides)

    cache.init_app(app)
    limiter.init_app(app)

    if service is None:
        service = SearchService(store=CorpusStore(app.config["DATA_DIR"]))
    app.extensions["wikisearch"] = service
    app.register_blueprint(bp)

    logger.info(
        "Search engine ready: generation %d with %d pages.",
        service.generation.number,
        service.generation.page_count,
    )
    return app


if __name__ == "__main__":
    configure_logging()
    create_app().run(host=config.HOST, port=config.PORT, debug=True, use_reloader=False)
