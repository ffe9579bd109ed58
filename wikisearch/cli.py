# cli.py

import argparse
import logging
import sys

from . import config
from .app import configure_logging, create_app
from .errors import WikiSearchError
from .service import SearchService
from .store import CorpusStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikisearch",
        description="Crawl Wikipedia into a local corpus and search it.",
    )
    parser.add_argument(
        "--data-dir", default=config.DATA_DIR, help="corpus directory"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scrape = subparsers.add_parser("scrape", help="rebuild the corpus")
    scrape.add_argument(
        "start_page", nargs="?", default=config.DEFAULT_START_PAGE
    )
    scrape.add_argument(
        "-n",
        "--pages",
        type=int,
        default=config.DEFAULT_NUMBER_OF_PAGES,
        help="maximum number of pages to visit",
    )

    search = subparsers.add_parser("search", help="query the persisted corpus")
    search.add_argument("query")
    search.add_argument("--limit", type=int, default=config.DISPLAY_LIMIT)

    serve = subparsers.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default=config.HOST)
    serve.add_argument("--port", type=int, default=config.PORT)
    return parser


def run_scrape(service: SearchService, start_page: str, pages: int):
    print("\n" + "-" * 25 + " Starting Web Crawling " + "-" * 25)
    summary = service.scrape_phrase(start_page, pages)
    print(f"Crawled {summary.pages} pages from {summary.seed}.")
    print(f"Crawling and indexing finished in {summary.seconds:.2f} seconds.")
    print("-" * 25 + " Finished Web Crawling " + "-" * 25 + "\n")


def run_search(service: SearchService, query: str, limit: int):
    results = service.search(query)
    print(f"Query: '{query}' ({len(results)} results)")
    for result in results[:limit]:
        print(
            f"  {result.name.replace('_', ' '):<40} "
            f"score={result.score:.2f} "
            f"freq={result.freq_score:.2f} "
            f"loc={result.loc_score:.2f}"
        )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging()
    service = SearchService(store=CorpusStore(args.data_dir))

    try:
        if args.command == "scrape":
            run_scrape(service, args.start_page, args.pages)
        elif args.command == "search":
            run_search(service, args.query, args.limit)
        else:
            app = create_app({"DATA_DIR": args.data_dir}, service=service)
            app.run(host=args.host, port=args.port, use_reloader=False)
    except WikiSearchError as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
