"""CLI entrypoint: scrape the latest sitemap news and store it as CSV."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import find_dotenv, load_dotenv

from csv_sink import save_articles
from pipeline import scrape_latest_news


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Scrape the latest news articles from publisher sitemaps")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of recent articles to extract (default: SCRAPER_DEFAULT_LIMIT or 50)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Scrape and log results without writing to the CSV",
    )
    return parser.parse_args(argv)


def run(limit: int | None, dry_run: bool) -> dict[str, int]:
    """Run one scrape cycle and return {"scraped": N, "saved": M}."""
    articles = scrape_latest_news(limit)
    logging.info("Scraped %s articles", len(articles))

    if dry_run:
        for article in articles:
            logging.info("[dry-run] Would save: %s (%s)", article.title, article.source_url)
        saved = 0
    else:
        saved = save_articles(articles)

    return {"scraped": len(articles), "saved": saved}


def main(argv: list[str] | None = None) -> None:
    """Initialize config and execute the pipeline."""
    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args(argv)

    try:
        result = run(limit=args.limit, dry_run=args.dry_run)
    except Exception as exc:  # report a single failure signal to the caller
        logging.exception("Scrape run failed: %s", exc)
        sys.exit(1)

    logging.info("Run complete. scraped=%s saved=%s", result["scraped"], result["saved"])
    print(json.dumps(result))


if __name__ == "__main__":
    main()
