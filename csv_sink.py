"""CSV file sink for scraped articles."""

from __future__ import annotations

import csv
import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from models import Article

DEFAULT_CSV_OUTPUT_PATH = "articles.csv"

LOGGER = logging.getLogger(__name__)

CSV_COLUMNS = [
    "source_url",
    "title",
    "description",
    "image_url",
    "published_at",
    "raw_structured_data",  # verbatim JSON-LD block, kept for auditing
    "scraped_at",
]


def output_path(csv_path: str | None = None) -> Path:
    """Resolve the CSV location; CSV_OUTPUT_PATH is read at call time so .env values apply."""
    return Path(csv_path or os.getenv("CSV_OUTPUT_PATH") or DEFAULT_CSV_OUTPUT_PATH)


def load_existing_urls(csv_path: str | None = None) -> set[str]:
    """Return every source_url already stored in the CSV."""
    path = output_path(csv_path)
    if not path.exists():
        return set()

    with path.open(newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        return {row["source_url"] for row in reader if row.get("source_url")}


def save_articles(articles: list[Article], csv_path: str | None = None) -> int:
    """Append new articles to the CSV (creating it with a header if needed).

    Articles whose URL is already stored, or repeated within the batch, are
    skipped. Returns the number of rows written.
    """
    path = output_path(csv_path)
    seen = load_existing_urls(str(path))
    write_header = not path.exists() or path.stat().st_size == 0

    rows = []
    for article in articles:
        if article.source_url in seen:
            LOGGER.debug("Skipping already saved article %s", article.source_url)
            continue
        seen.add(article.source_url)
        rows.append(_to_row(article))

    if not rows:
        LOGGER.info("No new articles to write to %s", path)
        return 0

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=CSV_COLUMNS)
        if write_header:
            writer.writeheader()
        writer.writerows(rows)

    LOGGER.info(
        "Wrote %s CSV rows to %s (skipped %s already saved)",
        len(rows),
        path,
        len(articles) - len(rows),
    )
    return len(rows)


def _to_row(article: Article) -> dict[str, str]:
    return {
        "source_url": article.source_url,
        "title": article.title or "",
        "description": article.description or "",
        "image_url": article.image_url or "",
        "published_at": article.published_at.isoformat() if article.published_at else "",
        "raw_structured_data": article.raw_structured_data or "",
        "scraped_at": datetime.now(UTC).isoformat(),
    }
