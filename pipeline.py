"""Scrape pipeline: collect sitemap URLs, rank by recency, extract articles."""

from __future__ import annotations

import logging
from typing import Any

from collector import collect_urls
from config import ScraperConfig, load_config
from extractor import extract_article
from fetcher import Fetcher, NetworkError
from models import Article, SitemapEntry

LOGGER = logging.getLogger(__name__)


def scrape_latest_news(
    limit: Any = None,
    *,
    config: ScraperConfig | None = None,
    fetcher: Fetcher | None = None,
) -> list[Article]:
    """Return the most recent articles from the configured sitemaps.

    Entries are ranked newest-first and truncated to `limit` before any page
    is fetched. Articles whose page fails to load are logged and skipped, so
    the result may be shorter than `limit`. Order follows the ranking.

    Args:
        limit: Maximum number of articles. None or an invalid value falls
            back to config.default_limit.
        config: Settings; read from the environment when omitted.
        fetcher: HTTP fetcher; built from config when omitted.
    """
    config = config or load_config()
    fetcher = fetcher or Fetcher.from_config(config)
    effective_limit = resolve_limit(limit, config.default_limit)

    entries = collect_urls(config.sitemap_urls, fetcher, config.article_path_segment)
    selected = rank_entries(entries)[:effective_limit]

    articles: list[Article] = []
    failed = 0
    for entry in selected:
        try:
            articles.append(extract_article(entry.location, fetcher))
        except NetworkError as exc:
            failed += 1
            LOGGER.warning("Failed to scrape article %s: %s", entry.location, exc)

    LOGGER.info(
        "Scrape complete: collected=%s limit=%s selected=%s extracted=%s failed=%s",
        len(entries),
        effective_limit,
        len(selected),
        len(articles),
        failed,
    )
    return articles


def rank_entries(entries: list[SitemapEntry]) -> list[SitemapEntry]:
    """Sort entries newest-first; entries without a timestamp go last.

    The sort is stable, so untimestamped entries keep their incoming order.
    """
    dated = [e for e in entries if e.last_modified is not None]
    undated = [e for e in entries if e.last_modified is None]
    dated.sort(key=lambda e: e.last_modified, reverse=True)
    return dated + undated


def resolve_limit(limit: Any, default: int) -> int:
    """Return limit if it is a positive integer, otherwise default."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        return default
    return limit
