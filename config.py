"""Environment-driven settings for the scraper."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SITEMAP_URLS = ("https://www.newyorker.com/sitemap-archive-5.xml",)
DEFAULT_ARTICLE_PATH_SEGMENT = "/news/"
DEFAULT_LIMIT = 50
DEFAULT_USER_AGENT = "mejoresnoticias-scraper/1.0 (+https://example.com)"
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class ScraperConfig:
    """Process-wide static configuration, built once per run."""

    sitemap_urls: tuple[str, ...] = DEFAULT_SITEMAP_URLS
    article_path_segment: str = DEFAULT_ARTICLE_PATH_SEGMENT
    default_limit: int = DEFAULT_LIMIT
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = DEFAULT_ACCEPT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def load_config() -> ScraperConfig:
    """Build a ScraperConfig from environment variables, falling back to defaults."""
    sitemap_urls = _to_list(os.getenv("SITEMAP_URLS")) or DEFAULT_SITEMAP_URLS

    return ScraperConfig(
        sitemap_urls=sitemap_urls,
        article_path_segment=os.getenv("ARTICLE_PATH_SEGMENT") or DEFAULT_ARTICLE_PATH_SEGMENT,
        default_limit=_to_positive_int(os.getenv("SCRAPER_DEFAULT_LIMIT"), DEFAULT_LIMIT),
        user_agent=os.getenv("SCRAPER_USER_AGENT") or DEFAULT_USER_AGENT,
        accept=os.getenv("SCRAPER_ACCEPT") or DEFAULT_ACCEPT,
        timeout_seconds=_to_float(os.getenv("FETCH_TIMEOUT_SECONDS"), DEFAULT_TIMEOUT_SECONDS),
    )


def _to_list(value: str | None) -> tuple[str, ...]:
    if value is None or not value.strip():
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _to_positive_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _to_float(value: str | None, default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        return float(value.strip())
    except ValueError:
        return default
