"""URL filters applied to sitemap entries before ranking."""

from __future__ import annotations

from models import SitemapEntry


def is_article_url(location: str, path_segment: str) -> bool:
    """Return True if the location looks like a news article.

    A plain substring check: publishers put news under a fixed section path
    (e.g. "/news/"), and everything else in the sitemap is skipped.
    """
    return bool(location) and path_segment in location


def filter_article_entries(entries: list[SitemapEntry], path_segment: str) -> list[SitemapEntry]:
    return [entry for entry in entries if is_article_url(entry.location, path_segment)]
