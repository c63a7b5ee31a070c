"""Collect and deduplicate article URLs across sitemap sources."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fetcher import Fetcher, NetworkError
from filters import filter_article_entries
from models import SitemapEntry
from sitemap import parse_sitemap

LOGGER = logging.getLogger(__name__)


def collect_urls(
    sitemap_urls: Iterable[str],
    fetcher: Fetcher,
    article_path_segment: str,
) -> list[SitemapEntry]:
    """Fetch every sitemap source and return deduplicated article entries.

    A source that fails to fetch or parse is logged and skipped. When a
    location appears more than once, the first entry is kept unless a later
    one has a last-modified timestamp and the kept one does not.
    """
    entries_by_location: dict[str, SitemapEntry] = {}

    for sitemap_url in sitemap_urls:
        try:
            xml_text = fetcher.fetch_text(sitemap_url)
            parsed = parse_sitemap(xml_text)
        except NetworkError as exc:
            LOGGER.warning("Sitemap fetch failed, skipping %s: %s", sitemap_url, exc)
            continue
        except Exception as exc:  # broad: one bad sitemap must not stop the others
            LOGGER.warning("Sitemap parse failed, skipping %s: %s", sitemap_url, exc)
            continue

        matching = filter_article_entries(parsed, article_path_segment)
        new_locations = 0
        for entry in matching:
            kept = entries_by_location.get(entry.location)
            if kept is None:
                entries_by_location[entry.location] = entry
                new_locations += 1
            elif kept.last_modified is None and entry.last_modified is not None:
                entries_by_location[entry.location] = entry

        LOGGER.info(
            "Sitemap %s: parsed=%s matching=%s new_unique=%s",
            sitemap_url,
            len(parsed),
            len(matching),
            new_locations,
        )

    return list(entries_by_location.values())
