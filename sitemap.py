"""Sitemap XML parsing."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from dates import parse_timestamp
from models import SitemapEntry

LOGGER = logging.getLogger(__name__)

_URLSET_TAGS = ["urlset", "urlSet"]
_LASTMOD_TAGS = ["lastmod", "lastModified"]


def parse_sitemap(xml_text: str) -> list[SitemapEntry]:
    """Parse a <urlset> sitemap into entries, in document order.

    Returns an empty list when the document is empty, malformed or has no
    URL-set container. Entries without a <loc> are dropped.
    """
    if not xml_text or not xml_text.strip():
        return []

    try:
        soup = BeautifulSoup(xml_text, "xml")
    except ParserRejectedMarkup as exc:
        LOGGER.debug("Sitemap rejected by XML parser: %s", exc)
        return []

    urlset = soup.find(_URLSET_TAGS, recursive=False)
    if urlset is None:
        return []

    entries: list[SitemapEntry] = []
    for node in urlset.find_all("url", recursive=False):
        location = _child_text(node, ["loc"])
        if not location:
            continue
        entries.append(
            SitemapEntry(
                location=location,
                last_modified=parse_timestamp(_child_text(node, _LASTMOD_TAGS)),
            )
        )
    return entries


def _child_text(node, names: list[str]) -> str | None:
    # Direct children only; image/news extensions nest their own <loc>.
    for name in names:
        child = node.find(name, recursive=False)
        if child is not None:
            text = child.get_text(strip=True)
            if text:
                return text
    return None
