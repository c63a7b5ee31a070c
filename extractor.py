"""Article metadata extraction: JSON-LD first, HTML meta tags as fallback."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from typing import Any

from bs4 import BeautifulSoup

from dates import parse_timestamp
from fetcher import Fetcher
from models import Article, ArticleFields, JsonValue

LOGGER = logging.getLogger(__name__)

ARTICLE_TYPES: frozenset[str] = frozenset({"NewsArticle", "Article"})

_JSONLD_TYPE = re.compile(r"^\s*application/ld\+json", re.IGNORECASE)

# (attribute, value) pairs tried in order for each meta-derived field.
_META_TITLE = (("property", "og:title"), ("name", "twitter:title"))
_META_DESCRIPTION = (("property", "og:description"), ("name", "description"))
_META_IMAGE = (("property", "og:image"), ("name", "twitter:image"))


def extract_article(url: str, fetcher: Fetcher) -> Article:
    """Fetch one article page and build a normalized Article.

    Only a failed page fetch raises (NetworkError); missing or malformed
    metadata just leaves the corresponding fields as None.
    """
    html = fetcher.fetch_text(url)
    return parse_article_html(url, html)


def parse_article_html(url: str, html: str) -> Article:
    soup = BeautifulSoup(html, "lxml")

    node, raw_block = find_structured_article(soup)
    from_ld = fields_from_structured_data(node) if node is not None else ArticleFields()
    from_meta = fields_from_meta(soup)

    published_raw = first_present((from_ld.published_at, from_meta.published_at))

    return Article(
        source_url=url,
        title=first_present((from_ld.title, from_meta.title)),
        description=first_present((from_ld.description, from_meta.description)),
        image_url=first_present((from_ld.image_url, from_meta.image_url)),
        published_at=parse_timestamp(published_raw),
        raw_structured_data=raw_block,
    )


def first_present(candidates: Iterable[Any]) -> str | None:
    """Return the first candidate that is a non-blank string, stripped.

    Candidates are consumed lazily, so a generator stops at the first hit.
    """
    for candidate in candidates:
        if isinstance(candidate, str) and candidate.strip():
            return candidate.strip()
    return None


def find_structured_article(soup: BeautifulSoup) -> tuple[dict[str, JsonValue] | None, str | None]:
    """Return the first NewsArticle/Article object across all JSON-LD blocks.

    Also returns the raw text of the block it came from. Blocks that fail to
    parse are skipped.
    """
    for script in soup.find_all("script", type=_JSONLD_TYPE):
        text = (script.string or "").strip()
        if not text:
            continue
        try:
            node = find_article_node(json.loads(text))
        except (json.JSONDecodeError, RecursionError) as exc:
            # RecursionError: nesting deeper than the interpreter stack allows.
            LOGGER.debug("Skipping malformed JSON-LD block: %s", exc)
            continue

        if node is not None:
            return node, text

    return None, None


def find_article_node(value: JsonValue) -> dict[str, JsonValue] | None:
    """Depth-first search for the first object typed NewsArticle or Article.

    Lists are searched item by item; an object that is not itself an article
    is searched through its "@graph" entries. Scalars never match.
    """
    if isinstance(value, list):
        for item in value:
            found = find_article_node(item)
            if found is not None:
                return found
        return None

    if isinstance(value, dict):
        if _is_article_type(value.get("@type")):
            return value
        graph = value.get("@graph")
        if isinstance(graph, list):
            return find_article_node(graph)

    return None


def _is_article_type(declared: JsonValue) -> bool:
    if isinstance(declared, str):
        return declared in ARTICLE_TYPES
    if isinstance(declared, list):
        return any(isinstance(t, str) and t in ARTICLE_TYPES for t in declared)
    return False


def fields_from_structured_data(node: dict[str, JsonValue]) -> ArticleFields:
    return ArticleFields(
        title=first_present((node.get("headline"), node.get("name"))),
        description=first_present((node.get("description"),)),
        image_url=_image_url(node.get("image")),
        published_at=first_present((node.get("datePublished"), node.get("dateCreated"))),
    )


def _image_url(image: JsonValue) -> str | None:
    if isinstance(image, list):
        image = image[0] if image else None
    if isinstance(image, dict):
        # ImageObject
        image = image.get("url")
    return first_present((image,))


def fields_from_meta(soup: BeautifulSoup) -> ArticleFields:
    """Candidate fields from Open Graph / Twitter card meta tags and <title>.

    Meta tags never supply a publish date.
    """
    title = first_present(_meta_values(soup, _META_TITLE))
    if title is None:
        title_tag = soup.find("title")
        title = first_present((title_tag.get_text(),)) if title_tag is not None else None

    return ArticleFields(
        title=title,
        description=first_present(_meta_values(soup, _META_DESCRIPTION)),
        image_url=first_present(_meta_values(soup, _META_IMAGE)),
    )


def _meta_values(soup: BeautifulSoup, lookups: Iterable[tuple[str, str]]) -> Iterable[str | None]:
    for attr, key in lookups:
        tag = soup.find("meta", attrs={attr: key})
        yield tag.get("content") if tag is not None else None
