"""Shared typed models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

# A parsed JSON-LD value: object, array or scalar.
JsonValue = Union[dict[str, "JsonValue"], list["JsonValue"], str, int, float, bool, None]


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    """One <url> record from a sitemap; identity is the location."""

    location: str
    last_modified: datetime | None = None


@dataclass(frozen=True, slots=True)
class ArticleFields:
    """Candidate metadata from a single extraction strategy."""

    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    published_at: str | None = None


@dataclass(frozen=True, slots=True)
class Article:
    """Normalized article record handed to persistence."""

    source_url: str
    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    published_at: datetime | None = None
    raw_structured_data: str | None = None

    def __post_init__(self) -> None:
        if not self.source_url or not self.source_url.strip():
            raise ValueError("Article.source_url must be a non-empty string")
