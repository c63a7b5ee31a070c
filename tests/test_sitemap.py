from datetime import UTC, datetime

import pytest

from sitemap import parse_sitemap

SITEMAP_XML = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url>
    <loc>https://www.example.com/news/first-story</loc>
    <lastmod>2025-11-13T10:00:00Z</lastmod>
  </url>
  <url>
    <loc> https://www.example.com/news/second-story </loc>
  </url>
  <url>
    <lastmod>2025-11-12T08:00:00Z</lastmod>
  </url>
  <url>
    <loc>https://www.example.com/culture/review</loc>
    <lastmod>2025-11-11</lastmod>
  </url>
</urlset>
"""


def test_parse_sitemap_extracts_entries_in_document_order() -> None:
    entries = parse_sitemap(SITEMAP_XML)

    assert [e.location for e in entries] == [
        "https://www.example.com/news/first-story",
        "https://www.example.com/news/second-story",
        "https://www.example.com/culture/review",
    ]


def test_parse_sitemap_parses_lastmod_to_utc() -> None:
    entries = parse_sitemap(SITEMAP_XML)

    assert entries[0].last_modified == datetime(2025, 11, 13, 10, 0, tzinfo=UTC)
    assert entries[1].last_modified is None
    assert entries[2].last_modified == datetime(2025, 11, 11, tzinfo=UTC)


def test_parse_sitemap_drops_url_without_location() -> None:
    entries = parse_sitemap(SITEMAP_XML)
    assert all(e.location for e in entries)
    assert len(entries) == 3


def test_parse_sitemap_accepts_camel_case_variants() -> None:
    xml = (
        "<urlSet>"
        "<url><loc>https://www.example.com/news/a</loc>"
        "<lastModified>2025-01-02T03:04:05+00:00</lastModified></url>"
        "</urlSet>"
    )

    entries = parse_sitemap(xml)

    assert len(entries) == 1
    assert entries[0].location == "https://www.example.com/news/a"
    assert entries[0].last_modified == datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC)


def test_parse_sitemap_ignores_nested_extension_locations() -> None:
    xml = """<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"
        xmlns:image="http://www.google.com/schemas/sitemap-image/1.1">
      <url>
        <image:image><image:loc>https://cdn.example.com/pic.jpg</image:loc></image:image>
      </url>
      <url>
        <loc>https://www.example.com/news/with-image</loc>
        <image:image><image:loc>https://cdn.example.com/pic2.jpg</image:loc></image:image>
      </url>
    </urlset>"""

    entries = parse_sitemap(xml)

    assert [e.location for e in entries] == ["https://www.example.com/news/with-image"]


def test_parse_sitemap_unparseable_lastmod_is_absent() -> None:
    xml = "<urlset><url><loc>https://www.example.com/news/a</loc><lastmod>unknown</lastmod></url></urlset>"

    entries = parse_sitemap(xml)

    assert entries[0].last_modified is None


@pytest.mark.parametrize("payload", [
    "",
    "   ",
    "this is not xml at all",
    "<sitemapindex><sitemap><loc>https://www.example.com/s1.xml</loc></sitemap></sitemapindex>",
    "<html><body><url><loc>https://www.example.com/news/a</loc></url></body></html>",
])
def test_parse_sitemap_without_urlset_container_returns_empty(payload: str) -> None:
    assert parse_sitemap(payload) == []


def test_parse_sitemap_truncated_document_does_not_raise() -> None:
    entries = parse_sitemap("<urlset><url><loc>https://www.example.com/news/a</loc>")
    assert all(e.location == "https://www.example.com/news/a" for e in entries)


def test_parse_sitemap_partial_lastmod_is_absent() -> None:
    xml = "<urlset><url><loc>https://www.example.com/news/a</loc><lastmod>10</lastmod></url></urlset>"

    assert parse_sitemap(xml)[0].last_modified is None
