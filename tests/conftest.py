from __future__ import annotations

import pytest

from fetcher import Fetcher, NetworkError


class FakeFetcher(Fetcher):
    """Serves canned bodies by URL; unknown URLs or int bodies raise NetworkError."""

    def __init__(self, pages: dict[str, str | int]) -> None:
        super().__init__({"User-Agent": "test"})
        self.pages = pages
        self.requested: list[str] = []

    def fetch_text(self, url: str) -> str:
        self.requested.append(url)
        body = self.pages.get(url, 404)
        if isinstance(body, int):
            raise NetworkError(url, status=body)
        return body


@pytest.fixture
def fake_fetcher():
    return FakeFetcher
