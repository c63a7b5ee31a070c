"""HTTP fetching for sitemaps and article pages."""

from __future__ import annotations

import logging

import requests

from config import ScraperConfig

LOGGER = logging.getLogger(__name__)


class NetworkError(Exception):
    """A fetch failed at the transport level or returned a non-2xx status."""

    def __init__(self, url: str, status: int | None = None, reason: str | None = None) -> None:
        self.url = url
        self.status = status
        if status is not None:
            message = f"Request failed for {url} with status {status}"
        else:
            message = f"Request failed for {url}: {reason or 'transport error'}"
        super().__init__(message)


def default_headers(config: ScraperConfig) -> dict[str, str]:
    """Identity headers sent with every request."""
    return {"User-Agent": config.user_agent, "Accept": config.accept}


class Fetcher:
    """GET-only text fetcher with a fixed header set."""

    def __init__(self, headers: dict[str, str], timeout: float | None = None) -> None:
        self._headers = dict(headers)
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: ScraperConfig) -> Fetcher:
        return cls(default_headers(config), timeout=config.timeout_seconds)

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def fetch_text(self, url: str) -> str:
        """Return the response body of a GET to url, or raise NetworkError."""
        LOGGER.debug("GET %s", url)
        try:
            response = requests.get(url, headers=self._headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise NetworkError(url, reason=str(exc)) from exc

        if not 200 <= response.status_code < 300:
            raise NetworkError(url, status=response.status_code)
        return _decode_body(response)


def _decode_body(response: requests.Response) -> str:
    """Decode the body, using UTF-8 rather than ISO-8859-1 when no charset is declared."""
    content_type = response.headers.get("Content-Type") or ""
    if "charset=" in content_type.lower():
        return response.text

    try:
        return response.content.decode("utf-8-sig")
    except UnicodeDecodeError:
        response.encoding = response.apparent_encoding
        return response.text
