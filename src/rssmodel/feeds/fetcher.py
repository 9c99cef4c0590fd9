# ABOUTME: HTTP fetcher for feed documents and the fetch-then-decode entry points.
# ABOUTME: Uses httpx with settings-driven timeout, headers and redirect policy.

import httpx
import structlog

from rssmodel.config import Settings, get_settings
from rssmodel.errors import FetchError
from rssmodel.feeds.decoder import decode
from rssmodel.models import Feed

log = structlog.get_logger()


class FeedFetcher:
    """Fetches feed documents over HTTP."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.feed_timeout,
                headers={
                    "User-Agent": self.settings.feed_user_agent,
                    **self.settings.feed_headers,
                },
                follow_redirects=self.settings.feed_follow_redirects,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "FeedFetcher":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def fetch(self, url: str) -> str:
        """Download the whole body of ``url`` as text.

        The status code is not checked: an error page is returned like any
        other body and will usually fail later, when decoded.

        Raises:
            FetchError: On transport failures, invalid URLs and bodies that
                are not valid in their declared charset (UTF-8 by default).
        """
        log.debug("fetching_feed", url=url)
        try:
            response = self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(url, str(e)) from e

        log.debug(
            "feed_fetched",
            url=url,
            status=response.status_code,
            size=len(response.content),
        )
        encoding = response.charset_encoding or "utf-8"
        try:
            return response.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise FetchError(url, f"body is not valid {encoding}: {e}") from e

    def load_feed(self, url: str) -> Feed:
        """Fetch ``url`` and decode the body into a Feed."""
        return decode(self.fetch(url))


def fetch(url: str, settings: Settings | None = None) -> str:
    """Fetch ``url`` with a short-lived client that is closed before returning."""
    with FeedFetcher(settings) as fetcher:
        return fetcher.fetch(url)


def load_feed(url: str, settings: Settings | None = None) -> Feed:
    """Load and decode an RSS feed.

    Raises:
        FetchError: If the document could not be retrieved; nothing is decoded.
        DecodeError: If the retrieved text is not a valid RSS document.
    """
    content = fetch(url, settings)
    return decode(content)
