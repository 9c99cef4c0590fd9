# ABOUTME: Exception hierarchy for feed fetching and decoding.
# ABOUTME: FetchError wraps transport failures, DecodeError wraps XML failures.


class RSSError(Exception):
    """Base class for all rssmodel errors."""


class FetchError(RSSError):
    """Raised when a feed cannot be retrieved over HTTP."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"failed to fetch {url}: {message}")
        self.url = url
        self.message = message


class DecodeError(RSSError):
    """Raised when feed text is not a well-formed RSS document.

    ``position`` is the ``(line, column)`` reported by the XML parser, if any.
    """

    def __init__(self, message: str, position: tuple[int, int] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
