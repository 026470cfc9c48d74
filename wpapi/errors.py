"""Exceptions raised by the WordPress REST client."""


class WordPressError(Exception):
    """Base class for every failure surfaced by wpapi."""


class RequestError(WordPressError):
    """The server answered with a status other than the one the operation expects."""

    def __init__(self, status_code: int, text: str):
        self.status_code = status_code
        self.text = text
        super().__init__(f"WordPress API error: {status_code} - {text}")


class TransportError(WordPressError):
    """Connection-level failure (DNS, TLS, timeout, refused connection)."""


class PaginationError(WordPressError):
    """The X-WP-TotalPages header was missing or not an integer."""
