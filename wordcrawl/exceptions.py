"""Custom exceptions for wordcrawl."""


class ConfigurationError(ValueError):
    """Raised when a crawl configuration is missing, unreadable or invalid."""

    def __init__(self, message: str, source: str = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors or a non-success status."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class ParseError(Exception):
    """Raised when the page parser fails for a URL. Aborts the whole crawl."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"Parse failed for {url}: {original}")
