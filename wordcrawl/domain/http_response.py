from typing import NamedTuple, Optional


class HttpResponse(NamedTuple):
    """A fetched page as seen by the word parser: status, decoded body, media type."""
    status_code: int
    text: str
    content_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_html(self) -> bool:
        # a missing Content-Type is treated as HTML
        return self.content_type is None or "html" in self.content_type.lower()
