import logging
from typing import Callable

import requests

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import HttpFetchError

logger = logging.getLogger(__name__)


class HttpService:
    """Fetches pages for `HttpPageParser`.

    `http_client` is a `requests.get`-compatible callable, injected by the
    container so tests can hand in a mock. Transport failures surface as
    `HttpFetchError`; status codes are left to the caller.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        logger.debug("GET %s", url)
        try:
            resp = self.http_client(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        content_type = resp.headers.get("Content-Type") if hasattr(resp, "headers") else None
        return HttpResponse(resp.status_code, resp.text, content_type)
