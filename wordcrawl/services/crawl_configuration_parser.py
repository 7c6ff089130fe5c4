from typing import Optional

from wordcrawl.domain.crawl_configuration import CrawlConfiguration, default_parallelism
from wordcrawl.exceptions import ConfigurationError

_KNOWN_KEYS = {
    "startPages",
    "ignoredUrls",
    "ignoredWords",
    "parallelism",
    "implementationOverride",  # accepted and ignored
    "maxDepth",
    "timeoutSeconds",
    "popularWordCount",
    "profileOutputPath",
    "resultPath",
}


class CrawlConfigurationParser:
    """Parse a configuration mapping into a `CrawlConfiguration`.

    Responsibility: schema/validation for config documents. It does NOT
    perform filesystem IO. Keys use the camelCase names of the JSON format:

        {"startPages": [...], "ignoredUrls": [...], "ignoredWords": [...],
         "parallelism": 4, "maxDepth": 2, "timeoutSeconds": 5,
         "popularWordCount": 10, "profileOutputPath": "...", "resultPath": "..."}
    """

    def parse(self, data: dict, source: Optional[str] = None) -> CrawlConfiguration:
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigurationError(f"unknown config keys: {', '.join(sorted(unknown))}", source=source)

        start_pages = data.get("startPages") or []
        if not isinstance(start_pages, list):
            raise ConfigurationError("startPages must be a list", source=source)

        parallelism = data.get("parallelism")
        try:
            return CrawlConfiguration(
                starting_urls=start_pages,
                max_depth=data.get("maxDepth", 0),
                deadline_seconds=data.get("timeoutSeconds", 1),
                popular_word_count=data.get("popularWordCount", 0),
                parallelism_budget=parallelism if parallelism is not None else default_parallelism(),
                ignored_url_patterns=data.get("ignoredUrls") or [],
                ignored_word_patterns=data.get("ignoredWords") or [],
                profile_output_path=data.get("profileOutputPath") or None,
                result_path=data.get("resultPath") or None,
            )
        except ConfigurationError as e:
            if source and e.source is None:
                raise ConfigurationError(str(e), source=source) from e
            raise
