import logging
from typing import IO, Optional

from wordcrawl.domain.crawl_configuration import CrawlConfiguration
from wordcrawl.exceptions import ConfigurationError
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.crawl_configuration_parser import CrawlConfigurationParser

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """Load a `CrawlConfiguration` from a file path or text stream."""

    def __init__(
        self,
        path: Optional[str] = None,
        store: Optional[ConfigFileStore] = None,
        parser: Optional[CrawlConfigurationParser] = None,
    ):
        self.path = path
        self.store = store or ConfigFileStore()
        self.parser = parser or CrawlConfigurationParser()

    def load(self) -> CrawlConfiguration:
        if not self.path:
            raise ConfigurationError("no config file given (pass a path or set WORDCRAWL_CONFIG)")
        data = self.store.load_dict(self.path)
        config = self.parser.parse(data, source=self.path)
        logger.info("Loaded crawl config %s (%d starting url(s))", self.path, len(config.starting_urls))
        return config

    def read(self, stream: IO[str]) -> CrawlConfiguration:
        return self.parser.parse(self.store.read_dict(stream))
