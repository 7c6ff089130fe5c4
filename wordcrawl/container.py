"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.configuration_loader import ConfigurationLoader
from wordcrawl.services.content_review_service import ContentReviewService
from wordcrawl.services.crawl_configuration_parser import CrawlConfigurationParser
from wordcrawl.services.crawl_engine import CrawlEngine
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.page_parser import HttpPageParser
from wordcrawl.services.profiler import Profiler, ProfiledCrawlEngine, ProfiledPageParser


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# USER_AGENT (str, default: "wordcrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for outbound HTTP requests.
#
# CRAWL_CONFIG_PATH (str | optional)
#   JSON/YAML crawl configuration file. Normally set by run.py from argv.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "wordcrawl/0.1"),
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
    "CRAWL_CONFIG_PATH": env.get_optional_str_env("WORDCRAWL_CONFIG"),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for wordcrawl."""

    config = providers.Configuration(default=ENV)

    configuration_loader = providers.Factory(
        ConfigurationLoader,
        path=config.CRAWL_CONFIG_PATH,
        store=providers.Singleton(ConfigFileStore),
        parser=providers.Singleton(CrawlConfigurationParser),
    )

    # Loaded once; the parser and engine both read from it
    crawl_configuration = providers.Singleton(
        ConfigurationLoader.load,
        configuration_loader,
    )

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    content_review_service = providers.Singleton(
        ContentReviewService
    )

    profiler = providers.Singleton(
        Profiler
    )

    page_parser = providers.Singleton(
        HttpPageParser,
        http_service=http_service,
        content_review_service=content_review_service,
        ignored_word_patterns=crawl_configuration.provided.ignored_word_patterns,
    )

    profiled_page_parser = providers.Singleton(
        ProfiledPageParser,
        delegate=page_parser,
        profiler=profiler,
    )

    crawl_engine = providers.Factory(
        CrawlEngine,
        config=crawl_configuration,
        parser=profiled_page_parser,
    )

    crawler = providers.Factory(
        ProfiledCrawlEngine,
        delegate=crawl_engine,
        profiler=profiler,
    )
