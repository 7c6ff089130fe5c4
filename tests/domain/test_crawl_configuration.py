import re
from dataclasses import FrozenInstanceError

import pytest

from wordcrawl.domain.crawl_configuration import CrawlConfiguration
from wordcrawl.exceptions import ConfigurationError


def test_defaults():
    cfg = CrawlConfiguration()
    assert cfg.starting_urls == ()
    assert cfg.max_depth == 0
    assert cfg.popular_word_count == 0
    assert cfg.parallelism_budget >= 1


def test_patterns_compiled_and_full_match():
    cfg = CrawlConfiguration(ignored_url_patterns=[r"https://a"], ignored_word_patterns=[r"^.{1,3}$"])
    assert all(isinstance(p, re.Pattern) for p in cfg.ignored_url_patterns)
    assert cfg.is_ignored_url("https://a")
    assert not cfg.is_ignored_url("https://abc")
    assert cfg.is_ignored_word("the")
    assert not cfg.is_ignored_word("crawler")


def test_is_frozen():
    cfg = CrawlConfiguration(max_depth=2)
    with pytest.raises(FrozenInstanceError):
        cfg.max_depth = 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_depth": -1},
        {"popular_word_count": -1},
        {"parallelism_budget": 0},
        {"deadline_seconds": -0.5},
        {"max_depth": "2"},
        {"ignored_url_patterns": ["("]},
        {"starting_urls": "https://a"},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        CrawlConfiguration(**kwargs)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        CrawlConfiguration(max_depth=-3)
