"""Crawl result data model."""
from typing import Dict, NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    A crawl cut short by its deadline still produces a complete result;
    it simply covers fewer pages.
    """
    word_counts: Dict[str, int]
    """Most popular words, ordered by count descending then word ascending"""

    urls_visited: int
    """Number of distinct URLs claimed and parsed"""
