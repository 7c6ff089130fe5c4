from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Optional, Pattern, Sequence, Union

from wordcrawl.exceptions import ConfigurationError


def default_parallelism() -> int:
    return os.cpu_count() or 1


def compile_patterns(values: Sequence[Union[str, Pattern]], field_name: str) -> tuple[Pattern, ...]:
    """Compile regex strings (already-compiled patterns pass through)."""
    compiled = []
    for value in values or ():
        if isinstance(value, re.Pattern):
            compiled.append(value)
            continue
        try:
            compiled.append(re.compile(value))
        except (re.error, TypeError) as e:
            raise ConfigurationError(f"invalid pattern {value!r} in {field_name}: {e}") from e
    return tuple(compiled)


@dataclass(frozen=True)
class CrawlConfiguration:
    """Immutable crawl settings.

    Pattern fields accept strings or compiled patterns and are stored as
    tuples of compiled patterns. URL and word patterns use full-match
    semantics: a pattern must match the whole string, not a substring.
    """

    starting_urls: tuple[str, ...] = ()
    max_depth: int = 0
    deadline_seconds: float = 1.0
    popular_word_count: int = 0
    parallelism_budget: int = field(default_factory=default_parallelism)
    ignored_url_patterns: tuple[Pattern, ...] = ()
    ignored_word_patterns: tuple[Pattern, ...] = ()
    profile_output_path: Optional[str] = None
    result_path: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.starting_urls, str):
            raise ConfigurationError("starting_urls must be a list of URLs, not a string")
        object.__setattr__(self, "starting_urls", tuple(self.starting_urls or ()))
        object.__setattr__(
            self, "ignored_url_patterns", compile_patterns(self.ignored_url_patterns, "ignored_url_patterns")
        )
        object.__setattr__(
            self, "ignored_word_patterns", compile_patterns(self.ignored_word_patterns, "ignored_word_patterns")
        )

        for name in ("max_depth", "popular_word_count", "parallelism_budget"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.max_depth < 0:
            raise ConfigurationError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.popular_word_count < 0:
            raise ConfigurationError(f"popular_word_count must be >= 0, got {self.popular_word_count}")
        if self.parallelism_budget < 1:
            raise ConfigurationError(f"parallelism_budget must be >= 1, got {self.parallelism_budget}")

        if isinstance(self.deadline_seconds, bool) or not isinstance(self.deadline_seconds, (int, float)):
            raise ConfigurationError(f"deadline_seconds must be a number, got {self.deadline_seconds!r}")
        if self.deadline_seconds < 0:
            raise ConfigurationError(f"deadline_seconds must be >= 0, got {self.deadline_seconds}")

    def is_ignored_url(self, url: str) -> bool:
        return any(p.fullmatch(url) for p in self.ignored_url_patterns)

    def is_ignored_word(self, word: str) -> bool:
        return any(p.fullmatch(word) for p in self.ignored_word_patterns)
