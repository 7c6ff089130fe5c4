from typing import Dict, List, NamedTuple


class ParseResult(NamedTuple):
    """Output of parsing a single page."""
    word_counts: Dict[str, int]
    links: List[str]
