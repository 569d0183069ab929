from uncss.filter.normalize import normalize_selector
from uncss.filter.selector_filter import (
    filter_rules,
    filter_stylesheet,
    is_selector_used,
    match_count,
)

__all__ = [
    "filter_rules",
    "filter_stylesheet",
    "is_selector_used",
    "match_count",
    "normalize_selector",
]
