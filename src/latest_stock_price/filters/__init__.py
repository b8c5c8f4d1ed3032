"""
Filters Package - Record Filter Stages.

Filters:
    - ExactMatchFilter: Keeps records whose field equals a given value

Design Principles:
    - Each filter is independently testable
    - Stateless filtering, input lists are never modified
"""

from latest_stock_price.filters.exact_match import ExactMatchFilter, build_filters

__all__ = [
    "ExactMatchFilter",
    "build_filters",
]
