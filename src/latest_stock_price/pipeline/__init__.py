"""
Pipeline Package - In-Memory Query Processing.

Components:
    - QueryPipeline: filter -> sort -> paginate over fetched records
    - closed_range: Inclusive index-range slicing used for pagination
"""

from latest_stock_price.pipeline.query_pipeline import QueryPipeline, closed_range

__all__ = [
    "QueryPipeline",
    "closed_range",
]
