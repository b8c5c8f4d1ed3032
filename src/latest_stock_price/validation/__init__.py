"""
Validation Package - Presence Checks on Fetched Data.

    - RecordValidator: Checks the API payload is a list of stock records
      carrying the fields the query pipeline reads

Design Principles:
    - Fail fast on payloads that are not a listing
    - Warn, don't fail, on incomplete records
"""

from latest_stock_price.validation.record_validator import (
    RecordValidator,
    RecordValidatorConfig,
    ValidationResult,
)

__all__ = [
    "RecordValidator",
    "RecordValidatorConfig",
    "ValidationResult",
]
