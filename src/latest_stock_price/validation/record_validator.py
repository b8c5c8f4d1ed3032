"""
Record Validator - Presence Checks on Fetched Listings.

Validates the parsed API payload:
    - Payload is a list of mappings (errors)
    - Each record carries identifier, symbol and meta (warnings)

Design Notes:
    - Field presence only, values are not type-checked
    - Warnings for incomplete records (don't fail)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Set

from latest_stock_price.domain.fields import META_KEY

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of record validation."""

    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning (validation still passes)."""
        self.warnings.append(warning)

    @property
    def has_issues(self) -> bool:
        """Check if any issues were found."""
        return len(self.errors) > 0 or len(self.warnings) > 0


@dataclass
class RecordValidatorConfig:
    """Configuration for record validation."""

    required_fields: Set[str] = field(
        default_factory=lambda: {"identifier", "symbol", META_KEY}
    )


class RecordValidator:
    """Checks that a fetched payload looks like a stock listing."""

    def __init__(self, config: Optional[RecordValidatorConfig] = None) -> None:
        """
        Initialize record validator.

        Args:
            config: Validation configuration
        """
        self.config = config or RecordValidatorConfig()

    def validate(self, payload: Any) -> ValidationResult:
        """
        Validate a parsed API payload.

        Args:
            payload: Parsed JSON body of the listing response

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult()

        if not isinstance(payload, list):
            result.add_error(
                f"Expected a list of stocks, got {type(payload).__name__}"
            )
            self._log_result(result)
            return result

        for index, record in enumerate(payload):
            if not isinstance(record, dict):
                result.add_error(
                    f"Record {index}: expected a mapping, got {type(record).__name__}"
                )
                continue

            label = record.get("symbol") or f"record {index}"
            for required_field in sorted(self.config.required_fields):
                if record.get(required_field) is None:
                    result.add_warning(
                        f"{label}: Missing required field '{required_field}'"
                    )

        self._log_result(result)
        return result

    def _log_result(self, result: ValidationResult) -> None:
        """Log validation summary."""
        if result.errors:
            logger.error(
                f"Record validation: {len(result.errors)} errors, "
                f"{len(result.warnings)} warnings"
            )
        elif result.warnings:
            logger.warning(f"Record validation: {len(result.warnings)} warnings")
            for warning in result.warnings[:10]:
                logger.debug(f"  {warning}")
        else:
            logger.debug("Record validation: OK")
