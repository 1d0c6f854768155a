"""Validation result classes for the image configuration validator."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ...config.image_config import ImageConfig


class ValidationErrorKind(str, Enum):
    """Stable tags for every violation the validator can report."""

    MISSING_REQUIRED_FIELD = "missing_required_field"
    NAME_LENGTH_VIOLATION = "name_length_violation"
    NAME_URL_PREFIX_VIOLATION = "name_url_prefix_violation"
    NAME_WHITESPACE_VIOLATION = "name_whitespace_violation"
    SNAPSHOT_AUTO_PREFIX_VIOLATION = "snapshot_auto_prefix_violation"
    UNKNOWN_REGION = "unknown_region"


@dataclass
class ValidationIssue:
    """Represents a single validation error."""

    kind: ValidationErrorKind
    message: str
    field: str | None = None
    value: Any | None = None
    rule_name: str | None = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert the issue to a dictionary.

        Returns:
            Dictionary representation of the issue
        """
        return {
            "kind": self.kind.value,
            "message": self.message,
            "field": self.field,
            "value": self.value,
            "rule_name": self.rule_name,
        }


@dataclass
class ValidationResult:
    """Container for validation results.

    ``config`` holds the normalized configuration produced by the run (copy
    regions deduplicated and, unless bypassed, filtered to known regions). It
    is populated even when errors were found.
    """

    errors: list[ValidationIssue] = field(default_factory=list)
    config: "ImageConfig | None" = None
    validation_time_ms: float = 0.0

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(
        self,
        kind: ValidationErrorKind,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        rule_name: str | None = None,
    ) -> None:
        """Add an error to the result.

        Args:
            kind: Violation tag
            message: Human-readable error message
            field: Field path that caused the error
            value: Value that caused the error
            rule_name: Name of the rule that failed
        """
        self.errors.append(
            ValidationIssue(
                kind=kind,
                message=message,
                field=field,
                value=value,
                rule_name=rule_name,
            )
        )

    def extend(self, issues: list[ValidationIssue]) -> None:
        """Append issues produced by a rule, keeping their order."""
        self.errors.extend(issues)

    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def get_errors_by_kind(self, kind: ValidationErrorKind) -> list[ValidationIssue]:
        """Get all errors tagged with ``kind``."""
        return [error for error in self.errors if error.kind == kind]

    def get_errors_by_field(self, field: str) -> list[ValidationIssue]:
        """Get all errors for a specific field path."""
        return [error for error in self.errors if error.field == field]

    def get_error_summary(self) -> dict[str, int]:
        """Get a summary of errors by kind.

        Returns:
            Dictionary with error counts keyed by kind value
        """
        summary: dict[str, int] = {}
        for error in self.errors:
            summary[error.kind.value] = summary.get(error.kind.value, 0) + 1
        return summary

    def format_errors(self) -> str:
        """Format errors as a human-readable string."""
        if not self.errors:
            return "No errors"

        lines = ["Errors:"]
        for error in self.errors:
            field_info = f" (field: {error.field})" if error.field else ""
            lines.append(f"  - {error.message}{field_info}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a dictionary.

        Returns:
            Dictionary representation of the result
        """
        return {
            "is_valid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
            "copy_regions": list(self.config.copy_regions) if self.config else None,
            "validation_time_ms": self.validation_time_ms,
            "summary": self.get_error_summary(),
        }

    def raise_for_errors(self, config_file: str | None = None) -> None:
        """Raise ImageConfigValidationError when any error was collected."""
        if self.errors:
            from ...config.errors import ImageConfigValidationError

            raise ImageConfigValidationError(
                "Image configuration is invalid",
                errors=list(self.errors),
                config_file=config_file,
            )
