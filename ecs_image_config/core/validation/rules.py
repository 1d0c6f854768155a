"""Leaf validation rules for image names, snapshot names and regions."""

from abc import ABC, abstractmethod
import re

from .regions import RegionCatalog
from .result import ValidationErrorKind, ValidationIssue


class ValidationRule(ABC):
    """Base class for validation rules."""

    def __init__(self, name: str, description: str | None = None):
        """Initialize the validation rule.

        Args:
            name: Name of the rule
            description: Optional description of the rule
        """
        self.name = name
        self.description = description or f"Validation rule: {name}"

    @abstractmethod
    def check(self, value: str, field: str) -> list[ValidationIssue]:
        """Check a single value.

        Args:
            value: Value to check
            field: Field label used in error messages

        Returns:
            Violations found, empty when the value complies
        """
        pass

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"


class NameRule(ValidationRule):
    """Length, URL-prefix and whitespace constraints for image names.

    Every constraint is checked independently, so one name can produce several
    violations. Length is counted in UTF-8 bytes and must satisfy
    ``1 < length <= 128``.
    """

    MIN_LENGTH = 2
    MAX_LENGTH = 128
    URL_PREFIXES = ("http://", "https://")

    _whitespace = re.compile(r"\s+")

    def __init__(self, name: str = "NameRule", description: str | None = None):
        super().__init__(
            name, description or "Validates image name length, prefix and spacing"
        )

    def check(self, value: str, field: str) -> list[ValidationIssue]:
        issues = []

        length = len(value.encode("utf-8"))
        if length < self.MIN_LENGTH or length > self.MAX_LENGTH:
            issues.append(
                self._issue(
                    ValidationErrorKind.NAME_LENGTH_VIOLATION,
                    f"{field} must less than 128 letters and more than 1 letters",
                    field,
                    value,
                )
            )

        if value.startswith(self.URL_PREFIXES):
            issues.append(
                self._issue(
                    ValidationErrorKind.NAME_URL_PREFIX_VIOLATION,
                    f"{field} can't start with 'http://' or 'https://'",
                    field,
                    value,
                )
            )

        # Message names the value rather than the field; tooling parses it.
        if self._whitespace.search(value):
            issues.append(
                self._issue(
                    ValidationErrorKind.NAME_WHITESPACE_VIOLATION,
                    f"{value} can't include spaces",
                    field,
                    value,
                )
            )

        return issues

    def _issue(
        self, kind: ValidationErrorKind, message: str, field: str, value: str
    ) -> ValidationIssue:
        return ValidationIssue(
            kind=kind, message=message, field=field, value=value, rule_name=self.name
        )


class SnapshotNameRule(NameRule):
    """NameRule plus the reserved ``auto`` prefix used by system snapshots."""

    RESERVED_PREFIX = "auto"

    def __init__(self, name: str = "SnapshotNameRule"):
        super().__init__(name, "Validates snapshot names")

    def check(self, value: str, field: str) -> list[ValidationIssue]:
        issues = super().check(value, field)

        if value.startswith(self.RESERVED_PREFIX):
            issues.append(
                self._issue(
                    ValidationErrorKind.SNAPSHOT_AUTO_PREFIX_VIOLATION,
                    f"{field} can't start with 'auto'",
                    field,
                    value,
                )
            )

        return issues


class RegionRule(ValidationRule):
    """Known-region membership check with a bypass switch."""

    def __init__(
        self,
        catalog: RegionCatalog,
        skip_validation: bool = False,
        name: str = "RegionRule",
    ):
        """Initialize the region rule.

        Args:
            catalog: Catalog consulted for membership
            skip_validation: Treat every region as known when True
            name: Name of the rule
        """
        self.catalog = catalog
        self.skip_validation = skip_validation
        super().__init__(name, "Validates regions against the region catalog")

    def is_known_region(self, region: str) -> bool:
        if self.skip_validation:
            return True
        return self.catalog.is_known_region(region)

    def validate_region(
        self, region: str, field: str | None = None
    ) -> ValidationIssue | None:
        """Return an UNKNOWN_REGION issue for ``region``, or None if it is known."""
        if self.is_known_region(region):
            return None

        return ValidationIssue(
            kind=ValidationErrorKind.UNKNOWN_REGION,
            message=f"Not a valid alicloud region: {region}",
            field=field,
            value=region,
            rule_name=self.name,
        )

    def check(self, value: str, field: str) -> list[ValidationIssue]:
        issue = self.validate_region(value, field)
        return [issue] if issue else []


_name_rule = NameRule()
_snapshot_name_rule = SnapshotNameRule()


def validate_name(name: str, field: str) -> list[ValidationIssue]:
    """Check ``name`` against the image name constraints."""
    return _name_rule.check(name, field)


def validate_snapshot_name(name: str, field: str) -> list[ValidationIssue]:
    """Check ``name`` against the snapshot name constraints."""
    return _snapshot_name_rule.check(name, field)
