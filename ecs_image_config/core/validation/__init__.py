"""Image configuration validation.

This package validates an :class:`~ecs_image_config.config.ImageConfig` before
any image is built or copied. It supports:
- Image and copy-destination name checks (length, URL prefix, whitespace)
- Snapshot name checks, including the reserved ``auto`` prefix
- Copy region deduplication and known-region checks with a bypass flag
- Per-region snapshot name overrides
- Collecting every violation into one tagged result

Example usage:
    from ecs_image_config.core.validation import ImageConfigValidator

    validator = ImageConfigValidator()
    result = validator.validate(config)
    if not result.is_valid:
        print(result.format_errors())
"""

from .engine import ImageConfigValidator, validate_image_config
from .regions import (
    ALICLOUD_REGIONS,
    DEFAULT_CATALOG,
    RegionCatalog,
    StaticRegionCatalog,
)
from .result import ValidationErrorKind, ValidationIssue, ValidationResult
from .rules import (
    NameRule,
    RegionRule,
    SnapshotNameRule,
    ValidationRule,
    validate_name,
    validate_snapshot_name,
)

__all__ = [
    # Engine
    "ImageConfigValidator",
    "validate_image_config",
    # Regions
    "ALICLOUD_REGIONS",
    "DEFAULT_CATALOG",
    "RegionCatalog",
    "StaticRegionCatalog",
    # Result
    "ValidationErrorKind",
    "ValidationIssue",
    "ValidationResult",
    # Rules
    "ValidationRule",
    "NameRule",
    "SnapshotNameRule",
    "RegionRule",
    "validate_name",
    "validate_snapshot_name",
]
