"""Validation engine that runs the image rules over an ImageConfig."""

import logging
import time

from ...config.image_config import ImageConfig
from .regions import DEFAULT_CATALOG, RegionCatalog
from .result import ValidationErrorKind, ValidationResult
from .rules import NameRule, RegionRule, SnapshotNameRule

logger = logging.getLogger(__name__)


class ImageConfigValidator:
    """Collects every violation in an image configuration in a single pass.

    The validator holds no per-run state, so one instance can be shared by
    concurrent callers. The input config is never modified; the normalized
    copy is returned on the result.
    """

    def __init__(self, catalog: RegionCatalog | None = None) -> None:
        """Initialize the validator.

        Args:
            catalog: Region catalog for membership checks. Uses the built-in
                Alibaba Cloud catalog if None.
        """
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.name_rule = NameRule()
        self.snapshot_name_rule = SnapshotNameRule()

    def validate(self, config: ImageConfig) -> ValidationResult:
        """Validate ``config`` and return all errors with the normalized config.

        Rules run in a fixed order: image name, copy names, snapshot names,
        copy regions, per-region snapshot names. No rule suppresses another.

        Args:
            config: Configuration to validate

        Returns:
            Validation result
        """
        start_time = time.time()
        result = ValidationResult()
        region_rule = RegionRule(
            self.catalog, skip_validation=config.skip_region_validation
        )

        self._validate_image_name(config, result)
        self._validate_copy_names(config, result)
        self._validate_snapshot_names(config, result)
        copy_regions = self._normalize_copy_regions(config, region_rule, result)
        self._validate_copy_snapshot_names(config, region_rule, result)

        result.config = config.model_copy(
            update={"copy_regions": copy_regions}, deep=True
        )
        result.validation_time_ms = (time.time() - start_time) * 1000

        logger.info(
            f"Validated image config '{config.name}': "
            f"{len(result.errors)} error(s), {len(copy_regions)} copy region(s)"
        )
        return result

    def _validate_image_name(
        self, config: ImageConfig, result: ValidationResult
    ) -> None:
        if not config.name:
            result.add_error(
                ValidationErrorKind.MISSING_REQUIRED_FIELD,
                "image_name must be specified",
                field="image_name",
                rule_name="RequiredField",
            )
            return

        result.extend(self.name_rule.check(config.name, "image_name"))

    def _validate_copy_names(
        self, config: ImageConfig, result: ValidationResult
    ) -> None:
        for index, dest_name in enumerate(config.copy_names):
            if not dest_name:
                continue
            result.extend(
                self.name_rule.check(dest_name, f"image_copy_names[{index}]")
            )

    def _validate_snapshot_names(
        self, config: ImageConfig, result: ValidationResult
    ) -> None:
        for index, snapshot_name in enumerate(config.snapshot_names):
            if not snapshot_name:
                continue
            result.extend(
                self.snapshot_name_rule.check(
                    snapshot_name, f"image_snapshot_names[{index}]"
                )
            )

    def _normalize_copy_regions(
        self,
        config: ImageConfig,
        region_rule: RegionRule,
        result: ValidationResult,
    ) -> list[str]:
        """Deduplicate copy regions and drop the ones the catalog rejects."""
        seen: set[str] = set()
        regions: list[str] = []

        for index, region in enumerate(config.copy_regions):
            if region in seen:
                logger.debug(f"Dropping duplicate copy region '{region}'")
                continue
            seen.add(region)

            issue = region_rule.validate_region(
                region, field=f"image_copy_regions[{index}]"
            )
            if issue:
                result.errors.append(issue)
                continue

            regions.append(region)

        return regions

    def _validate_copy_snapshot_names(
        self,
        config: ImageConfig,
        region_rule: RegionRule,
        result: ValidationResult,
    ) -> None:
        for region, snapshot_names in config.copy_snapshot_names.items():
            field_path = f"image_copy_snapshot_names.{region}"
            issue = region_rule.validate_region(region, field=field_path)
            if issue:
                result.errors.append(issue)

            for index, snapshot_name in enumerate(snapshot_names):
                if not snapshot_name:
                    continue
                # Label text matches the top-level snapshot list on purpose;
                # the issue's field carries the per-region path.
                issues = self.snapshot_name_rule.check(
                    snapshot_name, f"image_snapshot_names[{index}]"
                )
                for per_region_issue in issues:
                    per_region_issue.field = f"{field_path}[{index}]"
                result.extend(issues)


def validate_image_config(
    config: ImageConfig, catalog: RegionCatalog | None = None
) -> ValidationResult:
    """Validate ``config`` with a one-off validator."""
    return ImageConfigValidator(catalog).validate(config)
