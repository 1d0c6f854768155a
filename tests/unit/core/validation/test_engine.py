"""Unit tests for ImageConfigValidator — rule orchestration and aggregation."""

import logging

import pytest

from ecs_image_config.core.validation import (
    ImageConfigValidator,
    StaticRegionCatalog,
    ValidationErrorKind,
    validate_image_config,
)

K = ValidationErrorKind


def _kinds(result):
    return [error.kind for error in result.errors]


@pytest.fixture
def validator(fake_catalog) -> ImageConfigValidator:
    return ImageConfigValidator(fake_catalog)


class TestImageName:
    def test_valid_config_has_no_errors(self, validator, make_config):
        result = validator.validate(make_config(copy_regions=["cn-hangzhou"]))
        assert result.is_valid
        assert result.errors == []
        assert result.config.copy_regions == ["cn-hangzhou"]

    def test_missing_name(self, validator, make_config):
        result = validator.validate(make_config(name=""))
        assert _kinds(result) == [K.MISSING_REQUIRED_FIELD]
        assert result.messages() == ["image_name must be specified"]

    def test_name_with_space_yields_single_whitespace_error(
        self, validator, make_config
    ):
        result = validator.validate(make_config(name="my valid-ish name"))
        assert _kinds(result) == [K.NAME_WHITESPACE_VIOLATION]

    def test_name_errors_use_image_name_label(self, validator, make_config):
        result = validator.validate(make_config(name="x"))
        assert result.messages() == [
            "image_name must less than 128 letters and more than 1 letters"
        ]


class TestCopyAndSnapshotNames:
    def test_copy_names_checked_by_position(self, validator, make_config):
        result = validator.validate(
            make_config(copy_names=["", "ok-name", "http://bad"])
        )
        assert result.messages() == [
            "image_copy_names[2] can't start with 'http://' or 'https://'"
        ]

    def test_snapshot_names_skip_empty_entries(self, validator, make_config):
        result = validator.validate(
            make_config(snapshot_names=["", "autosnap", "fine-snap"])
        )
        assert result.messages() == ["image_snapshot_names[1] can't start with 'auto'"]
        assert result.errors[0].field == "image_snapshot_names[1]"

    def test_empty_entries_never_reported(self, validator, make_config):
        result = validator.validate(
            make_config(
                copy_names=["", ""],
                snapshot_names=[""],
                copy_snapshot_names={"cn-hangzhou": ["", ""]},
            )
        )
        assert result.is_valid


class TestCopyRegions:
    def test_duplicates_removed_preserving_order(self, validator, make_config):
        config = make_config(
            copy_regions=["cn-hangzhou", "cn-hangzhou", "us-west-1"]
        )
        result = validator.validate(config)
        assert result.is_valid
        assert result.config.copy_regions == ["cn-hangzhou", "us-west-1"]

    def test_input_config_not_mutated(self, validator, make_config):
        config = make_config(copy_regions=["cn-hangzhou", "cn-hangzhou", "bad"])
        validator.validate(config)
        assert config.copy_regions == ["cn-hangzhou", "cn-hangzhou", "bad"]

    def test_unknown_region_reported_once_and_dropped(
        self, validator, make_config
    ):
        result = validator.validate(
            make_config(copy_regions=["not-a-real-region", "us-west-1"])
        )
        assert _kinds(result) == [K.UNKNOWN_REGION]
        assert result.errors[0].field == "image_copy_regions[0]"
        assert result.config.copy_regions == ["us-west-1"]

    def test_bypass_keeps_unknown_region(self, validator, make_config):
        result = validator.validate(
            make_config(
                copy_regions=["not-a-real-region", "not-a-real-region"],
                skip_region_validation=True,
            )
        )
        assert result.is_valid
        assert result.config.copy_regions == ["not-a-real-region"]

    def test_duplicates_looked_up_once(self, fake_catalog, make_config):
        ImageConfigValidator(fake_catalog).validate(
            make_config(copy_regions=["cn-hangzhou"] * 3)
        )
        assert fake_catalog.lookups == ["cn-hangzhou"]

    def test_duplicate_logged_at_debug(self, validator, make_config, caplog):
        with caplog.at_level(logging.DEBUG, logger="ecs_image_config"):
            validator.validate(make_config(copy_regions=["us-west-1", "us-west-1"]))
        assert "Dropping duplicate copy region 'us-west-1'" in caplog.text


class TestCopySnapshotNames:
    def test_unknown_region_key_reported(self, validator, make_config):
        result = validator.validate(
            make_config(copy_snapshot_names={"mars-1": ["snap-a"]})
        )
        assert result.messages() == ["Not a valid alicloud region: mars-1"]
        assert result.errors[0].field == "image_copy_snapshot_names.mars-1"

    def test_names_checked_with_snapshot_rule(self, validator, make_config):
        result = validator.validate(
            make_config(copy_snapshot_names={"us-west-1": ["", "auto-x"]})
        )
        assert result.messages() == ["image_snapshot_names[1] can't start with 'auto'"]
        assert result.errors[0].field == "image_copy_snapshot_names.us-west-1[1]"

    def test_bypass_skips_region_key_check(self, validator, make_config):
        result = validator.validate(
            make_config(
                copy_snapshot_names={"mars-1": ["snap-a"]},
                skip_region_validation=True,
            )
        )
        assert result.is_valid

    def test_region_error_precedes_its_name_errors(self, validator, make_config):
        result = validator.validate(
            make_config(copy_snapshot_names={"mars-1": ["auto-x"]})
        )
        assert _kinds(result) == [K.UNKNOWN_REGION, K.SNAPSHOT_AUTO_PREFIX_VIOLATION]


class TestAggregation:
    def test_missing_name_and_duplicated_bad_region(self, validator, make_config):
        config = make_config(name="", copy_regions=["bad region", "bad region"])
        result = validator.validate(config)
        assert _kinds(result) == [K.MISSING_REQUIRED_FIELD, K.UNKNOWN_REGION]
        assert result.config.copy_regions == []

    def test_errors_follow_processing_order(self, validator, make_config):
        result = validator.validate(
            make_config(
                name="x",
                copy_names=["http://copy"],
                snapshot_names=["auto"],
                copy_regions=["bad-1"],
                copy_snapshot_names={"bad-2": []},
            )
        )
        assert _kinds(result) == [
            K.NAME_LENGTH_VIOLATION,
            K.NAME_URL_PREFIX_VIOLATION,
            K.SNAPSHOT_AUTO_PREFIX_VIOLATION,
            K.UNKNOWN_REGION,
            K.UNKNOWN_REGION,
        ]

    def test_revalidating_normalized_config_is_stable(self, validator, make_config):
        config = make_config(
            name="bad name",
            copy_regions=["us-west-1", "bad", "us-west-1", "cn-hangzhou"],
        )
        first = validator.validate(config)
        second = validator.validate(first.config)
        assert second.config.copy_regions == first.config.copy_regions
        assert second.messages() == ["bad name can't include spaces"]

    def test_prepare_twice_is_idempotent(self, fake_catalog, make_config):
        config = make_config(copy_regions=["us-west-1", "us-west-1"])
        first = config.prepare(fake_catalog)
        regions = list(config.copy_regions)
        second = config.prepare(fake_catalog)
        assert first == second == []
        assert config.copy_regions == regions == ["us-west-1"]

    def test_module_level_helper_uses_default_catalog(self, make_config):
        result = validate_image_config(
            make_config(copy_regions=["cn-beijing", "nowhere"])
        )
        assert result.config.copy_regions == ["cn-beijing"]
        assert _kinds(result) == [K.UNKNOWN_REGION]


class TestInjectedCatalog:
    def test_empty_catalog_rejects_every_region(self, make_config):
        validator = ImageConfigValidator(StaticRegionCatalog([]))
        result = validator.validate(
            make_config(
                copy_regions=["cn-hangzhou"],
                copy_snapshot_names={"us-west-1": ["snap-a"]},
            )
        )
        assert _kinds(result) == [K.UNKNOWN_REGION, K.UNKNOWN_REGION]
        assert result.config.copy_regions == []

    def test_empty_catalog_is_kept(self):
        catalog = StaticRegionCatalog([])
        assert ImageConfigValidator(catalog).catalog is catalog
