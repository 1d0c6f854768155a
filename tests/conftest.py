"""Shared fixtures."""

import logging

import pytest

from ecs_image_config.config import ImageConfig


class FakeRegionCatalog:
    """Region catalog that records every lookup."""

    def __init__(self, regions=("cn-hangzhou", "us-west-1", "eu-central-1")):
        self.regions = set(regions)
        self.lookups: list[str] = []

    def is_known_region(self, region: str) -> bool:
        self.lookups.append(region)
        return region in self.regions


@pytest.fixture
def fake_catalog() -> FakeRegionCatalog:
    return FakeRegionCatalog()


@pytest.fixture
def make_config():
    def _make(**overrides) -> ImageConfig:
        values = {"name": "packer-image"}
        values.update(overrides)
        return ImageConfig(**values)

    return _make


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    package_logger = logging.getLogger("ecs_image_config")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
