# ecs_image_config/config/__init__.py

"""
Image configuration model, settings and loading.

The CLI lives in :mod:`ecs_image_config.config.cli_tools` and is imported on
demand by its entry point.
"""

from .base import Environment, LogFormat, ValidatorSettings
from .errors import (
    ConfigFileError,
    ConfigSchemaError,
    ImageConfigError,
    ImageConfigValidationError,
)
from .image_config import DiskDevice, ImageConfig
from .loader import ImageConfigLoader

__all__ = [
    # Models
    "ImageConfig",
    "DiskDevice",
    # Settings
    "ValidatorSettings",
    "Environment",
    "LogFormat",
    # Error classes
    "ImageConfigError",
    "ConfigFileError",
    "ConfigSchemaError",
    "ImageConfigValidationError",
    # Loading
    "ImageConfigLoader",
]
