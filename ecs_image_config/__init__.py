"""Validation for cloud machine image build and distribution settings."""

from .config import ImageConfig, ImageConfigLoader, ValidatorSettings
from .core.validation import (
    ImageConfigValidator,
    ValidationErrorKind,
    ValidationResult,
    validate_image_config,
)

__version__ = "0.1.0"

__all__ = [
    "ImageConfig",
    "ImageConfigLoader",
    "ValidatorSettings",
    "ImageConfigValidator",
    "ValidationErrorKind",
    "ValidationResult",
    "validate_image_config",
]
