# ecs_image_config/config/errors.py

"""
Error hierarchy for loading and validating image configuration.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..core.validation.result import ValidationIssue


class ImageConfigError(Exception):
    """Base image configuration error."""

    def __init__(
        self,
        message: str,
        config_file: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.config_file = config_file
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        base_msg = self.message
        if self.config_file:
            base_msg = f"{base_msg} (file: {self.config_file})"
        if self.original_error:
            base_msg = f"{base_msg} - Original error: {self.original_error}"
        return base_msg


class ConfigFileError(ImageConfigError):
    """Configuration file could not be read or parsed."""

    pass


class ConfigSchemaError(ImageConfigError):
    """Configuration values have the wrong shape or type."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]],
        config_file: str | None = None,
        original_error: Exception | None = None,
    ):
        self.errors = errors
        super().__init__(message, config_file, original_error)

    def format_errors(self) -> str:
        """Format schema errors for display."""
        formatted = [
            f"Configuration schema check failed in {self.config_file or 'unknown file'}:"
        ]

        for i, error in enumerate(self.errors, 1):
            field = ".".join(str(loc) for loc in error["loc"])
            formatted.append(f"  {i}. {field}: {error['msg']}")

            if "input" in error:
                input_value = error["input"]
                if isinstance(input_value, str) and len(input_value) > 50:
                    input_value = input_value[:47] + "..."
                formatted.append(f"     Input: {input_value}")

        return "\n".join(formatted)


class ImageConfigValidationError(ImageConfigError):
    """Raised by callers that treat any validation issue as fatal."""

    def __init__(
        self,
        message: str,
        errors: "list[ValidationIssue]",
        config_file: str | None = None,
    ):
        self.errors = errors
        super().__init__(message, config_file)

    def format_errors(self) -> str:
        """Format validation issues for display."""
        formatted = [
            f"Image configuration validation failed in {self.config_file or 'unknown file'}:"
        ]
        for i, error in enumerate(self.errors, 1):
            formatted.append(f"  {i}. {error.message}")
        return "\n".join(formatted)

    def get_summary(self) -> str:
        """Get a summary of validation errors."""
        error_count = len(self.errors)
        if error_count == 1:
            return "1 validation error found"
        else:
            return f"{error_count} validation errors found"
