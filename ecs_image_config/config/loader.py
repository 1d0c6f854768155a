# ecs_image_config/config/loader.py

"""
Loads image configuration from YAML (or JSON) files and plain mappings.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError
import yaml

from .base import ValidatorSettings
from .errors import ConfigFileError, ConfigSchemaError
from .image_config import ImageConfig

logger = logging.getLogger(__name__)


class ImageConfigLoader:
    """Builds ImageConfig instances from files or mappings.

    A file may hold the image keys at its top level or nested under an
    ``image`` key. JSON files are read through the YAML parser.
    """

    SECTION_KEY = "image"

    def __init__(self, settings: ValidatorSettings | None = None) -> None:
        self.settings = settings or ValidatorSettings()

    def load_file(self, path: str | Path) -> ImageConfig:
        """
        Load an image configuration file.

        Args:
            path: YAML or JSON file to read

        Returns:
            Parsed configuration, not yet validated
        """
        config_path = Path(path)
        logger.info(f"Loading image configuration from {config_path}")
        data = self._read_mapping(config_path)
        return self.load_dict(data, config_file=str(config_path))

    def load_dict(
        self, data: dict[str, Any], config_file: str | None = None
    ) -> ImageConfig:
        """Build an ImageConfig from an already parsed mapping."""
        section = data.get(self.SECTION_KEY, data)
        if not isinstance(section, dict):
            raise ConfigFileError(
                f"'{self.SECTION_KEY}' section must be a mapping (dict), "
                f"got {type(section).__name__}",
                config_file,
            )

        try:
            config = ImageConfig.model_validate(section)
        except PydanticValidationError as e:
            raise ConfigSchemaError(
                f"Invalid image configuration: {e.error_count()} error(s)",
                errors=e.errors(),
                config_file=config_file,
                original_error=e,
            ) from e

        if self.settings.skip_region_validation and not config.skip_region_validation:
            logger.debug("Region validation disabled by settings")
            config.skip_region_validation = True

        return config

    def _read_mapping(self, config_path: Path) -> dict[str, Any]:
        """Read a YAML file and check its top level is a mapping."""
        if not config_path.exists():
            raise ConfigFileError("Configuration file not found", str(config_path))

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigFileError(
                f"Invalid YAML configuration: {e}", str(config_path), e
            ) from e
        except UnicodeDecodeError as e:
            raise ConfigFileError(
                f"Configuration file is not valid UTF-8: {e}", str(config_path), e
            ) from e
        except OSError as e:
            raise ConfigFileError(
                f"Failed to read configuration file: {e}", str(config_path), e
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigFileError(
                f"Top-level YAML structure must be a mapping (dict), "
                f"got {type(data).__name__}",
                str(config_path),
            )
        return data
