# ecs_image_config/config/cli_tools.py

"""
Command line interface for checking image configuration files.
"""

import json

import click
from pydantic import ValidationError as PydanticValidationError

from ..core.logging import configure_logging
from ..core.validation import ImageConfigValidator
from .base import ValidatorSettings
from .errors import ConfigFileError, ConfigSchemaError
from .loader import ImageConfigLoader


def _load_settings() -> ValidatorSettings:
    try:
        return ValidatorSettings()
    except PydanticValidationError as e:
        raise click.ClickException(f"Invalid ECS_IMAGE_* settings: {e}") from e


@click.group()
def image_config_cli() -> None:
    """ECS image configuration tools."""
    pass


@image_config_cli.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--skip-region-validation",
    is_flag=True,
    default=False,
    help="Accept any region identifier",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Report format",
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Override ECS_IMAGE_LOG_LEVEL",
)
@click.pass_context
def validate(
    ctx: click.Context,
    config_file: str,
    skip_region_validation: bool,
    output_format: str,
    log_level: str | None,
) -> None:
    """Validate an image configuration file and report every problem."""
    settings = _load_settings()
    if skip_region_validation:
        settings.skip_region_validation = True
    configure_logging(
        (log_level or settings.log_level).upper(), settings.log_format.value
    )

    loader = ImageConfigLoader(settings)
    try:
        config = loader.load_file(config_file)
    except ConfigSchemaError as e:
        click.echo(e.format_errors(), err=True)
        raise click.Abort() from e
    except ConfigFileError as e:
        click.echo(f"❌ Configuration file error: {e}", err=True)
        raise click.Abort() from e

    result = ImageConfigValidator(settings.build_catalog()).validate(config)

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2, default=str))
    elif result.is_valid:
        click.echo("✅ Image configuration is valid")
        click.echo(f"   Image name: {config.name}")
        click.echo(f"   Copy regions: {', '.join(result.config.copy_regions) or '-'}")
    else:
        click.echo(f"❌ {len(result.errors)} problem(s) found in {config_file}:")
        for i, error in enumerate(result.errors, 1):
            click.echo(f"  {i}. {error.message}")

    if not result.is_valid:
        ctx.exit(1)


@image_config_cli.command()
@click.option(
    "--extra",
    multiple=True,
    help="Additional region to accept (repeatable)",
)
def regions(extra: tuple[str, ...]) -> None:
    """List the region identifiers accepted as copy destinations."""
    catalog = _load_settings().build_catalog()
    if extra:
        catalog = catalog.with_regions(extra)
    for region in catalog:
        click.echo(region)


if __name__ == "__main__":
    image_config_cli()
