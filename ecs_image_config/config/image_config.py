# ecs_image_config/config/image_config.py

"""
Image configuration model.

Field aliases are the keys used in template files (``image_name``,
``image_copy_regions``, ...); Python attribute names are used in code.
Disk mapping keys live at the same level as the image keys.
"""

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from ..core.validation.regions import RegionCatalog
    from ..core.validation.result import ValidationIssue


class DiskDevice(BaseModel):
    """A single disk mapping. Passed through to the builder unchecked."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", alias="disk_name")
    category: str = Field(default="", alias="disk_category")
    size: int = Field(default=0, alias="disk_size")
    snapshot_id: str = Field(default="", alias="disk_snapshot_id")
    description: str = Field(default="", alias="disk_description")
    delete_with_instance: bool = Field(
        default=False, alias="disk_delete_with_instance"
    )
    device: str = Field(default="", alias="disk_device")


class ImageConfig(BaseModel):
    """Describes how an image is named, shared and copied to other regions."""

    # Builder templates carry many non-image keys next to these.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(default="", alias="image_name", description="Image name")
    version: str = Field(default="", alias="image_version")
    description: str = Field(default="", alias="image_description")
    snapshot_names: list[str] = Field(
        default_factory=list, alias="image_snapshot_names"
    )
    share_accounts: list[str] = Field(
        default_factory=list, alias="image_share_account"
    )
    unshare_accounts: list[str] = Field(
        default_factory=list, alias="image_unshare_account"
    )
    copy_regions: list[str] = Field(
        default_factory=list,
        alias="image_copy_regions",
        description="Regions the image is copied to",
    )
    copy_names: list[str] = Field(default_factory=list, alias="image_copy_names")
    copy_snapshot_names: dict[str, list[str]] = Field(
        default_factory=dict,
        alias="image_copy_snapshot_names",
        description="Per-region snapshot names",
    )
    force_delete: bool = Field(default=False, alias="image_force_delete")
    force_delete_snapshots: bool = Field(
        default=False, alias="image_force_delete_snapshots"
    )
    force_delete_instances: bool = Field(
        default=False, alias="image_force_delete_instances"
    )
    ignore_data_disks: bool = Field(default=False, alias="image_ignore_data_disks")
    skip_region_validation: bool = Field(
        default=False, alias="skip_region_validation"
    )
    tags: dict[str, str] = Field(default_factory=dict, alias="tags")
    system_disk_mapping: DiskDevice = Field(
        default_factory=DiskDevice, alias="system_disk_mapping"
    )
    image_disk_mappings: list[DiskDevice] = Field(
        default_factory=list, alias="image_disk_mappings"
    )

    @field_validator("name", "version", "description", mode="before")
    @classmethod
    def empty_string_for_none(cls, v: Any) -> Any:
        """YAML keys left blank load as None."""
        return "" if v is None else v

    @field_validator(
        "snapshot_names",
        "share_accounts",
        "unshare_accounts",
        "copy_regions",
        "copy_names",
        mode="before",
    )
    @classmethod
    def blank_string_list(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return ["" if item is None else item for item in v]
        return v

    @field_validator("image_disk_mappings", mode="before")
    @classmethod
    def empty_list_for_none(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("copy_snapshot_names", "tags", mode="before")
    @classmethod
    def empty_dict_for_none(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("copy_snapshot_names", mode="before")
    @classmethod
    def blank_region_lists(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {
                region: ["" if name is None else name for name in names]
                if isinstance(names, list)
                else names or []
                for region, names in v.items()
            }
        return v

    def prepare(
        self, catalog: "RegionCatalog | None" = None
    ) -> "list[ValidationIssue]":
        """Validate in place and return every error found.

        Writes the normalized copy region list back onto this instance,
        whether or not errors were found.
        """
        from ..core.validation.engine import ImageConfigValidator

        result = ImageConfigValidator(catalog).validate(self)
        if result.config is not None:
            self.copy_regions = list(result.config.copy_regions)
        return result.errors

    def to_template(self) -> dict[str, Any]:
        """Dump using template keys."""
        return self.model_dump(by_alias=True)
