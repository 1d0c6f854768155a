# ecs_image_config/core/validation/regions.py

"""
Region catalog used by the region membership rule.

The validator never consults a global table directly; it is handed an object
implementing :class:`RegionCatalog`, which keeps tests free to substitute a
fake catalog.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

# Alibaba Cloud regions accepted as image copy destinations.
ALICLOUD_REGIONS: tuple[str, ...] = (
    "cn-hangzhou",
    "cn-qingdao",
    "cn-beijing",
    "cn-shenzhen",
    "cn-hongkong",
    "cn-shanghai",
    "cn-zhangjiakou",
    "cn-huhehaote",
    "us-west-1",
    "us-east-1",
    "ap-northeast-1",
    "ap-southeast-1",
    "ap-southeast-2",
    "ap-southeast-3",
    "ap-southeast-5",
    "ap-south-1",
    "me-east-1",
    "eu-central-1",
    "eu-west-1",
    "cn-shenzhen-finance-1",
    "cn-shanghai-finance-1",
    "cn-north-2-gov-1",
)


@runtime_checkable
class RegionCatalog(Protocol):
    """Protocol for anything that can answer region membership questions."""

    def is_known_region(self, region: str) -> bool:
        """Return True when ``region`` is a valid deployment region."""
        ...


class StaticRegionCatalog:
    """Immutable catalog backed by a fixed set of region identifiers."""

    def __init__(self, regions: Iterable[str] = ALICLOUD_REGIONS) -> None:
        # Keep declaration order for listing, the frozenset for lookups.
        self._ordered = tuple(dict.fromkeys(regions))
        self._regions = frozenset(self._ordered)

    def is_known_region(self, region: str) -> bool:
        """Exact, case-sensitive membership test."""
        return region in self._regions

    def with_regions(self, extra: Iterable[str]) -> "StaticRegionCatalog":
        """Return a new catalog extended with ``extra`` regions."""
        return StaticRegionCatalog((*self._ordered, *extra))

    @property
    def regions(self) -> tuple[str, ...]:
        return self._ordered

    def __contains__(self, region: object) -> bool:
        return region in self._regions

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __repr__(self) -> str:
        return f"StaticRegionCatalog({len(self._ordered)} regions)"


DEFAULT_CATALOG = StaticRegionCatalog()
