"""Per-placement length limits.

Price and duration are product metadata for the advertise-with-us page; only
the length limits are enforced.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

from django.core.exceptions import ImproperlyConfigured

from .models import PlacementType


@dataclass(frozen=True)
class BannerConstraintProfile:
    max_length: int
    price: str = ""
    duration: str = ""


@dataclass(frozen=True)
class PageConstraintProfile:
    max_title_length: int
    max_content_length: int
    price: str = ""
    duration: str = ""


ConstraintProfile = Union[BannerConstraintProfile, PageConstraintProfile]


@dataclass(frozen=True)
class AdvertisementConstraints:
    top_banner: BannerConstraintProfile
    home_page: PageConstraintProfile
    content_overview_page: PageConstraintProfile

    def for_placement(self, placement_type: PlacementType) -> ConstraintProfile:
        if placement_type == PlacementType.TOP_BANNER:
            return self.top_banner
        if placement_type == PlacementType.HOME_PAGE:
            return self.home_page
        if placement_type == PlacementType.CONTENT_OVERVIEW_PAGE:
            return self.content_overview_page
        raise ValueError(f"Unknown placement type {placement_type!r}.")

    @classmethod
    def from_dict(cls, data: Mapping) -> "AdvertisementConstraints":
        """Build from the catalog's ADVERTISEMENT_CONSTRAINTS table.

        Keys are placement type names; limits are positive integers.
        """
        try:
            banner = data[PlacementType.TOP_BANNER.value]
            home = data[PlacementType.HOME_PAGE.value]
            overview = data[PlacementType.CONTENT_OVERVIEW_PAGE.value]
        except KeyError as e:
            raise ImproperlyConfigured(f"ADVERTISEMENT_CONSTRAINTS is missing {e.args[0]!r}.") from e

        return cls(
            top_banner=BannerConstraintProfile(
                max_length=_limit(banner, "maxLength", PlacementType.TOP_BANNER),
                price=str(banner.get("price", "")),
                duration=str(banner.get("duration", "")),
            ),
            home_page=_page_profile(home, PlacementType.HOME_PAGE),
            content_overview_page=_page_profile(overview, PlacementType.CONTENT_OVERVIEW_PAGE),
        )


def _page_profile(entry: Mapping, placement_type: PlacementType) -> PageConstraintProfile:
    return PageConstraintProfile(
        max_title_length=_limit(entry, "maxTitleLength", placement_type),
        max_content_length=_limit(entry, "maxContentLength", placement_type),
        price=str(entry.get("price", "")),
        duration=str(entry.get("duration", "")),
    )


def _limit(entry: Mapping, key: str, placement_type: PlacementType) -> int:
    value = entry.get(key)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ImproperlyConfigured(
            f"ADVERTISEMENT_CONSTRAINTS[{placement_type.value!r}][{key!r}] must be a positive integer, got {value!r}."
        )
    return value
