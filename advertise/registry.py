"""Slot -> advertisement mapping for the current deploy."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from django.core.exceptions import ImproperlyConfigured

from .badges import advertisement_source
from .models import (
    Advertisement,
    CallToAction,
    ContentOverviewKey,
    ContentOverviewPageSlot,
    HomePageSlot,
    PageAdvertisement,
    PlacementSlot,
    PlacementType,
    QuestionsPageSlot,
    TopBannerAdvertisement,
    TopBannerSlot,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdvertisementRegistry:
    """Read-only catalog of the advertisements configured per slot.

    Built once at startup (see AdvertiseConfig.ready) and never mutated.
    Absent slots mean "show the fallback placeholder" or nothing, depending
    on the page; they are never an error.
    """

    top_banner: Optional[TopBannerAdvertisement] = None
    home_page: Optional[PageAdvertisement] = None
    questions_page: Optional[PageAdvertisement] = None
    content_overview_pages: Mapping[str, PageAdvertisement] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "content_overview_pages", MappingProxyType(dict(self.content_overview_pages))
        )

    def get(self, slot: PlacementSlot) -> Optional[Advertisement]:
        match slot:
            case TopBannerSlot():
                return self.top_banner
            case HomePageSlot():
                return self.home_page
            case QuestionsPageSlot():
                return self.questions_page
            case ContentOverviewPageSlot(key=key):
                return self.get_content_overview(key)
        raise TypeError(f"Unknown placement slot {slot!r}.")

    def get_content_overview(self, key: str) -> Optional[PageAdvertisement]:
        return self.content_overview_pages.get(key)

    def configured(self) -> Iterator[tuple[PlacementSlot, Advertisement]]:
        """Yield every slot that has an advertisement, in a stable order."""
        if self.top_banner is not None:
            yield TopBannerSlot(), self.top_banner
        if self.home_page is not None:
            yield HomePageSlot(), self.home_page
        if self.questions_page is not None:
            yield QuestionsPageSlot(), self.questions_page
        for key in sorted(self.content_overview_pages):
            yield ContentOverviewPageSlot(key=key), self.content_overview_pages[key]

    @classmethod
    def from_dict(cls, data: Mapping) -> "AdvertisementRegistry":
        """Build from the catalog's ADVERTISEMENTS table.

        Shape errors raise ImproperlyConfigured. Length limits are not
        checked here; see advertise.validation.
        """
        top_banner = None
        if data.get("TOP_BANNER"):
            top_banner = _top_banner_from_dict(data["TOP_BANNER"])

        home_page = None
        if data.get("HOME_PAGE"):
            home_page = _page_from_dict(data["HOME_PAGE"], "HOME_PAGE", PlacementType.HOME_PAGE)

        questions_page = None
        if data.get("QUESTIONS_PAGE"):
            questions_page = _page_from_dict(
                data["QUESTIONS_PAGE"], "QUESTIONS_PAGE", PlacementType.CONTENT_OVERVIEW_PAGE
            )

        overview_pages = {}
        for key, entry in (data.get("CONTENT_OVERVIEW_PAGES") or {}).items():
            if key not in ContentOverviewKey.values:
                raise ImproperlyConfigured(f"ADVERTISEMENTS['CONTENT_OVERVIEW_PAGES'] has unknown key {key!r}.")
            overview_pages[key] = _page_from_dict(
                entry, f"CONTENT_OVERVIEW_PAGES[{key!r}]", PlacementType.CONTENT_OVERVIEW_PAGE
            )

        registry = cls(
            top_banner=top_banner,
            home_page=home_page,
            questions_page=questions_page,
            content_overview_pages=overview_pages,
        )
        for slot, ad in registry.configured():
            if advertisement_source(ad.id) is None:
                logger.warning("Advertisement %r in %r has no known source prefix; no badge will be shown.", ad.id, slot)
        return registry


def _required(entry: Mapping, key: str, where: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str) or not value:
        raise ImproperlyConfigured(f"ADVERTISEMENTS[{where}] needs a non-empty {key!r}.")
    return value


def _cta_from_dict(entry: Mapping, where: str) -> CallToAction:
    cta = entry.get("cta")
    if not isinstance(cta, Mapping):
        raise ImproperlyConfigured(f"ADVERTISEMENTS[{where}] needs a 'cta' with 'url' and 'text'.")
    return CallToAction(url=_required(cta, "url", where), text=_required(cta, "text", where))


def _top_banner_from_dict(entry: Mapping) -> TopBannerAdvertisement:
    where = "TOP_BANNER"
    return TopBannerAdvertisement(
        id=_required(entry, "id", where),
        content=_required(entry, "content", where),
        cta=_cta_from_dict(entry, where),
    )


def _page_from_dict(entry: Mapping, where: str, expected_type: PlacementType) -> PageAdvertisement:
    """Parse a page advertisement; its type must match the slot it is configured in."""
    raw_type = entry.get("type")
    if raw_type != expected_type:
        raise ImproperlyConfigured(
            f"ADVERTISEMENTS[{where}] has type {raw_type!r}; this slot expects {expected_type.value!r}."
        )
    return PageAdvertisement(
        id=_required(entry, "id", where),
        title=_required(entry, "title", where),
        content=_required(entry, "content", where),
        cta=_cta_from_dict(entry, where),
        placement_type=PlacementType(raw_type),
    )
