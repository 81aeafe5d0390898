"""Which advertisements a page shows.

- Top banner: every page.
- Home page: the home page slot, or the fallback placeholder.
- Content overview pages (slug path ending in ``overview``): the slot keyed
  by the joined slug path, or the fallback placeholder.
- Question pages (slug path containing ``questions``): the partner
  questions advertisement, above and below the content.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .models import (
    FALLBACK_ADVERTISEMENT,
    ContentOverviewPageSlot,
    HomePageSlot,
    PageAdvertisement,
    QuestionsPageSlot,
    TopBannerAdvertisement,
    TopBannerSlot,
)
from .registry import AdvertisementRegistry

OVERVIEW_SEGMENT = "overview"
QUESTIONS_SEGMENT = "questions"
KEY_SEPARATOR = "-"


@dataclass(frozen=True)
class PagePlacements:
    """Advertisements for a single learn page. None means the slot is not shown."""

    top_banner: Optional[TopBannerAdvertisement] = None
    questions: Optional[PageAdvertisement] = None
    content_overview: Optional[PageAdvertisement] = None


def is_content_overview_page(slugs: Sequence[str]) -> bool:
    return bool(slugs) and slugs[-1] == OVERVIEW_SEGMENT


def is_questions_page(slugs: Sequence[str]) -> bool:
    return QUESTIONS_SEGMENT in slugs


def content_overview_key(slugs: Sequence[str]) -> str:
    """Registry key for a slug path, e.g. frontend/courses/x/overview -> frontend-courses-x-overview.

    The result is not checked against ContentOverviewKey; lookups for keys
    nobody configured just come back empty.
    """
    return KEY_SEPARATOR.join(slugs)


def top_banner_placement(registry: AdvertisementRegistry) -> Optional[TopBannerAdvertisement]:
    return registry.get(TopBannerSlot())


def home_page_placement(registry: AdvertisementRegistry) -> PageAdvertisement:
    return registry.get(HomePageSlot()) or FALLBACK_ADVERTISEMENT


def content_overview_placement(
    registry: AdvertisementRegistry,
    slugs: Sequence[str],
) -> Optional[PageAdvertisement]:
    if not is_content_overview_page(slugs):
        return None
    slot = ContentOverviewPageSlot(key=content_overview_key(slugs))
    return registry.get(slot) or FALLBACK_ADVERTISEMENT


def questions_placement(registry: AdvertisementRegistry, slugs: Sequence[str]) -> Optional[PageAdvertisement]:
    if not is_questions_page(slugs):
        return None
    return registry.get(QuestionsPageSlot())


def select_placements(registry: AdvertisementRegistry, slugs: Sequence[str]) -> PagePlacements:
    return PagePlacements(
        top_banner=top_banner_placement(registry),
        questions=questions_placement(registry, slugs),
        content_overview=content_overview_placement(registry, slugs),
    )
