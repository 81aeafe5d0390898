"""Advertisement models.

These are plain value objects, not database tables. The whole catalog is
static configuration that ships with the deploy, so nothing here is ever
written at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from django.db import models


class AdvertisementSource(models.TextChoices):
    """Provenance tag, used as the prefix of every advertisement id."""

    INTERNAL = "fh", "Frontend Hire"
    AFFILIATE = "affiliate", "Affiliate"
    SPONSORED = "advertisement", "Sponsored"


class PlacementType(models.TextChoices):
    TOP_BANNER = "TOP_BANNER", "Top banner"
    HOME_PAGE = "HOME_PAGE", "Home page"
    CONTENT_OVERVIEW_PAGE = "CONTENT_OVERVIEW_PAGE", "Content overview page"


class ContentOverviewKey(models.TextChoices):
    TODO_APP_REACT = "frontend-courses-todo-app-react-overview", "Todo App (React)"
    TODO_APP_SVELTE = "frontend-courses-todo-app-svelte-overview", "Todo App (Svelte)"
    STACKPACK = "frontend-courses-stackpack-overview", "StackPack"
    LOGIN_REGISTER_FLOW = "frontend-courses-login-register-flow-overview", "Login/Register Flow"
    DYNAMIC_PRICING_PAGE = "frontend-courses-dynamic-pricing-page-overview", "Dynamic Pricing Page"
    SYSTEM_DESIGN_DYNAMIC_PRICING_PAGE = (
        "frontend-system-design-dynamic-pricing-page-overview",
        "System Design: Dynamic Pricing Page",
    )
    REFACTORING_PROFILE_PAGE = "frontend-refactoring-profile-page-overview", "Refactoring: Profile Page"
    REFACTORING_FEATURE_FLAGS = "frontend-refactoring-feature-flags-overview", "Refactoring: Feature Flags"


PAGE_PLACEMENT_TYPES = (PlacementType.HOME_PAGE, PlacementType.CONTENT_OVERVIEW_PAGE)


@dataclass(frozen=True)
class CallToAction:
    url: str
    text: str


@dataclass(frozen=True)
class TopBannerAdvertisement:
    """Single line shown above every page. No title."""

    id: str
    content: str
    cta: CallToAction


@dataclass(frozen=True)
class PageAdvertisement:
    """Callout with a title, shown on the home page or a content page."""

    id: str
    title: str
    content: str
    cta: CallToAction
    placement_type: PlacementType

    def __post_init__(self):
        if self.placement_type not in PAGE_PLACEMENT_TYPES:
            raise ValueError(
                f"PageAdvertisement {self.id!r} cannot use placement type {self.placement_type!r}."
            )


Advertisement = Union[TopBannerAdvertisement, PageAdvertisement]


@dataclass(frozen=True)
class TopBannerSlot:
    pass


@dataclass(frozen=True)
class HomePageSlot:
    pass


@dataclass(frozen=True)
class ContentOverviewPageSlot:
    # Any string is accepted; unknown keys simply have no advertisement.
    key: str


@dataclass(frozen=True)
class QuestionsPageSlot:
    pass


PlacementSlot = Union[TopBannerSlot, HomePageSlot, ContentOverviewPageSlot, QuestionsPageSlot]


FALLBACK_ADVERTISEMENT = PageAdvertisement(
    id="advertise-here",
    title="Promote Your Product or Service",
    content="Get in front of thousands of developers and tech enthusiasts by advertising with us.",
    cta=CallToAction(url="/advertise-with-us/", text="Advertise with Us"),
    placement_type=PlacementType.CONTENT_OVERVIEW_PAGE,
)
