"""Length checks run before an advertisement is rendered.

A limit is an exclusive upper bound: a 55 character title fails a limit of
55.
"""

from __future__ import annotations

from .constraints import AdvertisementConstraints
from .models import FALLBACK_ADVERTISEMENT, Advertisement, PageAdvertisement, TopBannerAdvertisement
from .registry import AdvertisementRegistry


class ConstraintViolation(Exception):
    """An advertisement is too long for its placement."""

    def __init__(self, *, advertisement_id: str, field: str, limit: int, actual: int):
        self.advertisement_id = advertisement_id
        self.field = field
        self.limit = limit
        self.actual = actual
        super().__init__(
            f"Advertisement {advertisement_id!r}: {field} is {actual} characters; "
            f"it must be shorter than {limit}."
        )


def _check_length(advertisement: Advertisement, field: str, value: str, limit: int) -> None:
    if len(value) >= limit:
        raise ConstraintViolation(
            advertisement_id=advertisement.id,
            field=field,
            limit=limit,
            actual=len(value),
        )


def validate_advertisement(advertisement: Advertisement, constraints: AdvertisementConstraints) -> None:
    """Raise ConstraintViolation if the advertisement does not fit its placement.

    Title is checked before content, so a page advertisement that breaks
    both limits reports the title.
    """
    match advertisement:
        case TopBannerAdvertisement(content=content):
            _check_length(advertisement, "content", content, constraints.top_banner.max_length)
        case PageAdvertisement(title=title, content=content, placement_type=placement_type):
            profile = constraints.for_placement(placement_type)
            _check_length(advertisement, "title", title, profile.max_title_length)
            _check_length(advertisement, "content", content, profile.max_content_length)
        case _:
            raise TypeError(f"Cannot validate {advertisement!r}.")


def validate_registry(
    registry: AdvertisementRegistry,
    constraints: AdvertisementConstraints,
) -> list[ConstraintViolation]:
    """Check every configured advertisement plus the fallback placeholder.

    Returns all violations instead of stopping at the first, for reporting.
    """
    violations = []
    advertisements = [ad for _, ad in registry.configured()]
    advertisements.append(FALLBACK_ADVERTISEMENT)
    for advertisement in advertisements:
        try:
            validate_advertisement(advertisement, constraints)
        except ConstraintViolation as e:
            violations.append(e)
    return violations
