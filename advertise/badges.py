"""Provenance badges derived from advertisement ids.

An id is ``<source>-<slug>``, so the source never needs a lookup table.
"""

from __future__ import annotations

from typing import Optional

from .models import AdvertisementSource

ID_SEPARATOR = "-"


def advertisement_source(advertisement_id: str) -> Optional[AdvertisementSource]:
    """Return the source tag encoded in the id, or None if it is not one we know."""
    prefix = advertisement_id.partition(ID_SEPARATOR)[0]
    if prefix in AdvertisementSource.values:
        return AdvertisementSource(prefix)
    return None


def resolve_badge(advertisement_id: str) -> Optional[str]:
    """Badge text for an advertisement, e.g. ``"AFFILIATE"``.

    First-party placements and ids without a recognised source get no badge.
    Never raises.
    """
    source = advertisement_source(advertisement_id)
    if source is None or source == AdvertisementSource.INTERNAL:
        return None
    return source.value.upper()
