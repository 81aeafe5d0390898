"""Template tags for advertisement placements.

Both inclusion tags validate before rendering. A violation is not caught:
the page fails to render rather than showing a truncated advertisement.
"""

from __future__ import annotations

import logging

from django import template

from advertise.badges import resolve_badge
from advertise.conf import get_constraints
from advertise.validation import ConstraintViolation, validate_advertisement

logger = logging.getLogger(__name__)

register = template.Library()


def _validated(advertisement):
    try:
        validate_advertisement(advertisement, get_constraints())
    except ConstraintViolation:
        logger.error("Refusing to render advertisement %r.", advertisement.id)
        raise
    return advertisement


@register.inclusion_tag("advertise/top_banner.html")
def top_banner(advertisement):
    """Render the site-wide banner. Renders nothing when no banner is configured."""
    if advertisement is None:
        return {"ad": None}
    return {"ad": _validated(advertisement)}


@register.inclusion_tag("advertise/page_advertisement.html")
def page_advertisement(advertisement):
    if advertisement is None:
        return {"ad": None}
    return {"ad": _validated(advertisement)}


@register.filter
def advertisement_badge(advertisement_id):
    """Badge text for an advertisement id, or an empty string when none is shown."""
    return resolve_badge(str(advertisement_id)) or ""
