from __future__ import annotations

from .conf import get_registry
from .placement import top_banner_placement


def advertisements(request):
	"""Expose the site-wide top banner to templates."""
	return {"top_banner_advertisement": top_banner_placement(get_registry())}
