from __future__ import annotations

from django.conf import settings


def site(request):
	"""Expose site-wide settings (name, analytics domain) to templates."""
	return {
		"site_name": settings.SITE_NAME,
		"plausible_domain": settings.PLAUSIBLE_DOMAIN,
	}
