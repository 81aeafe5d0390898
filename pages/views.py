"""Public pages: home, learn content, advertising info and analytics."""

from __future__ import annotations

import logging
import re

from django.conf import settings
from django.http import Http404, HttpResponse
from django.shortcuts import render
from django.template import TemplateDoesNotExist
from django.template.loader import select_template
from django.views.decorators.http import require_GET

from advertise.conf import get_constraints, get_registry
from advertise.placement import home_page_placement, select_placements

logger = logging.getLogger(__name__)

_SLUG_SEGMENT_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")


def _split_slug(slug: str) -> list[str]:
	"""Split a learn URL path into slug segments.

	Raises Http404 for anything that is not a plain lowercase slug, so the
	path can be used to pick a template.
	"""
	segments = [s for s in (slug or "").split("/") if s]
	for segment in segments:
		if not _SLUG_SEGMENT_RE.match(segment):
			raise Http404("Page not found.")
	return segments


def _learn_template_names(slugs: list[str]) -> list[str]:
	if not slugs:
		return ["learn/index.html"]
	base = "/".join(slugs)
	return [f"learn/{base}.html", f"learn/{base}/index.html"]


@require_GET
def home(request):
	return render(
		request,
		"pages/home.html",
		{"home_advertisement": home_page_placement(get_registry())},
	)


@require_GET
def learn(request, slug: str = ""):
	slugs = _split_slug(slug)
	try:
		content_template = select_template(_learn_template_names(slugs))
	except TemplateDoesNotExist:
		logger.debug("No learn content for %r.", slugs)
		raise Http404("Page not found.")

	placements = select_placements(get_registry(), slugs)
	context = {
		"slugs": slugs,
		"questions_advertisement": placements.questions,
		"overview_advertisement": placements.content_overview,
	}
	return HttpResponse(content_template.render(context, request))


@require_GET
def advertise_with_us(request):
	constraints = get_constraints()
	return render(
		request,
		"pages/advertise_with_us.html",
		{
			"top_banner_profile": constraints.top_banner,
			"home_page_profile": constraints.home_page,
			"content_overview_profile": constraints.content_overview_page,
			"contact_url": settings.ADVERTISE_CONTACT_URL,
		},
	)


@require_GET
def analytics(request):
	return render(
		request,
		"pages/analytics.html",
		{
			"plausible_share_url": settings.PLAUSIBLE_SHARE_URL,
			"plausible_public_url": f"https://plausible.io/{settings.PLAUSIBLE_DOMAIN}/" if settings.PLAUSIBLE_DOMAIN else "",
		},
	)
