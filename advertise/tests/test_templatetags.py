import logging

import pytest
from django.template import Context, Template

from advertise.models import FALLBACK_ADVERTISEMENT
from advertise.validation import ConstraintViolation

from .factories import banner_ad, overview_ad, page_ad


def render(source, **context):
    return Template("{% load advertise_tags %}" + source).render(Context(context))


def test_page_advertisement_renders_title_cta_and_badge():
    html = render("{% page_advertisement ad %}", ad=page_ad(id="affiliate-course", title="Great course"))

    assert "Great course" in html
    assert 'href="https://example.com/"' in html
    assert 'id="affiliate-course"' in html
    assert "AFFILIATE" in html


def test_internal_advertisement_has_no_badge():
    html = render("{% page_advertisement ad %}", ad=overview_ad(id="fh-stackpack"))
    assert "ad-badge" not in html


def test_fallback_renders_without_badge():
    html = render("{% page_advertisement ad %}", ad=FALLBACK_ADVERTISEMENT)

    assert "Promote Your Product or Service" in html
    assert "/advertise-with-us/" in html
    assert "ad-badge" not in html


def test_missing_advertisement_renders_nothing():
    assert render("{% page_advertisement ad %}", ad=None).strip() == ""
    assert render("{% top_banner ad %}", ad=None).strip() == ""


def test_top_banner_renders_content():
    html = render("{% top_banner ad %}", ad=banner_ad(content="Feature Flags is live!"))

    assert "Feature Flags is live!" in html
    assert 'id="fh-banner"' in html


def test_too_long_advertisement_fails_the_render(caplog):
    ad = page_ad(id="affiliate-long", title="t" * 55)

    with caplog.at_level(logging.ERROR, logger="advertise.templatetags.advertise_tags"):
        with pytest.raises(ConstraintViolation) as exc_info:
            render("{% page_advertisement ad %}", ad=ad)

    assert exc_info.value.field == "title"
    assert "affiliate-long" in caplog.text


def test_too_long_banner_fails_the_render():
    with pytest.raises(ConstraintViolation):
        render("{% top_banner ad %}", ad=banner_ad(content="x" * 55))


@pytest.mark.parametrize(
    "advertisement_id, expected",
    [("affiliate-x", "AFFILIATE"), ("fh-x", ""), ("unknown-x", "")],
)
def test_advertisement_badge_filter(advertisement_id, expected):
    assert render("{{ id|advertisement_badge }}", id=advertisement_id) == expected


def test_top_banner_badge_comes_from_the_filter():
    html = render("{% top_banner ad %}", ad=banner_ad(id="advertisement-acme"))
    assert '<span class="ad-badge">ADVERTISEMENT</span>' in html

    assert "ad-badge" not in render("{% top_banner ad %}", ad=banner_ad(id="fh-banner"))
