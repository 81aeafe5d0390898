import pytest

from advertise.models import FALLBACK_ADVERTISEMENT
from advertise.registry import AdvertisementRegistry
from advertise.validation import ConstraintViolation, validate_advertisement, validate_registry

from .factories import CONSTRAINTS, banner_ad, overview_ad, page_ad


def test_home_page_ad_within_limits_passes():
    validate_advertisement(page_ad(title="t" * 54, content="c" * 799), CONSTRAINTS)


def test_home_page_title_at_limit_fails():
    # Limits are exclusive: a title exactly as long as the limit is rejected.
    with pytest.raises(ConstraintViolation) as exc_info:
        validate_advertisement(page_ad(title="t" * 55), CONSTRAINTS)

    violation = exc_info.value
    assert violation.field == "title"
    assert violation.limit == 55
    assert violation.actual == 55
    assert violation.advertisement_id == "affiliate-example"
    assert "title" in str(violation) and "55" in str(violation)


def test_home_page_content_at_limit_fails():
    with pytest.raises(ConstraintViolation) as exc_info:
        validate_advertisement(page_ad(content="c" * 800), CONSTRAINTS)

    assert exc_info.value.field == "content"
    assert exc_info.value.limit == 800


def test_overview_page_uses_its_own_content_limit():
    # 400 chars fits the home page (800) but not an overview page (400).
    validate_advertisement(page_ad(content="c" * 400), CONSTRAINTS)
    with pytest.raises(ConstraintViolation) as exc_info:
        validate_advertisement(overview_ad(content="c" * 400), CONSTRAINTS)
    assert exc_info.value.limit == 400

    validate_advertisement(overview_ad(content="c" * 399), CONSTRAINTS)


def test_title_is_reported_before_content():
    with pytest.raises(ConstraintViolation) as exc_info:
        validate_advertisement(overview_ad(title="t" * 60, content="c" * 500), CONSTRAINTS)
    assert exc_info.value.field == "title"


def test_top_banner_limit_is_exclusive():
    validate_advertisement(banner_ad(content="x" * 54), CONSTRAINTS)

    with pytest.raises(ConstraintViolation) as exc_info:
        validate_advertisement(banner_ad(content="x" * 55), CONSTRAINTS)
    assert exc_info.value.field == "content"
    assert exc_info.value.limit == 55
    assert exc_info.value.actual == 55


def test_unknown_advertisement_type_is_rejected():
    with pytest.raises(TypeError):
        validate_advertisement(object(), CONSTRAINTS)


def test_validate_registry_collects_every_violation():
    registry = AdvertisementRegistry(
        top_banner=banner_ad(content="x" * 80),
        home_page=page_ad(),
        content_overview_pages={
            "frontend-courses-stackpack-overview": overview_ad(id="affiliate-long", title="t" * 70),
            "frontend-courses-todo-app-react-overview": overview_ad(),
        },
    )

    violations = validate_registry(registry, CONSTRAINTS)

    assert [(v.advertisement_id, v.field) for v in violations] == [
        ("fh-banner", "content"),
        ("affiliate-long", "title"),
    ]


def test_validate_registry_checks_the_fallback():
    assert validate_registry(AdvertisementRegistry(), CONSTRAINTS) == []
    validate_advertisement(FALLBACK_ADVERTISEMENT, CONSTRAINTS)
