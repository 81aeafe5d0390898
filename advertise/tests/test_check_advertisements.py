from io import StringIO

import pytest
from django.apps import apps
from django.core.management import CommandError, call_command

from advertise.registry import AdvertisementRegistry

from .factories import banner_ad, overview_ad


def test_shipped_catalog_passes():
    out = StringIO()
    call_command("check_advertisements", stdout=out)
    assert "fit their placements" in out.getvalue()


def test_violations_fail_the_command(monkeypatch):
    bad = AdvertisementRegistry(
        top_banner=banner_ad(content="x" * 60),
        content_overview_pages={
            "frontend-courses-stackpack-overview": overview_ad(id="affiliate-wordy", content="c" * 400),
        },
    )
    monkeypatch.setattr(apps.get_app_config("advertise"), "registry", bad)

    err = StringIO()
    with pytest.raises(CommandError, match="2 advertisement constraint violation"):
        call_command("check_advertisements", stderr=err)

    output = err.getvalue()
    assert "fh-banner" in output
    assert "affiliate-wordy" in output
