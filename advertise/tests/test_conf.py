import pytest
from django.core.exceptions import ImproperlyConfigured

from advertise.conf import get_constraints, get_registry, load_catalog
from advertise.constraints import AdvertisementConstraints
from advertise.models import HomePageSlot
from advertise.registry import AdvertisementRegistry


def test_app_loads_catalog_once_at_startup():
    assert isinstance(get_registry(), AdvertisementRegistry)
    assert isinstance(get_constraints(), AdvertisementConstraints)
    assert get_registry() is get_registry()


def test_load_catalog_parses_both_tables():
    registry, constraints = load_catalog("advertise.catalog")

    assert registry.get(HomePageSlot()).title == "AI Engineering for Developers"
    assert constraints.home_page.max_content_length == 800


def test_missing_catalog_module_is_a_configuration_error():
    with pytest.raises(ImproperlyConfigured, match="cannot be imported"):
        load_catalog("advertise.no_such_catalog")


def test_catalog_without_tables_is_a_configuration_error():
    with pytest.raises(ImproperlyConfigured, match="ADVERTISEMENTS"):
        load_catalog("advertise.constraints")
