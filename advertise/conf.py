"""Loading the static catalog, and access to what was loaded.

The registry and constraints live on the app config, built once in
AdvertiseConfig.ready(). Code that needs them either takes them as arguments
or asks for them here.
"""

from __future__ import annotations

from importlib import import_module

from django.apps import apps
from django.core.exceptions import ImproperlyConfigured

from .constraints import AdvertisementConstraints
from .registry import AdvertisementRegistry

CATALOG_TABLES = ("ADVERTISEMENTS", "ADVERTISEMENT_CONSTRAINTS")


def load_catalog(module_path: str) -> tuple[AdvertisementRegistry, AdvertisementConstraints]:
    """Import a catalog module and parse its two tables."""
    try:
        module = import_module(module_path)
    except ImportError as e:
        raise ImproperlyConfigured(f"ADVERTISEMENT_CATALOG {module_path!r} cannot be imported.") from e

    for name in CATALOG_TABLES:
        if not hasattr(module, name):
            raise ImproperlyConfigured(f"ADVERTISEMENT_CATALOG {module_path!r} does not define {name}.")

    registry = AdvertisementRegistry.from_dict(module.ADVERTISEMENTS)
    constraints = AdvertisementConstraints.from_dict(module.ADVERTISEMENT_CONSTRAINTS)
    return registry, constraints


def get_registry() -> AdvertisementRegistry:
    return apps.get_app_config("advertise").registry


def get_constraints() -> AdvertisementConstraints:
    return apps.get_app_config("advertise").constraints
