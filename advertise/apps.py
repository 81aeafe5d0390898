import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class AdvertiseConfig(AppConfig):
    name = "advertise"
    verbose_name = "Advertisements"

    registry = None
    constraints = None

    def ready(self):
        from .conf import load_catalog

        self.registry, self.constraints = load_catalog(settings.ADVERTISEMENT_CATALOG)
        logger.info(
            "Loaded %d advertisement slot(s) from %s.",
            len(list(self.registry.configured())),
            settings.ADVERTISEMENT_CATALOG,
        )
