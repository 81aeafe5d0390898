"""
WSGI config for frontendhire project.

It exposes the WSGI callable as a module-level variable named ``application``.

For more information on this file, see
https://docs.djangoproject.com/en/5.2/howto/deployment/wsgi/
"""

import os

from django.core.management import call_command
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'frontendhire.settings')


def _truthy(value: str) -> bool:
	return value.strip().lower() in {"1", "true", "yes", "on"}


def _maybe_run_startup_tasks() -> None:
	"""Optional startup checks for single-service deploys.

	When the platform has no separate build step, setting
	CHECK_ADVERTISEMENTS_ON_STARTUP refuses to serve a misconfigured catalog.
	"""
	if _truthy(os.environ.get("CHECK_ADVERTISEMENTS_ON_STARTUP", "")):
		call_command("check_advertisements", verbosity=1)


application = get_wsgi_application()

# Run startup tasks only after Django is fully initialized.
_maybe_run_startup_tasks()
