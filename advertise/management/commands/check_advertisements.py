"""Validate every configured advertisement against its placement limits.

Run this in the build step; it exits non-zero on the first bad deploy
instead of letting a page fail at render time.
"""

from django.core.management.base import BaseCommand, CommandError

from advertise.conf import get_constraints, get_registry
from advertise.validation import validate_registry


class Command(BaseCommand):
    help = "Check all configured advertisements against their character limits."

    def handle(self, *args, **options):
        registry = get_registry()
        violations = validate_registry(registry, get_constraints())

        for violation in violations:
            self.stderr.write(self.style.ERROR(str(violation)))

        if violations:
            raise CommandError(f"{len(violations)} advertisement constraint violation(s).")

        total = len(list(registry.configured()))
        self.stdout.write(self.style.SUCCESS(f"All {total} configured advertisement(s) fit their placements."))
