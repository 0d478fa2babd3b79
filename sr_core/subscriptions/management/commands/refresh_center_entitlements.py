# sr_core/subscriptions/management/commands/refresh_center_entitlements.py
from __future__ import annotations

from django.core.management.base import BaseCommand

from sr_core.subscriptions.services import SubscriptionService


class Command(BaseCommand):
    help = "Clear MedicalCenter.subscription_active for centers whose subscriptions have all expired."

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true", help="Print affected centers only; do not write.")

    def handle(self, *args, **opts):
        dry = opts["dry_run"]

        lapsed = SubscriptionService.refresh_center_entitlements(dry_run=dry)

        for center in lapsed:
            self.stdout.write(f"{'would clear' if dry else 'cleared'}: {center.email} ({center.name})")

        verb = "would clear" if dry else "cleared"
        self.stdout.write(self.style.SUCCESS(f"Done. centers {verb}={len(lapsed)}"))
