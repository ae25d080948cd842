from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import transaction

from photos.models import User


class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes all non-staff users together with their photos, ratings, likes,
    comments, follow edges and notifications, preserving administrative
    accounts. Cached counters on whatever remains are then recomputed, since
    cascading deletes bypass the services that keep them in step.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            deleted_count, _ = User.objects.filter(is_staff=False).delete()
            call_command("check_counters", fix=True, stdout=self.stdout)

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} non-staff users and related data."))
