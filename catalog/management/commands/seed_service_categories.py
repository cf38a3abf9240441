from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from catalog.models import ServiceCategory
from users.models import UserProfile

User = get_user_model()

DEFAULT_CATEGORIES = [
    ("Plumbing Services", "plumbing.png"),
    ("Electrical Services", "electrical.png"),
    ("Cleaning Services", "cleaning.png"),
]


class Command(BaseCommand):
    help = "Seed the default service categories, owned by the first super admin if one exists"

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be created without writing anything',
        )

    def handle(self, *args, **options):
        dry_run = options.get('dry_run', False)

        owner = (
            User.objects.filter(profile__role=UserProfile.ROLE_SUPER_ADMIN)
            .order_by("id")
            .first()
        )
        if owner is None:
            self.stdout.write(self.style.WARNING('No super admin found; categories will have no owner'))
        else:
            self.stdout.write(f'Owner: {owner.username} (ID: {owner.id})')

        if dry_run:
            for name, icon in DEFAULT_CATEGORIES:
                self.stdout.write(f'[dry-run] {name} ({icon})')
            self.stdout.write(self.style.WARNING('DRY RUN - No changes were made.'))
            return

        created_count = 0
        with transaction.atomic():
            for name, icon in DEFAULT_CATEGORIES:
                _, created = ServiceCategory.objects.update_or_create(
                    name=name,
                    defaults={"icon": icon, "user": owner},
                )
                created_count += int(created)
                self.stdout.write(f'{"Created" if created else "Updated"}: {name}')

        self.stdout.write(
            self.style.SUCCESS(
                f'Service categories seeded: {created_count} created, '
                f'{len(DEFAULT_CATEGORIES) - created_count} updated.'
            )
        )
