"""
Django management command to find product images that no product row references.

Orphans appear when two uploads collide on the same stored name or when a file
was written but its row never made it into the database.
"""
from django.conf import settings
from django.core.management.base import BaseCommand
from backend.catalog.models import Product
from backend.core.uploads import ImageStore


class Command(BaseCommand):
    help = 'List (and optionally delete) product images not referenced by any product'

    def add_arguments(self, parser):
        parser.add_argument(
            '--delete',
            action='store_true',
            help='Delete the orphaned files instead of only listing them',
        )

    def handle(self, *args, **options):
        delete = options.get('delete', False)
        store = ImageStore(settings.PRODUCT_IMAGE_DIR)

        referenced = set(
            Product.objects.exclude(product_image__isnull=True)
            .exclude(product_image='')
            .values_list('product_image', flat=True)
        )
        orphans = [name for name in store.listdir() if name not in referenced]

        if not orphans:
            self.stdout.write(self.style.SUCCESS('No orphaned product images found'))
            return

        for name in orphans:
            if delete:
                store.delete(name)
                self.stdout.write(f"Deleted {name}")
            else:
                self.stdout.write(f"Orphaned: {name}")

        summary = f"{len(orphans)} orphaned product image(s)"
        if delete:
            self.stdout.write(self.style.SUCCESS(f"Removed {summary}"))
        else:
            self.stdout.write(self.style.WARNING(f"Found {summary}; run with --delete to remove them"))
