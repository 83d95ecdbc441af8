from django.apps import AppConfig
from django.conf import settings


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'backend.core'

    def ready(self):
        """Create the upload directories once at process start"""
        from .uploads import ensure_upload_dir
        ensure_upload_dir(settings.PRODUCT_IMAGE_DIR)
        ensure_upload_dir(settings.AVATAR_IMAGE_DIR)
