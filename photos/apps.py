from django.apps import AppConfig


class PhotosConfig(AppConfig):
    """Photo rating app; registers the notification history signal on ready."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'photos'
    verbose_name = 'Photos and social graph'

    def ready(self):
        from photos import signals  # noqa: F401
