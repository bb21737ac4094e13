"""
Core — Application Configuration
"""

from django.apps import AppConfig
from django.db.backends.signals import connection_created


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
    verbose_name = 'Core'

    def ready(self):
        from core.database import register_sqlite_functions

        connection_created.connect(
            register_sqlite_functions, dispatch_uid='core.register_sqlite_functions',
        )
