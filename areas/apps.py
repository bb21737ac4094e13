"""
Areas — Application Configuration
"""

from django.apps import AppConfig


class AreasConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'areas'
    verbose_name = 'Indonesian Administrative Areas'

    def ready(self):
        from .services import AreaRepository

        self.repository = AreaRepository()
