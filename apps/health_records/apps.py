from django.apps import AppConfig


class HealthRecordsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.health_records'
    verbose_name = 'Health Records'
