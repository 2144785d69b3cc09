from django.apps import AppConfig


class ResultCoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'courtside.result_core'
    verbose_name = 'Match Result Engine'
