from django.apps import AppConfig


class GfmEditorConfig(AppConfig):
    name = 'gfmeditor'
    verbose_name = 'GitHub Markdown editor'
