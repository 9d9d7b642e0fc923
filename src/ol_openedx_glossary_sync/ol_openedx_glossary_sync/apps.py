"""
App configuration for ol-openedx-glossary-sync plugin
"""

from django.apps import AppConfig
from edx_django_utils.plugins import PluginSettings

from ol_openedx_glossary_sync.constants import (
    PROJECT_TYPE_CMS,
    PROJECT_TYPE_LMS,
    SETTINGS_TYPE_COMMON,
)


class OLOpenEdxGlossarySyncConfig(AppConfig):
    """
    App configuration for the ol-openedx-glossary-sync app.
    """

    name = "ol_openedx_glossary_sync"
    verbose_name = "Open edX Glossary Sync"
    default_auto_field = "django.db.models.AutoField"

    plugin_app = {
        PluginSettings.CONFIG: {
            PROJECT_TYPE_CMS: {
                SETTINGS_TYPE_COMMON: {
                    PluginSettings.RELATIVE_PATH: "settings.common"
                },
            },
            PROJECT_TYPE_LMS: {
                SETTINGS_TYPE_COMMON: {
                    PluginSettings.RELATIVE_PATH: "settings.common"
                },
            },
        },
    }
