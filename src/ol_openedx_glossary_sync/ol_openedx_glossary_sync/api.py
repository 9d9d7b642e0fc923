"""
Entry points used by the admin, tasks and management commands.
"""

from django.conf import settings

from ol_openedx_glossary_sync.client import GlossaryExportClient
from ol_openedx_glossary_sync.constants import PREVIEW_CACHE_TIMEOUT
from ol_openedx_glossary_sync.models import TranslationLocale
from ol_openedx_glossary_sync.stores.django_store import (
    DjangoGlossaryStore,
    DjangoSettingsStore,
)
from ol_openedx_glossary_sync.sync import GlossarySynchronizer


def get_glossary_synchronizer(user=None):
    """
    Build a GlossarySynchronizer wired to the Django stores and settings.

    Args:
        user (User): The user the imported entries are credited to, if any
    """
    return GlossarySynchronizer(
        store=DjangoGlossaryStore(user=user),
        settings_store=DjangoSettingsStore(),
        client=GlossaryExportClient(),
        locale_overrides=getattr(settings, "OL_GLOSSARY_SYNC_LOCALE_OVERRIDES", {}),
        preview_cache_timeout=getattr(
            settings, "OL_GLOSSARY_SYNC_PREVIEW_CACHE_TIMEOUT", PREVIEW_CACHE_TIMEOUT
        ),
    )


def sync_glossaries(locales, user=None):
    """
    Sync the glossaries of the given locales.

    Returns:
        BatchSyncResult: Per-locale outcomes
    """
    return get_glossary_synchronizer(user=user).sync_locales(locales)


def get_supported_locales():
    """
    Active locales that can be synced, sorted by English name.

    Returns:
        dict: locale slug -> English name
    """
    return dict(
        TranslationLocale.objects.filter(is_active=True)
        .order_by("english_name")
        .values_list("locale", "english_name")
    )


def preview_glossary(locale):
    """
    Download and parse the export of a locale without importing it.

    Returns:
        GlossaryPreview: The header and the records of the export
    """
    return get_glossary_synchronizer().preview_locale(locale)
