"""
Django admin for ol-openedx-glossary-sync plugin
"""

import logging
from datetime import UTC, datetime

from django.contrib import admin, messages

from ol_openedx_glossary_sync.api import get_glossary_synchronizer
from ol_openedx_glossary_sync.constants import IMPORT_TIMES_OPTION
from ol_openedx_glossary_sync.models import (
    Glossary,
    GlossaryEntry,
    TranslationLocale,
)
from ol_openedx_glossary_sync.stores.django_store import DjangoSettingsStore

log = logging.getLogger(__name__)


class TranslationLocaleAdmin(admin.ModelAdmin):
    """
    Admin for TranslationLocale model
    """

    list_display = ("locale", "english_name", "is_active", "last_synced")
    search_fields = ("locale", "english_name")
    list_filter = ("is_active",)
    actions = ("sync_glossary", "clear_preview_cache")

    @admin.display(description="Last synced")
    def last_synced(self, obj):
        timestamp = DjangoSettingsStore().get(IMPORT_TIMES_OPTION, {}).get(obj.locale)
        return datetime.fromtimestamp(timestamp, tz=UTC) if timestamp else None

    @admin.action(description="Sync glossary from remote source")
    def sync_glossary(self, request, queryset):
        """
        Sync glossaries for the selected locales
        """
        locales = list(queryset.values_list("locale", flat=True))
        log.info("Starting glossary sync through admin actions for %s", locales)
        result = get_glossary_synchronizer(user=request.user).sync_locales(locales)

        if result.failed:
            self.message_user(
                request,
                "Glossary import failed for: "
                f"{', '.join(result.failed_locales)}. "
                "Glossary storage may not be available. "
                f"{result.total_imported} entries imported for the other locales.",
                level=messages.ERROR,
            )
            return

        self.message_user(
            request,
            "Glossary imported successfully. "
            f"{result.total_imported} entries imported.",
            level=messages.SUCCESS,
        )

    @admin.action(description="Clear cached glossary previews")
    def clear_preview_cache(self, request, queryset):
        """
        Drop cached previews for the selected locales
        """
        locales = list(queryset.values_list("locale", flat=True))
        get_glossary_synchronizer().clear_preview_cache(locales)
        self.message_user(request, f"Cleared {len(locales)} cached preview(s)")


class GlossaryAdmin(admin.ModelAdmin):
    """
    Admin for Glossary model
    """

    list_display = ("id", "translation_locale", "created")
    list_filter = ("translation_locale",)


class GlossaryEntryAdmin(admin.ModelAdmin):
    """
    Admin for GlossaryEntry model
    """

    list_display = ("term", "translation", "part_of_speech", "glossary", "created")
    search_fields = ("term", "translation", "comment")
    list_filter = ("glossary__translation_locale", "part_of_speech")
    readonly_fields = ("last_edited_by", "created", "modified")
    list_per_page = 50


admin.site.register(TranslationLocale, TranslationLocaleAdmin)
admin.site.register(Glossary, GlossaryAdmin)
admin.site.register(GlossaryEntry, GlossaryEntryAdmin)
