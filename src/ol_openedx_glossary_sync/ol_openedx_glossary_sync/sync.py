"""
Synchronization of locale glossaries from the remote glossary export.

A locale sync resolves the local glossary, downloads the export for the
mapped remote locale, and inserts every valid row that is not already in the
glossary. Only missing storage fails a sync; an unreachable or empty export
imports nothing and still counts as a successful run.
"""

import logging
import time

from ol_openedx_glossary_sync.constants import (
    IMPORT_TIMES_OPTION,
    PREVIEW_CACHE_PREFIX,
    PREVIEW_CACHE_TIMEOUT,
)
from ol_openedx_glossary_sync.entries import CandidateEntry
from ol_openedx_glossary_sync.exceptions import ConfigurationUnavailable
from ol_openedx_glossary_sync.locales import to_remote_locale
from ol_openedx_glossary_sync.parsers import GlossaryCSVParser, GlossaryPreview
from ol_openedx_glossary_sync.results import (
    BatchSyncResult,
    FailureReason,
    SyncOutcome,
)

log = logging.getLogger(__name__)


class GlossarySynchronizer:
    """
    Import remote glossary exports into local glossaries.

    Args:
        store: GlossaryStore the entries are written to
        settings_store: SettingsStore for sync times and cached previews
        client: GlossaryExportClient used to download exports
        parser: GlossaryCSVParser, a default one when omitted
        locale_overrides: Extra local -> remote locale mappings
        clock: Callable returning the current Unix time
        preview_cache_timeout: Seconds a preview stays cached
    """

    def __init__(  # noqa: PLR0913
        self,
        store,
        settings_store,
        client,
        parser=None,
        locale_overrides=None,
        clock=time.time,
        preview_cache_timeout=PREVIEW_CACHE_TIMEOUT,
    ):
        self.store = store
        self.settings_store = settings_store
        self.client = client
        self.parser = parser or GlossaryCSVParser()
        self.locale_overrides = locale_overrides or {}
        self.clock = clock
        self.preview_cache_timeout = preview_cache_timeout

    def remote_locale(self, locale: str) -> str:
        return to_remote_locale(locale, self.locale_overrides)

    def sync_locale(self, locale: str) -> SyncOutcome:
        """
        Sync one locale.

        Returns:
            SyncOutcome: The number of imported entries, or the failure reason
        """
        log.info("Starting glossary sync for locale %s", locale)
        try:
            container = self.store.get_or_create_container(locale)
        except ConfigurationUnavailable:
            log.exception("Glossary storage unavailable, cannot sync %s", locale)
            return SyncOutcome.failed(locale, FailureReason.CONFIGURATION_UNAVAILABLE)

        if container is None:
            log.error("No glossary could be found or created for locale %s", locale)
            return SyncOutcome.failed(
                locale, FailureReason.CONTAINER_RESOLUTION_FAILED
            )

        remote_locale = self.remote_locale(locale)
        export = self.client.fetch(remote_locale)
        try:
            if not export:
                log.info("Nothing to import for locale %s", locale)
                imported = 0
            else:
                imported = self._import_export(container, locale, remote_locale, export)
            self._record_sync_time(locale)
        except ConfigurationUnavailable:
            log.exception("Glossary storage failed while syncing %s", locale)
            return SyncOutcome.failed(locale, FailureReason.CONFIGURATION_UNAVAILABLE)

        self.settings_store.delete_cached(self._preview_cache_key(locale))
        log.info("Imported %s glossary entries for locale %s", imported, locale)
        return SyncOutcome.succeeded(locale, imported)

    def _import_export(self, container, locale, remote_locale, export) -> int:
        records = self.parser.parse(export, locale=remote_locale)
        actor_id = self.store.current_actor_id()

        imported = 0
        for record in records:
            entry = CandidateEntry.from_record(record, locale)
            if not entry.is_valid():
                log.debug("Skipping invalid glossary entry %s", entry)
                continue
            if self.store.exists(container, entry):
                log.debug("Skipping existing glossary entry %s", entry)
                continue
            if self.store.insert(container, entry, actor_id):
                imported += 1
        return imported

    def sync_locales(self, locales) -> BatchSyncResult:
        """
        Sync several locales one after another, in the given order.

        A failed locale does not stop the others, except when the glossary
        storage itself is unavailable: the remaining locales are then
        reported as failed without being attempted.
        """
        result = BatchSyncResult()
        storage_unavailable = False
        for locale in dict.fromkeys(locales):
            if storage_unavailable:
                result.add(
                    SyncOutcome.failed(locale, FailureReason.CONFIGURATION_UNAVAILABLE)
                )
                continue

            outcome = self.sync_locale(locale)
            result.add(outcome)
            storage_unavailable = (
                outcome.reason == FailureReason.CONFIGURATION_UNAVAILABLE
            )
        return result

    def _record_sync_time(self, locale: str) -> None:
        import_times = dict(self.settings_store.get(IMPORT_TIMES_OPTION) or {})
        import_times[locale] = int(self.clock())
        self.settings_store.set(IMPORT_TIMES_OPTION, import_times)

    def get_last_sync_times(self) -> dict[str, int]:
        return dict(self.settings_store.get(IMPORT_TIMES_OPTION) or {})

    def get_last_sync_time(self, locale: str) -> int | None:
        """Unix time of the last sync for a locale, None if never synced."""
        return self.get_last_sync_times().get(locale)

    @staticmethod
    def _preview_cache_key(locale: str) -> str:
        return f"{PREVIEW_CACHE_PREFIX}{locale}"

    def preview_locale(self, locale: str) -> GlossaryPreview:
        """
        Download and parse the export for a locale without importing it.

        Non-empty previews are cached until the locale is synced again or the
        cache is cleared.
        """
        cache_key = self._preview_cache_key(locale)
        preview = self.settings_store.get_cached(cache_key)
        if preview is not None:
            return preview

        export = self.client.fetch(self.remote_locale(locale))
        if not export:
            return GlossaryPreview()

        preview = self.parser.preview(export)
        self.settings_store.set_cached(cache_key, preview, self.preview_cache_timeout)
        return preview

    def clear_preview_cache(self, locales) -> None:
        for locale in locales:
            self.settings_store.delete_cached(self._preview_cache_key(locale))
