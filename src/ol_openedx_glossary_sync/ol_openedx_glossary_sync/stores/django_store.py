"""
Django ORM implementations of the glossary and settings stores.
"""

import logging
from contextlib import contextmanager

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import (
    DataError,
    IntegrityError,
    OperationalError,
    ProgrammingError,
    transaction,
)
from edx_django_utils.cache import TieredCache, get_cache_key

from ol_openedx_glossary_sync.constants import DEFAULT_ACTOR_ID
from ol_openedx_glossary_sync.exceptions import ConfigurationUnavailable
from ol_openedx_glossary_sync.models import (
    Glossary,
    GlossaryEntry,
    GlossarySyncOption,
    TranslationLocale,
)
from ol_openedx_glossary_sync.stores.base import GlossaryStore, SettingsStore

User = get_user_model()
log = logging.getLogger(__name__)


@contextmanager
def glossary_storage():
    """
    Report missing tables or an unreachable database as missing storage.

    Errors caused by the data of a single row are left to the caller.
    """
    try:
        yield
    except (ProgrammingError, OperationalError) as exc:
        msg = f"Glossary storage is not available: {exc}"
        raise ConfigurationUnavailable(msg) from exc


def get_glossary_sync_service_user():
    """
    Retrieve the configured service user for glossary imports.

    Returns:
        User: The service user object, or None when not configured or missing
    """
    username = getattr(settings, "OL_GLOSSARY_SYNC_SERVICE_WORKER_USERNAME", "")
    if not username:
        return None

    cache_key = get_cache_key(glossary_sync_service_worker=username)
    cache_value = TieredCache.get_cached_response(cache_key)
    if not cache_value.is_found:
        user = User.objects.filter(username=username, is_active=True).first()
        TieredCache.set_all_tiers(cache_key, user)
    else:
        user = cache_value.value

    return user


class DjangoGlossaryStore(GlossaryStore):
    """
    Glossary storage backed by the plugin's models.

    Args:
        user: The user who triggered the import, if any
    """

    def __init__(self, user=None):
        self.user = user

    def get_or_create_container(self, locale):
        with glossary_storage():
            translation_locale = TranslationLocale.objects.filter(
                locale=locale, is_active=True
            ).first()
            if not translation_locale:
                log.info("No active translation locale %s", locale)
                return None

            glossary = translation_locale.glossaries.order_by("id").first()
            if glossary:
                return glossary

            log.info("Creating glossary for locale %s", locale)
            return Glossary.objects.create(translation_locale=translation_locale)

    def exists(self, container, entry):
        with glossary_storage():
            return GlossaryEntry.objects.filter(
                glossary=container, **entry.lookup_fields()
            ).exists()

    def insert(self, container, entry, actor_id):
        try:
            with glossary_storage(), transaction.atomic():
                glossary_entry = GlossaryEntry.objects.create(
                    glossary=container,
                    last_edited_by_id=actor_id,
                    **entry.lookup_fields(),
                )
        except (DataError, IntegrityError) as exc:
            log.debug(
                "Skipping glossary entry %s rejected by the database: %s", entry, exc
            )
            return False
        return glossary_entry.pk is not None

    def current_actor_id(self):
        """
        Resolve the importing user.

        Falls back from the requesting user to the configured service user,
        then to the first active superuser, then to ``DEFAULT_ACTOR_ID``.
        """
        if self.user is not None and self.user.is_authenticated:
            return self.user.id

        with glossary_storage():
            service_user = get_glossary_sync_service_user()
            if service_user:
                return service_user.id

            admin_id = (
                User.objects.filter(is_superuser=True, is_active=True)
                .order_by("id")
                .values_list("id", flat=True)
                .first()
            )
        return admin_id or DEFAULT_ACTOR_ID


class DjangoSettingsStore(SettingsStore):
    """
    Persistent values in GlossarySyncOption, cached values in TieredCache.
    """

    def get(self, key, default=None):
        with glossary_storage():
            option = GlossarySyncOption.objects.filter(key=key).first()
        return default if option is None else option.value

    def set(self, key, value):
        with glossary_storage():
            GlossarySyncOption.objects.update_or_create(
                key=key, defaults={"value": value}
            )

    @staticmethod
    def _cache_key(key):
        return get_cache_key(glossary_sync=key)

    def get_cached(self, key):
        cache_value = TieredCache.get_cached_response(self._cache_key(key))
        return cache_value.value if cache_value.is_found else None

    def set_cached(self, key, value, timeout):
        TieredCache.set_all_tiers(
            self._cache_key(key), value, django_cache_timeout=timeout
        )

    def delete_cached(self, key):
        TieredCache.delete_all_tiers(self._cache_key(key))
