"""
Utils for ol-openedx-glossary-sync tests.
"""

from dataclasses import dataclass, field

from ol_openedx_glossary_sync.constants import DEFAULT_EXPORT_URL
from ol_openedx_glossary_sync.exceptions import ConfigurationUnavailable
from ol_openedx_glossary_sync.stores.base import GlossaryStore, SettingsStore

AF_EXPORT = b"en,af,pos,description\nhello,hallo,noun,greeting\n"

DE_EXPORT = (
    b"en,de,pos,description\n"
    b"account,Konto,noun,\n"
    b"activate,aktivieren,verb,\n"
    b'"comment, reply",Kommentar,noun,"a reply, left on a post"\n'
)


def export_url(locale):
    return DEFAULT_EXPORT_URL.format(locale=locale)


@dataclass
class FakeGlossary:
    """In-memory glossary container"""

    locale: str
    entries: list = field(default_factory=list)


class FakeGlossaryStore(GlossaryStore):
    """
    In-memory GlossaryStore recording what was inserted and by whom.
    """

    def __init__(self, locales=("af", "de", "pt"), actor_id=7):
        self.glossaries = {locale: FakeGlossary(locale) for locale in locales}
        self.actor_id = actor_id
        self.available = True
        self.actor_lookups = 0
        self.rejected_terms = set()

    def get_or_create_container(self, locale):
        if not self.available:
            msg = "glossary tables are missing"
            raise ConfigurationUnavailable(msg)
        return self.glossaries.get(locale)

    def exists(self, container, entry):
        return any(
            existing.lookup_fields() == entry.lookup_fields()
            for existing, _ in container.entries
        )

    def insert(self, container, entry, actor_id):
        if entry.term in self.rejected_terms:
            return False
        container.entries.append((entry, actor_id))
        return True

    def current_actor_id(self):
        self.actor_lookups += 1
        return self.actor_id


class FakeSettingsStore(SettingsStore):
    """
    Dict backed SettingsStore
    """

    def __init__(self):
        self.options = {}
        self.cache = {}
        self.timeouts = {}
        self.available = True

    def get(self, key, default=None):
        return self.options.get(key, default)

    def set(self, key, value):
        if not self.available:
            msg = "settings table is missing"
            raise ConfigurationUnavailable(msg)
        self.options[key] = value

    def get_cached(self, key):
        return self.cache.get(key)

    def set_cached(self, key, value, timeout):
        self.cache[key] = value
        self.timeouts[key] = timeout

    def delete_cached(self, key):
        self.cache.pop(key, None)


class FakeExportClient:
    """
    Serves canned exports per remote locale, empty bytes for anything else.
    """

    def __init__(self, exports=None):
        self.exports = exports or {}
        self.requested = []

    def fetch(self, remote_locale):
        self.requested.append(remote_locale)
        return self.exports.get(remote_locale, b"")
