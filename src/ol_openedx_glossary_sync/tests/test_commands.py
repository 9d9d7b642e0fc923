"""Tests for the sync_glossaries management command"""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from ol_openedx_glossary_sync.api import get_glossary_synchronizer
from ol_openedx_glossary_sync.models import GlossaryEntry, TranslationLocale
from ol_openedx_glossary_sync.stores.django_store import DjangoSettingsStore
from tests.utils import AF_EXPORT, DE_EXPORT, export_url

pytestmark = pytest.mark.django_db


@pytest.fixture(autouse=True)
def translation_locales():
    """Active af and de locales"""
    TranslationLocale.objects.create(locale="af", english_name="Afrikaans")
    TranslationLocale.objects.create(locale="de", english_name="German")


@pytest.mark.parametrize(
    ("args", "message"),
    [
        ([], "You must specify either locales or use the --all flag"),
        (["af", "--all"], "Cannot use both locales and --all flag together"),
    ],
)
def test_invalid_arguments(args, message):
    """Locales and --all are mutually exclusive and one of them is required"""
    with pytest.raises(CommandError, match=message):
        call_command("sync_glossaries", *args)


def test_sync_locales(mocked_responses):
    """Named locales are synced and reported one per line"""
    mocked_responses.add(mocked_responses.GET, export_url("af"), body=AF_EXPORT)
    stdout = StringIO()

    call_command("sync_glossaries", "af", stdout=stdout)

    output = stdout.getvalue()
    assert "Syncing glossaries for 1 locale(s)..." in output
    assert "   af: 1 entries imported" in output
    assert "Glossary imported successfully. 1 entries imported." in output
    assert GlossaryEntry.objects.count() == 1


def test_sync_all_locales(mocked_responses):
    """--all syncs every active locale"""
    mocked_responses.add(mocked_responses.GET, export_url("af"), body=AF_EXPORT)
    mocked_responses.add(mocked_responses.GET, export_url("de"), body=DE_EXPORT)
    stdout = StringIO()

    call_command("sync_glossaries", "--all", stdout=stdout)

    output = stdout.getvalue()
    assert "   af: 1 entries imported" in output
    assert "   de: 3 entries imported" in output
    assert "Glossary imported successfully. 4 entries imported." in output


def test_sync_failed_locale(mocked_responses):
    """Failed locales are reported on stderr"""
    mocked_responses.add(mocked_responses.GET, export_url("af"), body=AF_EXPORT)
    stdout, stderr = StringIO(), StringIO()

    call_command("sync_glossaries", "af", "xx", stdout=stdout, stderr=stderr)

    assert "   af: 1 entries imported" in stdout.getvalue()
    assert "Glossary imported successfully" not in stdout.getvalue()
    errors = stderr.getvalue()
    assert "   xx: Container resolution failed" in errors
    assert "Glossary import failed for: xx" in errors


def test_clear_cache(mocked_responses):
    """--clear-cache drops the cached previews of the synced locales"""
    mocked_responses.add(mocked_responses.GET, export_url("af"), body=b"")
    settings_store = DjangoSettingsStore()
    preview_key = get_glossary_synchronizer()._preview_cache_key("de")  # noqa: SLF001
    settings_store.set_cached(preview_key, "cached", 60)

    call_command("sync_glossaries", "af", "--clear-cache", stdout=StringIO())
    assert settings_store.get_cached(preview_key) == "cached"

    mocked_responses.add(mocked_responses.GET, export_url("de"), body=b"")
    call_command("sync_glossaries", "de", "--clear-cache", stdout=StringIO())
    assert settings_store.get_cached(preview_key) is None
