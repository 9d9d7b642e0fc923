"""
Django management command to import glossaries from the remote glossary export.

Usage:
    python manage.py sync_glossaries [locale1] [locale2] ...
    python manage.py sync_glossaries --all

Examples:
    # Sync every active locale
    python manage.py sync_glossaries --all

    # Sync specific locales and drop their cached previews first
    python manage.py sync_glossaries de pt --clear-cache

Entries that already exist in a locale's glossary are skipped, so the command
can be run repeatedly.
"""

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from ol_openedx_glossary_sync.api import (
    get_glossary_synchronizer,
    get_supported_locales,
)


class Command(BaseCommand):
    help = """
    Import glossary entries for the given locales from the remote glossary export
    """

    def add_arguments(self, parser):
        parser.add_argument(
            "locales",
            nargs="*",
            type=str,
            help="List of locale slugs to sync",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            help="Sync every active locale",
        )
        parser.add_argument(
            "--clear-cache",
            action="store_true",
            help="Clear cached glossary previews of the synced locales first",
        )

    def handle(self, *args, **options):  # noqa: ARG002
        locales = options.get("locales", [])
        all_locales = options.get("all")

        if not locales and not all_locales:
            command_name = Path(__file__).stem
            msg = (
                "You must specify either locales or use the --all flag.\n"
                "Examples:\n"
                f"  python manage.py {command_name} --all\n"
                f"  python manage.py {command_name} de pt"
            )
            raise CommandError(msg)

        if locales and all_locales:
            msg = "Cannot use both locales and --all flag together."
            raise CommandError(msg)

        if all_locales:
            locales = list(get_supported_locales())

        synchronizer = get_glossary_synchronizer()
        if options.get("clear_cache"):
            synchronizer.clear_preview_cache(locales)

        self.stdout.write(
            self.style.SUCCESS(f"Syncing glossaries for {len(locales)} locale(s)...")
        )
        result = synchronizer.sync_locales(locales)

        for locale, outcome in result.outcomes.items():
            if outcome.is_failed:
                self.stderr.write(
                    self.style.ERROR(f"   {locale}: {outcome.reason.description}")
                )
            else:
                self.stdout.write(f"   {locale}: {outcome.imported} entries imported")

        if result.failed:
            self.stderr.write(
                self.style.ERROR(
                    f"Glossary import failed for: {', '.join(result.failed_locales)}"
                )
            )
            return

        self.stdout.write(
            self.style.SUCCESS(
                "Glossary imported successfully. "
                f"{result.total_imported} entries imported."
            )
        )
