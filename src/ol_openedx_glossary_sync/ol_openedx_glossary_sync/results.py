"""Outcomes of glossary sync runs."""

from dataclasses import dataclass, field
from enum import StrEnum

from ol_openedx_glossary_sync.constants import FAILED_SENTINEL


class SyncStatus(StrEnum):
    """Whether a locale sync ran to completion."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FailureReason(StrEnum):
    """Why a locale sync hard-failed."""

    CONFIGURATION_UNAVAILABLE = "configuration_unavailable"
    CONTAINER_RESOLUTION_FAILED = "container_resolution_failed"

    @property
    def description(self):
        """Return a human-readable description."""
        return self.value.replace("_", " ").capitalize()


@dataclass(frozen=True)
class SyncOutcome:
    """Result of syncing one locale."""

    locale: str
    status: SyncStatus
    imported: int = 0
    reason: FailureReason | None = None

    @classmethod
    def succeeded(cls, locale, imported):
        return cls(locale=locale, status=SyncStatus.SUCCEEDED, imported=imported)

    @classmethod
    def failed(cls, locale, reason):
        return cls(locale=locale, status=SyncStatus.FAILED, reason=reason)

    @property
    def is_failed(self):
        return self.status == SyncStatus.FAILED


@dataclass
class BatchSyncResult:
    """
    Results of syncing several locales, in the order they were attempted.

    A zero count is a success. ``failed`` is set as soon as one locale
    hard-failed, even if other locales imported entries.
    """

    outcomes: dict[str, SyncOutcome] = field(default_factory=dict)

    def add(self, outcome: SyncOutcome) -> None:
        self.outcomes[outcome.locale] = outcome

    @property
    def failed(self) -> bool:
        return any(outcome.is_failed for outcome in self.outcomes.values())

    @property
    def failed_locales(self) -> list[str]:
        return [
            locale for locale, outcome in self.outcomes.items() if outcome.is_failed
        ]

    @property
    def total_imported(self) -> int:
        return sum(outcome.imported for outcome in self.outcomes.values())

    def counts(self) -> dict[str, int | None]:
        """Map each locale to its import count, or None when it failed."""
        return {
            locale: None if outcome.is_failed else outcome.imported
            for locale, outcome in self.outcomes.items()
        }

    def as_legacy_counts(self) -> dict[str, int]:
        """Map each locale to its import count, or -1 when it failed."""
        return {
            locale: FAILED_SENTINEL if count is None else count
            for locale, count in self.counts().items()
        }
