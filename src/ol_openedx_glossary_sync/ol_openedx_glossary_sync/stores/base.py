"""Interfaces for the storage the glossary sync writes to."""

from abc import ABC, abstractmethod
from typing import Any

from ol_openedx_glossary_sync.entries import CandidateEntry


class GlossaryStore(ABC):
    """
    Abstract base class for persistent glossary storage.

    Implementations raise ``ConfigurationUnavailable`` when the storage
    itself is missing.
    """

    @abstractmethod
    def get_or_create_container(self, locale: str) -> Any | None:
        """
        Find the glossary bound to a locale, creating it when absent.

        Returns None when the locale has nothing a glossary can be bound to.
        """

    @abstractmethod
    def exists(self, container: Any, entry: CandidateEntry) -> bool:
        """Check whether an equivalent entry is already in the glossary."""

    @abstractmethod
    def insert(self, container: Any, entry: CandidateEntry, actor_id: int) -> bool:
        """
        Persist an entry, returning whether a row was created.

        Entries the storage rejects are skipped and reported as not created.
        """

    @abstractmethod
    def current_actor_id(self) -> int:
        """Identify who imported entries are attributed to."""


class SettingsStore(ABC):
    """Abstract base class for the host's key-value settings."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Read a persistent value."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Write a persistent value."""

    @abstractmethod
    def get_cached(self, key: str) -> Any | None:
        """Read a cached value, None when missing or expired."""

    @abstractmethod
    def set_cached(self, key: str, value: Any, timeout: int) -> None:
        """Cache a value for ``timeout`` seconds."""

    @abstractmethod
    def delete_cached(self, key: str) -> None:
        """Drop a cached value."""
