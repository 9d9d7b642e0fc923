"""Mapping between local locale slugs and the remote source's locale slugs."""

from ol_openedx_glossary_sync.constants import REMOTE_LOCALE_OVERRIDES


def to_remote_locale(locale: str, overrides: dict[str, str] | None = None) -> str:
    """
    Return the remote locale identifier for a local locale.

    Args:
        locale: Local locale slug (e.g. "pt")
        overrides: Extra mappings merged over the built-in table

    Returns:
        The remote slug, or the locale unchanged when no override exists
    """
    mapping = {**REMOTE_LOCALE_OVERRIDES, **(overrides or {})}
    return mapping.get(locale, locale)
