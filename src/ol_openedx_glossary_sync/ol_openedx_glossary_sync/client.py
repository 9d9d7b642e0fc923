"""HTTP client for the remote glossary export."""

import logging

import requests
from django.conf import settings

from ol_openedx_glossary_sync.constants import (
    DEFAULT_EXPORT_URL,
    DEFAULT_REQUEST_TIMEOUT,
    EXPORT_ACCEPT_HEADER,
    HTTP_OK,
)

log = logging.getLogger(__name__)


class GlossaryExportClient:
    """
    Download glossary CSV exports for a remote locale.

    Failures never raise. A transport error, a timeout or a non-200 status
    is logged and reported as an empty export.
    """

    def __init__(self, export_url=None, timeout=None):
        self.export_url = export_url or getattr(
            settings, "OL_GLOSSARY_SYNC_EXPORT_URL", DEFAULT_EXPORT_URL
        )
        self.timeout = timeout or getattr(
            settings, "OL_GLOSSARY_SYNC_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT
        )
        self.session = self.get_export_session()

    @staticmethod
    def get_export_session():
        """
        Create a request session that asks for CSV content
        """
        session = requests.Session()
        session.headers.update({"Accept": EXPORT_ACCEPT_HEADER})
        return session

    def get_export_url(self, remote_locale: str) -> str:
        return self.export_url.format(locale=remote_locale)

    def fetch(self, remote_locale: str) -> bytes:
        """
        Fetch the glossary export for a remote locale.

        Args:
            remote_locale: Locale slug understood by the remote source

        Returns:
            bytes: The raw CSV body, or empty bytes on any failure
        """
        if not remote_locale:
            return b""

        url = self.get_export_url(remote_locale)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException:
            log.warning(
                "Could not download glossary export from %s", url, exc_info=True
            )
            return b""

        if response.status_code != HTTP_OK:
            log.warning(
                "Glossary export %s returned HTTP %s", url, response.status_code
            )
            return b""

        return response.content
