# noqa: INP001

"""Common settings unique to the glossary sync plugin."""

from ol_openedx_glossary_sync.constants import (
    DEFAULT_EXPORT_URL,
    DEFAULT_REQUEST_TIMEOUT,
    PREVIEW_CACHE_TIMEOUT,
)


def plugin_settings(settings):
    """Configure settings for the glossary sync plugin."""
    # .. setting_name: OL_GLOSSARY_SYNC_EXPORT_URL
    # .. setting_default: translate.wordpress.org glossary export URL
    # .. setting_description: URL template of the remote glossary export,
    # formatted with the remote locale as ``{locale}``.
    settings.OL_GLOSSARY_SYNC_EXPORT_URL = DEFAULT_EXPORT_URL

    # .. setting_name: OL_GLOSSARY_SYNC_REQUEST_TIMEOUT
    # .. setting_default: 30
    # .. setting_description: Seconds to wait for the remote export.
    settings.OL_GLOSSARY_SYNC_REQUEST_TIMEOUT = DEFAULT_REQUEST_TIMEOUT

    # .. setting_name: OL_GLOSSARY_SYNC_LOCALE_OVERRIDES
    # .. setting_default: {}
    # .. setting_description: Local to remote locale mappings added to the
    # built-in ones, e.g. {"es": "es-mx"}.
    settings.OL_GLOSSARY_SYNC_LOCALE_OVERRIDES = {}

    # .. setting_name: OL_GLOSSARY_SYNC_SERVICE_WORKER_USERNAME
    # .. setting_default: ""
    # .. setting_description: The username imported entries are credited to
    # when the sync is not triggered by a signed-in user.
    settings.OL_GLOSSARY_SYNC_SERVICE_WORKER_USERNAME = ""

    # .. setting_name: OL_GLOSSARY_SYNC_PREVIEW_CACHE_TIMEOUT
    # .. setting_default: 86400
    # .. setting_description: Seconds a downloaded glossary preview is cached.
    settings.OL_GLOSSARY_SYNC_PREVIEW_CACHE_TIMEOUT = PREVIEW_CACHE_TIMEOUT
