"""
Tasks for the ol-openedx-glossary-sync plugin.
"""

from celery import shared_task  # pylint: disable=import-error
from celery.utils.log import get_task_logger
from django.contrib.auth import get_user_model

from ol_openedx_glossary_sync.api import sync_glossaries

User = get_user_model()
logger = get_task_logger(__name__)


@shared_task(name="async_sync_glossaries")
def async_sync_glossaries(locales, user_id=None):
    """
    Sync glossaries for the given locales in a worker.

    Returns:
        dict: {"failed": bool, "counts": {locale: count or None}}
    """
    user = User.objects.filter(id=user_id).first() if user_id else None
    logger.info("Starting glossary sync for locales %s", ", ".join(locales))

    result = sync_glossaries(locales, user=user)
    if result.failed:
        logger.error(
            "Glossary sync failed for locales %s", ", ".join(result.failed_locales)
        )

    logger.info("Finished glossary sync, %s entries imported", result.total_imported)
    return {"failed": result.failed, "counts": result.counts()}
