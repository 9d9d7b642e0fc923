"""
Models for ol-openedx-glossary-sync plugin
"""

from django.conf import settings
from django.db import models
from model_utils.models import TimeStampedModel


class TranslationLocale(TimeStampedModel):
    """
    A locale the platform is translated into.

    Glossaries can only be created for active locales.
    """

    locale = models.CharField(
        max_length=20,
        unique=True,
        help_text="Locale slug (e.g., 'pt', 'de', 'es-mx')",
    )
    english_name = models.CharField(max_length=100)
    is_active = models.BooleanField(default=True)

    class Meta:
        app_label = "ol_openedx_glossary_sync"
        ordering = ["english_name"]

    def __str__(self):
        return f"{self.english_name} ({self.locale})"


class Glossary(TimeStampedModel):
    """
    Locale level glossary that imported entries belong to.
    """

    translation_locale = models.ForeignKey(
        TranslationLocale,
        on_delete=models.CASCADE,
        related_name="glossaries",
    )
    description = models.TextField(blank=True)

    class Meta:
        app_label = "ol_openedx_glossary_sync"
        verbose_name_plural = "Glossaries"

    def __str__(self):
        return f"{self.translation_locale.locale} Glossary"


class GlossaryEntry(TimeStampedModel):
    """
    A term and its translation within a glossary.
    """

    glossary = models.ForeignKey(
        Glossary, on_delete=models.CASCADE, related_name="entries"
    )
    term = models.CharField(max_length=255)
    translation = models.CharField(max_length=255)
    part_of_speech = models.CharField(max_length=255, blank=True)
    comment = models.TextField(blank=True)
    # Imports may be credited to a fixed default identity with no user row
    last_edited_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        db_constraint=False,
        related_name="+",
    )

    class Meta:
        app_label = "ol_openedx_glossary_sync"
        verbose_name_plural = "Glossary entries"
        ordering = ["id"]

    def __str__(self):
        return f"{self.term} → {self.translation}"


class GlossarySyncOption(TimeStampedModel):
    """
    Key-value storage for glossary sync bookkeeping.
    """

    key = models.CharField(max_length=191, unique=True)
    value = models.JSONField(default=dict, blank=True)

    class Meta:
        app_label = "ol_openedx_glossary_sync"

    def __str__(self):
        return self.key
