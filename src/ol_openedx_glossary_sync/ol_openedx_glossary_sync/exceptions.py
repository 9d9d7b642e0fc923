"""Exceptions for the glossary sync plugin"""


class GlossarySyncError(Exception):
    """
    Base exception class for glossary sync errors
    """

    def __init__(self, message):
        # Messages may be lazy translation strings
        super().__init__(str(message))


class ConfigurationUnavailable(GlossarySyncError):
    """
    The glossary storage (its tables or models) is not available
    """
