"""Constants for glossary synchronization."""

# Remote export endpoint, formatted with the remote locale identifier
DEFAULT_EXPORT_URL = (
    "https://translate.wordpress.org/locale/{locale}/default/glossary/-export/"
)
DEFAULT_REQUEST_TIMEOUT = 30  # seconds
EXPORT_ACCEPT_HEADER = "text/csv"
HTTP_OK = 200

# Local locale -> remote locale where the two naming schemes diverge
REMOTE_LOCALE_OVERRIDES = {
    "pt": "pt-br",
    "zh": "zh-cn",
}

# CSV layout: en, <locale>, pos, description
GLOSSARY_COLUMN_COUNT = 4
MIN_HEADER_COLUMNS = 2
MIN_PREVIEW_COLUMNS = 2

# Keys in the settings store
OPTION_PREFIX = "ol_glossary_sync_"
IMPORT_TIMES_OPTION = f"{OPTION_PREFIX}import_times"
PREVIEW_CACHE_PREFIX = f"{OPTION_PREFIX}preview_"
PREVIEW_CACHE_TIMEOUT = 24 * 60 * 60  # 24 hours

# Identity used when nobody else can be credited with an import
DEFAULT_ACTOR_ID = 1

# Legacy per-locale result value for a hard failure
FAILED_SENTINEL = -1

# Plugin project types understood by edx_django_utils
PROJECT_TYPE_LMS = "lms.djangoapp"
PROJECT_TYPE_CMS = "cms.djangoapp"
SETTINGS_TYPE_COMMON = "common"
