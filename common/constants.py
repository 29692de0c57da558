from pathlib import Path

# Replaced with SmartPage.keyword inside SmartLocator selectors
KEYWORD_PLACEHOLDER = "#KEYWORD"

PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOCALES_DIR = PROJECT_ROOT / "locales"
LOCALES_DIR_ENV = "SAUCE_LOCALES_DIR"
SHARED_FILE_NAME = "shared.json"

# Display names of the locale dimension, used as test ids
LOCALE_NAMES = {
    "en": "English",
    "pt": "Portuguese",
}

STANDARD_USER = "standard_user"
