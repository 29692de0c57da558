import json
import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ValidationError

from common.constants import LOCALES_DIR, LOCALES_DIR_ENV, SHARED_FILE_NAME
from common.exceptions import MalformedTranslationError, TranslationNotFoundError
from models.translations import SharedConstants, Translations


def get_locales_dir(locales_dir=None) -> Path:
    """
    Returns the directory with locale files, following priority:
        1. Explicit locales_dir argument
        2. SAUCE_LOCALES_DIR environment variable
        3. locales/ folder in the project root
    """
    if locales_dir:
        return Path(locales_dir)

    env_value = os.environ.get(LOCALES_DIR_ENV)
    if env_value:
        return Path(env_value)

    return LOCALES_DIR


def available_locales(locales_dir=None) -> list[str]:
    """Locale codes that have a file in the locales directory."""
    directory = get_locales_dir(locales_dir)
    return sorted(path.stem for path in directory.glob("*.json") if path.name != SHARED_FILE_NAME)


def load_translations(locale: str, locales_dir=None) -> Translations:
    """
    Load and validate the translation record for a locale.

    Raises:
        TranslationNotFoundError: locales/<locale>.json does not exist.
        MalformedTranslationError: the file is not valid JSON or does not
            match the Translations schema.
    """
    return _load_translations(locale, get_locales_dir(locales_dir))


def load_shared_constants(locales_dir=None) -> SharedConstants:
    """Load the locale independent constants from shared.json."""
    return _load_shared_constants(get_locales_dir(locales_dir))


def clear_cache():
    _load_translations.cache_clear()
    _load_shared_constants.cache_clear()


@lru_cache(maxsize=None)
def _load_translations(locale: str, locales_dir: Path) -> Translations:
    path = locales_dir / f"{locale}.json"

    if not path.is_file():
        raise TranslationNotFoundError(locale, path)

    return _parse_file(path, Translations)


@lru_cache(maxsize=None)
def _load_shared_constants(locales_dir: Path) -> SharedConstants:
    path = locales_dir / SHARED_FILE_NAME

    if not path.is_file():
        raise TranslationNotFoundError("shared", path)

    return _parse_file(path, SharedConstants)


def _parse_file(path: Path, model: type[BaseModel]):
    try:
        with open(path, encoding="utf-8") as f:
            raw_data = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedTranslationError(path, [f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"]) from e

    try:
        record = model.model_validate(raw_data)
    except ValidationError as e:
        raise MalformedTranslationError(path, format_validation_errors(e)) from e

    print(f"[INFO] Loaded {model.__name__} from {path}")
    return record


def format_validation_errors(error: ValidationError) -> list[str]:
    """Turns pydantic errors into 'field.path: message' lines."""
    messages = []

    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        messages.append(f"{location}: {item['msg']}")

    return messages
