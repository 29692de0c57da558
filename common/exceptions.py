class TranslationError(Exception):
    """Base class for locale data loading errors."""


class TranslationNotFoundError(TranslationError):
    """Raised when a locale file does not exist."""

    def __init__(self, locale: str, path):
        self.locale = locale
        self.path = path
        super().__init__(f"No locale file for '{locale}': {path}")


class MalformedTranslationError(TranslationError):
    """Raised when a locale file cannot be parsed or does not fit the schema."""

    def __init__(self, path, errors: list[str]):
        self.path = path
        self.errors = errors
        details = "\n".join(f"  - {error}" for error in errors)
        super().__init__(f"Malformed locale file {path}:\n{details}")


class SoftAssertionError(AssertionError):
    """Raised after a test body when soft assertions recorded failures."""

    def __init__(self, failures: list[str]):
        self.failures = failures
        details = "\n".join(f"{i}. {failure}" for i, failure in enumerate(failures, 1))
        super().__init__(f"{len(failures)} soft assertion(s) failed:\n{details}")
