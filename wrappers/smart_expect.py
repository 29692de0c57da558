from playwright.sync_api import expect as pw_expect, Page, Locator, APIResponse
from helpers.test_context import record_soft_failure
from wrappers.smart_locator import SmartLocator


class SmartExpect:
    """
    Wrapper around Playwright's expect().

    In hard mode (default) a failed matcher raises AssertionError as usual.
    In soft mode the failure is recorded in the test context and the call
    returns, so the remaining checks of a verification routine still run.
    Recorded failures fail the test once its body has finished.
    """

    def __init__(self, actual, soft: bool = False):
        self.soft = soft

        if isinstance(actual, SmartLocator):
            self.label = actual.cache_key
            unwrapped = actual.locator
        elif isinstance(actual, Locator):
            self.label = str(actual)
            unwrapped = actual
        elif isinstance(actual, Page):
            self.label = "page"
            unwrapped = actual
        elif isinstance(actual, APIResponse):
            self.label = "response"
            unwrapped = actual
        else:
            raise ValueError(f"Unsupported type: {type(actual)}")

        self._inner = pw_expect(unwrapped)

    def __getattr__(self, item):
        target = getattr(self._inner, item)

        if callable(target) and (item.startswith("to_") or item.startswith("not_to_")):
            def wrapper(*args, **kwargs):
                try:
                    return target(*args, **kwargs)
                except AssertionError as e:
                    if not self.soft:
                        raise
                    record_soft_failure(f"{self.label} {item}: {e}")
                    return None
            return wrapper
        return target

    def __dir__(self):
        return dir(self._inner)

# ---------------- helpers ---------------- #

def expect(actual):
    """Hard assertion: works with SmartLocator or native Playwright objects."""
    return SmartExpect(actual)


def soft_expect(actual):
    """Soft assertion: failures are collected and reported at the end of the test."""
    return SmartExpect(actual, soft=True)
