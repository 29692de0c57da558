import pytest
from unittest.mock import Mock
from helpers.translations_helper import clear_cache, load_translations


class FakeLocators:
    """One Mock per selector path, so repeated page.locator(selector) calls return the same object."""

    def __init__(self):
        self.by_selector = {}

    def get(self, selector):
        if selector not in self.by_selector:
            locator = Mock(name=selector)
            locator.locator.side_effect = lambda child, parent=selector: self.get(f"{parent} >> {child}")
            locator.nth.side_effect = lambda index, parent=selector: self.get(f"{parent} >> nth={index}")
            self.by_selector[selector] = locator
        return self.by_selector[selector]


class ExpectRecorder:
    """Stands in for playwright's expect(): records every matcher call and fails on demand."""

    def __init__(self):
        self.calls = []
        self.failures = {}

    def __call__(self, target):
        return FakeAssertions(self, target)

    def fail_on(self, target, matcher, message="mismatch"):
        self.failures[(id(target), matcher)] = message

    def calls_for(self, target):
        return [(matcher, args) for recorded, matcher, args in self.calls if recorded is target]


class FakeAssertions:

    def __init__(self, recorder, target):
        self._recorder = recorder
        self._target = target

    def __getattr__(self, matcher):
        def assertion(*args, **kwargs):
            self._recorder.calls.append((self._target, matcher, args))
            message = self._recorder.failures.get((id(self._target), matcher))
            if message:
                raise AssertionError(message)
        return assertion


@pytest.fixture
def fake_locators():
    return FakeLocators()


@pytest.fixture
def fake_page(fake_locators):
    page = Mock(name="page")
    page.locator.side_effect = fake_locators.get
    return page


@pytest.fixture
def expect_recorder(monkeypatch):
    """Patch playwright.expect and its classes to avoid real browser calls."""
    recorder = ExpectRecorder()
    monkeypatch.setattr("wrappers.smart_expect.pw_expect", recorder)
    monkeypatch.setattr("wrappers.smart_expect.Locator", Mock)
    monkeypatch.setattr("wrappers.smart_expect.Page", Mock)
    return recorder


@pytest.fixture
def unit_config():
    return {
        "base_url": "https://www.saucedemo.com/",
        "login_path": "v1/index.html",
        "inventory_path": "v1/inventory.html",
        "highlight": False,
        "step_delay": 0,
    }


@pytest.fixture
def en_translations():
    clear_cache()
    return load_translations("en")
