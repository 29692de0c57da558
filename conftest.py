import json
from pathlib import Path
import pytest
import time
from playwright.sync_api import sync_playwright
from common.constants import LOCALE_NAMES, STANDARD_USER
from common.exceptions import SoftAssertionError
from helpers.test_context import check_soft_failures, reset_context, set_current_locale
from helpers.translations_helper import load_shared_constants, load_translations
from utils.file_utils import clean_directory
from utils.text_utils import safe_filename


ROOT_DIR = Path(__file__).resolve().parent
REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"
E2E_DIR = ROOT_DIR / "tests" / "e2e"


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
with open(ROOT_DIR / "config.json", encoding="utf-8") as f:
    CONFIG = json.load(f)


def str_to_bool(value) -> bool:
    return str(value).strip().lower() == "true"


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--locale",
        action="append",
        default=[],
        help="Locale to run scenarios with (repeatable). Overrides 'locales' from config.json",
    )

    parser.addoption(
        "--highlight",
        action="store",
        choices=["true", "false"],
        help="Highlight elements during tests",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        choices=["true", "false"],
        help="Capture screenshot on test failure",
    )

    parser.addoption(
        "--step_delay",
        action="store",
        help="Delay (in ms) between steps",
    )

    parser.addoption(
        "--record_trace",
        action="store",
        choices=["true", "false"],
        help="Record a Playwright trace for every test",
    )


# ---------------------------------------------------------------------------
# Config fixture
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def config(pytestconfig):
    cfg = CONFIG.copy()

    # Browser and headless (pytest-playwright options)
    browsers = pytestconfig.getoption("browser", default=None)
    if browsers:
        cfg["browser"] = browsers[0]
    if pytestconfig.getoption("headed", default=False):
        cfg["headless"] = False

    # Base url (pytest-base-url option)
    base_url = pytestconfig.getoption("base_url", default=None)
    if base_url:
        cfg["base_url"] = base_url

    # Boolean switches
    for name, option in (("highlight", "highlight"),
                         ("screenshot_on_error", "screenshot_on_error"),
                         ("trace", "record_trace")):
        value = pytestconfig.getoption(option)
        if value is not None:
            cfg[name] = str_to_bool(value)
        else:
            cfg[name] = bool(cfg.get(name, False))

    # Step delay
    step_delay = pytestconfig.getoption("step_delay")
    if step_delay is not None:
        try:
            cfg["step_delay"] = float(step_delay)
        except ValueError:
            cfg["step_delay"] = 0.0
    else:
        cfg["step_delay"] = float(cfg.get("step_delay") or 0.0)

    return cfg


# ---------------------------------------------------------------------------
# Locale dimension: every test using the 'locale' fixture runs once per locale
# ---------------------------------------------------------------------------
def pytest_generate_tests(metafunc):
    if "locale" in metafunc.fixturenames and not _parametrized_by_test(metafunc, "locale"):
        locales = metafunc.config.getoption("locale") or CONFIG["locales"]
        ids = [LOCALE_NAMES.get(locale, locale) for locale in locales]
        metafunc.parametrize("locale", locales, ids=ids)


def _parametrized_by_test(metafunc, name) -> bool:
    """True when the test pins the argument with its own parametrize marker."""
    for marker in metafunc.definition.iter_markers("parametrize"):
        argnames = marker.args[0] if marker.args else marker.kwargs.get("argnames", "")
        if isinstance(argnames, str):
            argnames = [argname.strip() for argname in argnames.split(",")]
        if name in argnames:
            return True
    return False


@pytest.fixture
def translations(locale, config):
    """Translation record of the current locale, loaded once per test run."""
    record = load_translations(locale, config.get("locales_dir"))
    set_current_locale(locale, record)
    yield record
    set_current_locale(None)


@pytest.fixture(scope="session")
def shared(config):
    return load_shared_constants(config.get("locales_dir"))


@pytest.fixture(scope="session")
def standard_user(shared):
    return shared.credentials.for_user(STANDARD_USER)


@pytest.fixture(autouse=True)
def reset_test_context():
    reset_context()
    yield
    reset_context()


# ---------------------------------------------------------------------------
# Playwright fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, config):
    """Launch a browser based on config."""
    browser_name = config.get("browser", "chromium")
    headless = config.get("headless", True)
    browser = getattr(playwright_instance, browser_name).launch(headless=headless)
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def context(browser, config, locale, request):
    """New browser context per test, using the test locale."""
    context = browser.new_context(locale=locale, viewport=config.get("viewport"))
    context.set_default_timeout(config.get("timeout", 30000))

    if config.get("trace"):
        context.tracing.start(screenshots=True, snapshots=True, sources=True)

    yield context

    if config.get("trace"):
        trace_path = REPORT_DIR / f"{safe_filename(request.node.name)}-trace.zip"
        context.tracing.stop(path=str(trace_path))
        print(f"[INFO] Trace saved → {trace_path}")
    context.close()


@pytest.fixture(scope="function")
def page(context, config):
    """New page per test."""
    page = context.new_page()
    page.set_default_timeout(config.get("timeout", 30000))
    yield page
    page.close()


# ---------------------------------------------------------------------------
# Session hooks
# ---------------------------------------------------------------------------
@pytest.hookimpl(tryfirst=True)
def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    config.addinivalue_line("markers", "e2e: browser scenario against the demo site")
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    config.option.htmlpath = str(REPORT_FILE)
    print(f"[INFO] HTML report → {REPORT_FILE}")


def pytest_sessionstart(session):
    """Delete old report & screenshots before the session begins."""
    clean_directory(REPORT_DIR)


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config, items):
    """Scenarios under tests/e2e need a browser and the network."""
    for item in items:
        if E2E_DIR in Path(item.path).resolve().parents:
            item.add_marker(pytest.mark.e2e)


# ---------------------------------------------------------------------------
# Soft assertions: fail the test after its body if any were recorded
# ---------------------------------------------------------------------------
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_call(item):
    outcome = yield

    try:
        check_soft_failures(outcome.excinfo is not None)
    except SoftAssertionError as e:
        outcome.force_exception(e)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()

    # Run only when the test itself failed
    if rep.when != "call" or not rep.failed:
        return

    try:
        opt_value = item.config.getoption("screenshot_on_error")
        screenshot_enabled = str_to_bool(opt_value) if opt_value is not None else CONFIG.get("screenshot_on_error", True)

        if not screenshot_enabled:
            return

        # Import safely inside hook (pytest loads this very early)
        from playwright.sync_api import Page

        page = item.funcargs.get("page", None)
        if not page or not isinstance(page, Page):
            return

        from datetime import datetime

        # Build unique name: {test-name}-yyyy-MM-dd-hh-mm-ss-sss.png
        ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
        screenshot_name = f"{safe_filename(item.name)}-{ts}.png"
        screenshot_path = REPORT_DIR / screenshot_name

        # Give browser time to render any failure overlay
        time.sleep(0.2)

        page.screenshot(path=str(screenshot_path), full_page=True)
        print(f"[INFO] Screenshot saved → {screenshot_path}")

        # Attach to pytest-html report
        if item.config.pluginmanager.hasplugin("html"):
            import pytest_html

            rel_path = screenshot_path.name
            link_html = f'<a href="{rel_path}" target="_blank">Open Screenshot</a>'
            extras = getattr(rep, "extras", [])
            extras.append(pytest_html.extras.html(link_html))
            extras.append(pytest_html.extras.image(rel_path))
            rep.extras = extras

    except Exception as e:
        print(f"[WARN] Screenshot capture failed: {e}")
