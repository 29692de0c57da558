import inspect
import re
import time
from playwright.sync_api import Locator
from common.constants import KEYWORD_PLACEHOLDER
from utils.web_utils import highlight_element, reset_element_style

# Locator methods that touch the page; highlight and step delay apply to these only
ACTION_METHODS = {
    "check", "clear", "click", "dblclick", "drag_to", "fill", "focus", "hover", "press",
    "press_sequentially", "select_option", "set_checked", "set_input_files", "tap", "type", "uncheck",
}


class SmartLocator:
    """
    SmartLocator is a wrapper around Playwright's Locator that provides:
    - Transparent proxying of locator methods (e.g. .fill(), .click(), .nth()).
    - Keyword selectors: '#KEYWORD' in the selector is replaced with the
      owner's current keyword (for example an inventory item name).
    - Optional element highlight and step delay before every page interaction
      (click, fill, select_option, ...). Queries like .nth() pass straight through.
    - A readable label (Owner.field) used in assertion failure messages.
    """

    def __init__(self, owner, selector, parent=None):
        self.page = owner.page
        self.config = owner.config
        self.owner = owner
        self.selector = str(selector)
        self.parent = parent

        # Detect field name and source file
        self.field_name, self.source_file = self._get_field_info()

        # Unique key used in logs and failure messages
        self.cache_key = f"{self.owner.__class__.__name__}.{self.field_name}"

    def _get_field_info(self):
        stack = inspect.stack()
        for frame_info in stack:
            if frame_info.code_context:
                line = frame_info.code_context[0].strip()
                if "SmartLocator" in line and "self." in line:
                    match = re.match(r"self\.(\w+)\s*=\s*SmartLocator", line)
                    if match:
                        return match.group(1), frame_info.filename
        return "unknown_field", inspect.getfile(self.owner.__class__)

    def resolved_selector(self) -> str:
        keyword = self.owner.keyword

        if KEYWORD_PLACEHOLDER in self.selector:
            if not keyword:
                raise ValueError(f"{self.cache_key} needs a keyword for selector '{self.selector}'")
            return self.selector.replace(KEYWORD_PLACEHOLDER, keyword)
        return self.selector

    def _locator(self) -> Locator:
        if self.parent is not None:
            return self.parent.locator.locator(self.resolved_selector())
        return self.page.locator(self.resolved_selector())

    @property
    def locator(self) -> Locator:
        return self._locator()

    def __getattr__(self, item):
        target = getattr(self._locator(), item)

        if item in ACTION_METHODS and callable(target):
            def wrapper(*args, **kwargs):
                locator = self._locator()
                element_style = self._highlight_element_with_delay(locator)

                try:
                    return getattr(locator, item)(*args, **kwargs)
                finally:
                    self._restore_element_style(locator, element_style)
            return wrapper
        return target

    def __str__(self):
        try:
            selector = self.resolved_selector()
        except ValueError:
            selector = self.selector
        return f"<SmartLocator field='{self.field_name}' selector='{selector}'>"

    __repr__ = __str__

    def _highlight_element_with_delay(self, locator: Locator):
        step_delay_milliseconds = self.config.get("step_delay")

        try:
            step_delay_seconds = float(step_delay_milliseconds) / 1000.0
        except (TypeError, ValueError):
            step_delay_seconds = 0.0

        if self.config.get("highlight") and locator.count() == 1:
            element_style = highlight_element(locator)
            time.sleep(step_delay_seconds)
            return element_style

        elif step_delay_seconds > 0.0:
            time.sleep(step_delay_seconds)

        return None

    def _restore_element_style(self, locator: Locator, element_style):

        if self.config.get("highlight") and locator.count() == 1:
            reset_element_style(locator, element_style)
