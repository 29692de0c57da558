from urllib.parse import urljoin
from playwright.sync_api import Page
from helpers.test_context import get_current_translations
from helpers.translations_helper import load_shared_constants
from models.translations import Translations


class SmartPage:
    """
    SmartPage is a wrapper around Playwright's Page that provides:
    - Transparent proxying of page methods (e.g. .title(), .wait_for_url()).
    - Access to the scenario translation record (the running scenario's record
      when none is passed) and the shared constants.
    - A keyword used by '#KEYWORD' SmartLocator selectors.
    - Navigation relative to the configured base url.
    """

    def __init__(self, page: Page, config: dict, translations: Translations = None):
        self.page = page
        self.config = config
        self.translations = translations if translations is not None else get_current_translations()
        self.shared = load_shared_constants(config.get("locales_dir"))
        self.keyword = None
        self.class_name = self.__class__.__name__

    def set_keyword(self, keyword: str):
        if not keyword:
            raise ValueError(f"{self.class_name}: keyword must not be empty")
        self.keyword = keyword

    def get_keyword(self):
        return self.keyword

    def clear_keyword(self):
        self.keyword = None

    def url_for(self, path: str = "") -> str:
        return urljoin(self.config["base_url"], path)

    def goto(self, path: str = "", **kwargs):
        url = self.url_for(path)
        print(f"[INFO] {self.class_name} → {url}")
        return self.page.goto(url, **kwargs)

    def __getattr__(self, item):
        if item == "page":
            raise AttributeError(item)
        return getattr(self.page, item)

    def __str__(self):
        return f"<SmartPage {self.__class__.__name__}>"

    __repr__ = __str__
