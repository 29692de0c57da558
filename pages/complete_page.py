from playwright.sync_api import Page
from models.translations import Translations
from pages.app_chrome import AppChrome
from wrappers.smart_expect import expect, soft_expect
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


class CompletePage(SmartPage):

    def __init__(self, page: Page, config: dict, translations: Translations):
        super().__init__(page, config, translations)
        self.chrome = AppChrome(self)

        # Locators
        self.subheader = SmartLocator(self, ".subheader")
        self.complete_header = SmartLocator(self, ".complete-header")
        self.complete_text = SmartLocator(self, ".complete-text")
        self.pony_express_image = SmartLocator(self, ".pony_express")

    def verify_redirection_to_complete_page(self):
        general = self.translations.general

        # The cart is emptied once the order is placed
        self.chrome.verify_page_header(0)

        soft_expect(self.subheader).to_be_visible()
        soft_expect(self.subheader).to_have_text(self.translations.headers.finish)

        expect(self.complete_header).to_be_visible()
        soft_expect(self.complete_header).to_have_text(general.thank_you_text)

        expect(self.complete_text).to_be_visible()
        soft_expect(self.complete_text).to_have_text(general.order_text)

        expect(self.pony_express_image).to_be_visible()
        soft_expect(self.pony_express_image).to_have_attribute("src", self.shared.footer.pony_express_src)
