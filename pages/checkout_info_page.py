import re
from playwright.sync_api import Page
from models.translations import Translations
from pages.app_chrome import AppChrome
from wrappers.smart_expect import expect, soft_expect
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


CHECKOUT_INFO_URL = re.compile(r"/checkout-step-one\.html$")


class CheckoutInfoPage(SmartPage):
    """'Checkout: Your Information' form."""

    def __init__(self, page: Page, config: dict, translations: Translations):
        super().__init__(page, config, translations)
        self.chrome = AppChrome(self)

        # Locators
        self.subheader = SmartLocator(self, ".subheader")
        self.first_name_input = SmartLocator(self, "#first-name")
        self.last_name_input = SmartLocator(self, "#last-name")
        self.zip_input = SmartLocator(self, "#postal-code")
        self.error_message = SmartLocator(self, "//h3[@data-test='error']")
        self.cancel_button = SmartLocator(self, ".cart_cancel_link")
        self.continue_button = SmartLocator(self, "//input[@type='submit']")

    def verify_redirection_to_checkout_info_page(self):
        expect(self.page).to_have_url(CHECKOUT_INFO_URL)
        expect(self.subheader).to_have_text(self.translations.headers.checkout_info)

    def verify_checkout_info_page(self, cart_count: int):
        checkout_info = self.translations.checkout_info
        buttons = self.translations.buttons

        # ------------ Header ------------ #
        self.chrome.verify_page_header(cart_count)

        soft_expect(self.subheader).to_be_visible()
        soft_expect(self.subheader).to_have_text(self.translations.headers.checkout_info)

        # ------------ Input fields ------------ #
        soft_expect(self.first_name_input).to_be_visible()
        soft_expect(self.first_name_input).to_have_attribute("placeholder", checkout_info.first_name)
        soft_expect(self.last_name_input).to_be_visible()
        soft_expect(self.last_name_input).to_have_attribute("placeholder", checkout_info.last_name)
        soft_expect(self.zip_input).to_be_visible()
        soft_expect(self.zip_input).to_have_attribute("placeholder", checkout_info.zip)

        # ------------ Buttons ------------ #
        expect(self.cancel_button).to_be_visible()
        soft_expect(self.cancel_button).to_have_text(buttons.cancel_btn)
        expect(self.continue_button).to_be_visible()
        # The continue button is an <input>, its label is the value attribute
        soft_expect(self.continue_button).to_have_value(buttons.continue_btn)

        # ------------ Footer ------------ #
        self.chrome.verify_footer()

    def enter_first_name(self, first_name: str):
        expect(self.first_name_input).to_be_visible()
        self.first_name_input.fill(first_name)

    def enter_last_name(self, last_name: str):
        expect(self.last_name_input).to_be_visible()
        self.last_name_input.fill(last_name)

    def enter_zip(self, zip_code: str):
        expect(self.zip_input).to_be_visible()
        self.zip_input.fill(zip_code)

    def fill_checkout_info(self, first_name: str, last_name: str, zip_code: str):
        self.enter_first_name(first_name)
        self.enter_last_name(last_name)
        self.enter_zip(zip_code)

    def verify_error_message(self, message: str):
        expect(self.error_message).to_be_visible()
        expect(self.error_message).to_have_text(message)

    def click_cancel(self):
        expect(self.cancel_button).to_be_visible()
        self.cancel_button.click()

    def click_continue(self):
        expect(self.continue_button).to_be_visible()
        self.continue_button.click()
