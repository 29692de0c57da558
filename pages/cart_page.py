from playwright.sync_api import Page
from models.translations import Translations
from pages.app_chrome import AppChrome
from wrappers.smart_expect import expect, soft_expect
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


class CartPage(SmartPage):

    def __init__(self, page: Page, config: dict, translations: Translations):
        super().__init__(page, config, translations)
        self.chrome = AppChrome(self)

        # Locators
        self.subheader = SmartLocator(self, ".subheader")
        self.qty_column = SmartLocator(self, ".cart_quantity_label")
        self.desc_column = SmartLocator(self, ".cart_desc_label")
        self.cart_items = SmartLocator(self, ".cart_item")
        self.continue_shopping_button = SmartLocator(self, "//a[@class='btn_secondary' and @href='./inventory.html']")
        self.checkout_button = SmartLocator(self, ".checkout_button")

    def validate_cart_items(self, expected_items: list[str] = None):
        """
        Checks the cart rows against the record, in order.
        With no expected items the cart must be empty.
        """
        if not expected_items:
            expect(self.cart_items).to_have_count(0)
            return

        expect(self.cart_items).to_have_count(len(expected_items))

        for index, name in enumerate(expected_items):
            item = self.translations.find_item(name)
            row = self.cart_items.nth(index)

            expect(row.locator(".inventory_item_name")).to_have_text(item.name)
            soft_expect(row.locator(".inventory_item_desc")).to_have_text(item.description)
            soft_expect(row.locator(".inventory_item_price")).to_have_text(item.price)
            soft_expect(row.locator(".cart_quantity")).to_have_text("1")

    def verify_cart_page(self, cart_count: int):
        general = self.translations.general

        # ------------ Header ------------ #
        self.chrome.verify_page_header(cart_count)

        soft_expect(self.subheader).to_be_visible()
        soft_expect(self.subheader).to_have_text(self.translations.headers.your_cart)

        # ------------ Columns ------------ #
        soft_expect(self.qty_column).to_be_visible()
        soft_expect(self.qty_column).to_have_text(general.qty_text)
        soft_expect(self.desc_column).to_be_visible()
        soft_expect(self.desc_column).to_have_text(general.desc_text)

        # ------------ Buttons ------------ #
        expect(self.continue_shopping_button).to_be_visible()
        soft_expect(self.continue_shopping_button).to_have_text(self.translations.buttons.continue_shopping_btn)
        expect(self.checkout_button).to_be_visible()
        soft_expect(self.checkout_button).to_have_text(self.shared.buttons.checkout_btn)

        # ------------ Footer ------------ #
        self.chrome.verify_footer()

    def click_continue_shopping(self):
        expect(self.continue_shopping_button).to_be_visible()
        self.continue_shopping_button.click()

    def proceed_to_checkout(self):
        expect(self.checkout_button).to_be_visible()
        self.checkout_button.click()
