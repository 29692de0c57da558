from playwright.sync_api import Page
from models.translations import Translations
from pages.app_chrome import AppChrome
from utils.price_utils import price_pattern
from wrappers.smart_expect import expect, soft_expect
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


class InventoryItemPage(SmartPage):
    """Details page of a single inventory item."""

    def __init__(self, page: Page, config: dict, translations: Translations):
        super().__init__(page, config, translations)
        self.chrome = AppChrome(self)

        # Locators
        self.header_label = SmartLocator(self, ".header_label")
        self.back_button = SmartLocator(self, ".inventory_details_back_button")
        self.item_image = SmartLocator(self, ".inventory_details_img")
        self.item_name = SmartLocator(self, ".inventory_details_name")
        self.item_description = SmartLocator(self, ".inventory_details_desc")
        self.item_price = SmartLocator(self, ".inventory_details_price")
        self.add_to_cart_button = SmartLocator(self, ".inventory_details_desc_container .btn_primary")
        self.remove_button = SmartLocator(self, ".inventory_details_desc_container .btn_secondary")

    def click_add_to_cart(self):
        expect(self.add_to_cart_button).to_be_visible()
        self.add_to_cart_button.click()

    def click_remove(self):
        self.verify_remove_button_is_visible()
        self.remove_button.click()

    def verify_remove_button_is_visible(self):
        expect(self.remove_button).to_be_visible()
        expect(self.remove_button).to_have_text(self.translations.buttons.remove_btn)

    def click_back(self):
        expect(self.back_button).to_be_visible()
        self.back_button.click()

    def verify_item_page(self, item_name: str, add_to_cart: bool = True, cart_count: int = 0):
        """
        Verifies the details page of an item against the translation record.

        Args:
            item_name: Name of the item the page should show.
            add_to_cart: True if the 'Add to cart' button is expected,
                False if the item is already in the cart ('Remove' button).
            cart_count: Expected number on the cart badge.
        """
        item = self.translations.find_item(item_name)
        buttons = self.translations.buttons

        self.chrome.verify_page_header(cart_count)

        expect(self.item_name).to_be_visible()
        soft_expect(self.item_name).to_have_text(item.name)

        expect(self.item_description).to_be_visible()
        soft_expect(self.item_description).to_have_text(item.description)

        expect(self.item_price).to_be_visible()
        soft_expect(self.item_price).to_have_text(item.price)
        soft_expect(self.item_price).to_have_text(price_pattern(self.translations.general.currency_symbol))

        expect(self.item_image).to_be_visible()
        soft_expect(self.item_image).to_have_attribute("src", item.img)

        if add_to_cart:
            expect(self.add_to_cart_button).to_be_visible()
            soft_expect(self.add_to_cart_button).to_have_text(buttons.add_to_cart_btn)
        else:
            expect(self.remove_button).to_be_visible()
            soft_expect(self.remove_button).to_have_text(buttons.remove_btn)

        expect(self.back_button).to_be_visible()
        soft_expect(self.back_button).to_have_text(buttons.back_btn)

        self.chrome.verify_footer()
