from playwright.sync_api import Page
from models.translations import InventoryItem, Translations
from pages.app_chrome import AppChrome
from utils.price_utils import price_pattern, sort_inventory
from wrappers.smart_expect import expect, soft_expect
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage

ITEM_XPATH = "xpath=//div[@class='inventory_item'][.//div[@class='inventory_item_name' and normalize-space(text())='#KEYWORD']]"


class InventoryPage(SmartPage):

    def __init__(self, page: Page, config: dict, translations: Translations):
        super().__init__(page, config, translations)
        self.chrome = AppChrome(self)

        # Selectors
        self.header_secondary_container = SmartLocator(self, ".header_secondary_container")
        self.peek_robot = SmartLocator(self, ".peek")
        self.product_label = SmartLocator(self, ".product_label")
        self.product_sort_container = SmartLocator(self, ".product_sort_container")
        self.sort_options = SmartLocator(self, "option", parent=self.product_sort_container)
        self.selected_sort_option = SmartLocator(self, "option:checked", parent=self.product_sort_container)
        self.inventory_list = SmartLocator(self, "#inventory_container .inventory_list")
        self.inventory_items = SmartLocator(self, ".inventory_item", parent=self.inventory_list)
        self.item_names = SmartLocator(self, ".inventory_item_label .inventory_item_name", parent=self.inventory_list)
        self.item_descriptions = SmartLocator(self, ".inventory_item_label .inventory_item_desc", parent=self.inventory_list)
        self.item_prices = SmartLocator(self, ".pricebar .inventory_item_price", parent=self.inventory_list)
        self.item_images = SmartLocator(self, "img.inventory_item_img", parent=self.inventory_list)
        self.item_buttons = SmartLocator(self, ".pricebar button", parent=self.inventory_list)

        # Item scoped selectors, see set_keyword()
        self.item_name_link = SmartLocator(self, "xpath=//div[@class='inventory_item_name' and normalize-space(text())='#KEYWORD']")
        self.item_add_to_cart_button = SmartLocator(self, f"{ITEM_XPATH}//button[contains(@class, 'btn_primary')]")
        self.item_remove_button = SmartLocator(self, f"{ITEM_XPATH}//button[contains(@class, 'btn_secondary')]")

    def verify_redirection_to_inventory_page(self):
        self.page.wait_for_url(f"**/{self.config['inventory_path']}")
        expect(self.inventory_list).to_be_visible()

    def sort_inventory(self, label: str) -> list[InventoryItem]:
        """
        Expected item order for a sort dropdown label.
        Raises ValueError if the label is not one of the record's sort options.
        """
        criterion = self.translations.sort_options.criterion_for(label)
        return sort_inventory(self.translations.inventory, criterion, self.translations.general.currency_symbol)

    def verify_items_on_list(self, label: str):
        expect(self.inventory_list).to_be_visible()
        expect(self.inventory_items).to_have_count(len(self.translations.inventory))

        currency_symbol = self.translations.general.currency_symbol
        add_to_cart_text = self.translations.buttons.add_to_cart_btn

        for index, item in enumerate(self.sort_inventory(label)):
            expect(self.item_names.nth(index)).to_have_text(item.name)
            expect(self.item_descriptions.nth(index)).to_have_text(item.description)
            expect(self.item_prices.nth(index)).to_have_text(item.price)
            expect(self.item_prices.nth(index)).to_have_text(price_pattern(currency_symbol))
            expect(self.item_images.nth(index)).to_have_attribute("src", item.img)
            expect(self.item_buttons.nth(index)).to_have_text(add_to_cart_text)

    def verify_default_inventory_page(self, cart_count: int = 0):
        sort_options = self.translations.sort_options

        self.chrome.verify_page_header(cart_count)

        soft_expect(self.peek_robot).to_be_visible()
        soft_expect(self.product_label).to_have_text(self.translations.headers.products)
        soft_expect(self.product_sort_container).to_be_visible()
        soft_expect(self.selected_sort_option).to_have_text(sort_options.az)
        soft_expect(self.sort_options).to_have_text(sort_options.labels())

        self.verify_items_on_list(sort_options.az)

        self.chrome.verify_footer()

    def select_product_sort(self, label: str):
        expect(self.product_sort_container).to_be_visible()
        self.product_sort_container.select_option(label=label)

    def _select_item(self, item_name: str):
        # Fail fast on names the record does not know
        self.translations.find_item(item_name)
        self.set_keyword(item_name)

    def open_item_details_page(self, item_name: str):
        self._select_item(item_name)
        expect(self.item_name_link).to_be_visible()
        self.item_name_link.click()

    def add_item_to_cart(self, item_name: str):
        self._select_item(item_name)
        expect(self.item_add_to_cart_button).to_be_visible()
        self.item_add_to_cart_button.click()

    def add_items_to_cart(self, item_names: list[str]):
        for item_name in item_names:
            self.add_item_to_cart(item_name)

    def remove_item_from_cart(self, item_name: str):
        self._select_item(item_name)
        expect(self.item_remove_button).to_be_visible()
        self.item_remove_button.click()

    def verify_remove_is_visible(self, item_name: str):
        self._select_item(item_name)
        expect(self.item_remove_button).to_be_visible()
        expect(self.item_remove_button).to_have_text(self.translations.buttons.remove_btn)
