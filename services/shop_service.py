from playwright.sync_api import Page
from common.constants import STANDARD_USER
from helpers.translations_helper import load_shared_constants
from models.translations import Translations
from pages.cart_page import CartPage
from pages.checkout_info_page import CheckoutInfoPage
from pages.checkout_overview_page import CheckoutOverviewPage
from pages.inventory_page import InventoryPage
from pages.login_page import LoginPage


class ShopService:
    """Multi page journeys reused as the 'Given' part of scenarios."""

    def __init__(self, page: Page, config: dict, translations: Translations):
        self.page = page
        self.config = config
        self.translations = translations

    def login(self, username: str, password: str):
        login_page = LoginPage(self.page, self.config, self.translations)
        login_page.login(username, password)

    def login_as(self, username: str = STANDARD_USER):
        shared = load_shared_constants(self.config.get("locales_dir"))
        credential = shared.credentials.for_user(username)
        self.login(credential.username, credential.password)

    def add_items_and_open_cart(self, item_names: list[str]) -> CartPage:
        inventory_page = InventoryPage(self.page, self.config, self.translations)
        inventory_page.verify_default_inventory_page()
        inventory_page.add_items_to_cart(item_names)
        inventory_page.chrome.verify_cart_count(len(item_names))
        inventory_page.chrome.click_cart_icon()

        cart_page = CartPage(self.page, self.config, self.translations)
        cart_page.verify_cart_page(len(item_names))
        cart_page.validate_cart_items(item_names)
        return cart_page

    def open_checkout_info(self, item_names: list[str]) -> CheckoutInfoPage:
        self.add_items_and_open_cart(item_names).proceed_to_checkout()

        checkout_info_page = CheckoutInfoPage(self.page, self.config, self.translations)
        checkout_info_page.verify_checkout_info_page(len(item_names))
        return checkout_info_page

    def open_checkout_overview(self, item_names: list[str]) -> CheckoutOverviewPage:
        customer = self.translations.credentials.valid_checkout_info
        checkout_info_page = self.open_checkout_info(item_names)
        checkout_info_page.fill_checkout_info(customer.first_name, customer.last_name, customer.zip)
        checkout_info_page.click_continue()

        checkout_overview_page = CheckoutOverviewPage(self.page, self.config, self.translations)
        checkout_overview_page.verify_checkout_overview_page(len(item_names))
        return checkout_overview_page
