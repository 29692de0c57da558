from playwright.sync_api import Page
from models.translations import Translations
from pages.app_chrome import AppChrome
from utils.price_utils import format_summary_line, parse_price, sum_prices, summary_line_pattern
from wrappers.smart_expect import expect, soft_expect
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


class CheckoutOverviewPage(SmartPage):
    """'Checkout: Overview' page with the order items and the price summary."""

    def __init__(self, page: Page, config: dict, translations: Translations):
        super().__init__(page, config, translations)
        self.chrome = AppChrome(self)

        # Locators
        self.subheader = SmartLocator(self, ".subheader")
        self.qty_column = SmartLocator(self, ".cart_quantity_label")
        self.desc_column = SmartLocator(self, ".cart_desc_label")
        self.cart_items = SmartLocator(self, ".cart_item")
        self.payment_info_section = SmartLocator(self, "(//*[@class='summary_info_label'])[1]")
        self.payment_info = SmartLocator(self, "(//*[@class='summary_value_label'])[1]")
        self.shipping_info_section = SmartLocator(self, "(//*[@class='summary_info_label'])[2]")
        self.shipping_info = SmartLocator(self, "(//*[@class='summary_value_label'])[2]")
        self.item_total = SmartLocator(self, ".summary_subtotal_label")
        self.tax = SmartLocator(self, ".summary_tax_label")
        self.total = SmartLocator(self, ".summary_total_label")
        self.finish_button = SmartLocator(self, ".cart_button")
        self.cancel_button = SmartLocator(self, ".cart_cancel_link")

    def verify_checkout_overview_page(self, cart_count: int):
        general = self.translations.general
        checkout_info = self.translations.checkout_info
        buttons = self.translations.buttons

        self.chrome.verify_page_header(cart_count)

        soft_expect(self.subheader).to_be_visible()
        soft_expect(self.subheader).to_have_text(self.translations.headers.checkout_overview)

        soft_expect(self.qty_column).to_be_visible()
        soft_expect(self.qty_column).to_have_text(general.qty_text)
        soft_expect(self.desc_column).to_be_visible()
        soft_expect(self.desc_column).to_have_text(general.desc_text)

        soft_expect(self.payment_info_section).to_be_visible()
        soft_expect(self.payment_info_section).to_have_text(checkout_info.payment_info_section)
        soft_expect(self.shipping_info_section).to_be_visible()
        soft_expect(self.shipping_info_section).to_have_text(checkout_info.shipping_info_section)

        expect(self.cancel_button).to_be_visible()
        soft_expect(self.cancel_button).to_have_text(buttons.cancel_btn)
        expect(self.finish_button).to_be_visible()
        soft_expect(self.finish_button).to_have_text(buttons.finish_btn)

        self.chrome.verify_footer()

    def verify_items(self, expected_items: list[str]):
        expect(self.cart_items).to_have_count(len(expected_items))

        for index, name in enumerate(expected_items):
            item = self.translations.find_item(name)
            row = self.cart_items.nth(index)

            expect(row.locator(".inventory_item_name")).to_have_text(item.name)
            expect(row.locator(".inventory_item_desc")).to_have_text(item.description)
            expect(row.locator(".inventory_item_price")).to_have_text(item.price)
            expect(row.locator(".summary_quantity")).to_have_text("1")

    def verify_payment_information(self, expected_payment_info: str):
        expect(self.payment_info).to_have_text(expected_payment_info)

    def verify_shipping_information(self, expected_shipping_info: str):
        expect(self.shipping_info).to_have_text(expected_shipping_info)

    def verify_item_total(self, expected_items: list[str]):
        """Item total line must equal the sum of the rendered prices of the expected items."""
        currency_symbol = self.translations.general.currency_symbol
        prices = []

        for index, name in enumerate(expected_items):
            self.translations.find_item(name)
            price_text = self.cart_items.nth(index).locator(".inventory_item_price").text_content()
            if not price_text:
                raise AssertionError(f"Price text not found for item '{name}'")
            prices.append(price_text)

        expected_line = format_summary_line(
            self.translations.summary.item_total_label, sum_prices(prices, currency_symbol), currency_symbol)
        expect(self.item_total).to_have_text(expected_line)

    def verify_tax(self):
        # Only the format is checked, the tax rate is not known here
        expect(self.tax).to_have_text(
            summary_line_pattern(self.translations.summary.tax_label, self.translations.general.currency_symbol))

    def verify_total(self):
        """Total line must equal the displayed item total plus the displayed tax."""
        currency_symbol = self.translations.general.currency_symbol

        expect(self.item_total).to_be_visible()
        expect(self.tax).to_be_visible()
        item_total = parse_price(self.item_total.text_content() or "", currency_symbol)
        tax = parse_price(self.tax.text_content() or "", currency_symbol)

        expected_line = format_summary_line(
            self.translations.summary.total_label, item_total + tax, currency_symbol)
        expect(self.total).to_have_text(expected_line)

    def click_cancel(self):
        expect(self.cancel_button).to_be_visible()
        self.cancel_button.click()

    def click_finish(self):
        expect(self.finish_button).to_be_visible()
        self.finish_button.click()
