from wrappers.smart_expect import expect, soft_expect
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


class AppChrome:
    """
    Header, burger menu, cart badge and footer shared by every page
    behind the login screen. Page objects hold one instance as `chrome`.
    """

    def __init__(self, owner: SmartPage):
        self.page = owner.page
        self.config = owner.config
        self.translations = owner.translations
        self.shared = owner.shared
        self.keyword = None

        # Header
        self.app_logo = SmartLocator(self, ".app_logo")
        self.burger_menu_button = SmartLocator(self, ".bm-burger-button button")
        self.open_burger_menu = SmartLocator(self, ".bm-menu-wrap[aria-hidden='false']")
        self.all_items_menu = SmartLocator(self, "#inventory_sidebar_link")
        self.about_menu = SmartLocator(self, "#about_sidebar_link")
        self.logout_menu = SmartLocator(self, "#logout_sidebar_link")
        self.reset_menu = SmartLocator(self, "#reset_sidebar_link")
        self.shopping_cart = SmartLocator(self, "#shopping_cart_container")
        self.cart_badge = SmartLocator(self, ".shopping_cart_badge")

        # Footer
        self.footer = SmartLocator(self, ".footer")
        self.social_twitter = SmartLocator(self, ".social .social_twitter", parent=self.footer)
        self.social_facebook = SmartLocator(self, ".social .social_facebook", parent=self.footer)
        self.social_linkedin = SmartLocator(self, ".social .social_linkedin", parent=self.footer)
        self.footer_copy = SmartLocator(self, ".footer_copy", parent=self.footer)
        self.footer_robot = SmartLocator(self, ".footer_robot", parent=self.footer)

    def verify_page_header(self, cart_count: int = 0):
        expect(self.page).to_have_title(self.shared.general.title_tab)

        soft_expect(self.app_logo).to_be_visible()
        expect(self.burger_menu_button).to_be_visible()
        expect(self.shopping_cart).to_be_visible()

        self.verify_cart_count(cart_count)

    def verify_cart_count(self, cart_count: int):
        """No badge for an empty cart, otherwise the badge shows the exact count."""
        if cart_count == 0:
            expect(self.cart_badge).not_to_be_visible()
        else:
            expect(self.cart_badge).to_be_visible()
            expect(self.cart_badge).to_have_text(str(cart_count))

    def click_cart_icon(self):
        expect(self.shopping_cart).to_be_visible()
        self.shopping_cart.click()

    def open_menu(self):
        expect(self.burger_menu_button).to_be_visible()
        self.burger_menu_button.click()

    def _click_menu_item(self, menu_item: SmartLocator):
        if not self.open_burger_menu.is_visible():
            self.open_menu()
        expect(menu_item).to_be_visible()
        menu_item.click()

    def click_all_items_menu(self):
        self._click_menu_item(self.all_items_menu)

    def click_about_menu(self):
        self._click_menu_item(self.about_menu)

    def click_logout_menu(self):
        self._click_menu_item(self.logout_menu)

    def click_reset_menu(self):
        self._click_menu_item(self.reset_menu)

    def verify_footer(self):
        soft_expect(self.footer).to_be_visible()
        soft_expect(self.social_twitter).to_be_visible()
        soft_expect(self.social_facebook).to_be_visible()
        soft_expect(self.social_linkedin).to_be_visible()

        soft_expect(self.footer_copy).to_be_visible()
        soft_expect(self.footer_copy).to_have_text(self.translations.footer.footer_copy_text)

        soft_expect(self.footer_robot).to_be_visible()
        soft_expect(self.footer_robot).to_have_attribute("src", self.shared.footer.footer_robot_src)
