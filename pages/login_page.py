from playwright.sync_api import Page
from models.translations import Translations
from wrappers.smart_expect import expect, soft_expect
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


class LoginPage(SmartPage):
    """Login screen. It has no header, cart or footer, so no AppChrome."""

    def __init__(self, page: Page, config: dict, translations: Translations = None):
        super().__init__(page, config, translations)

        # Locators
        self.login_logo = SmartLocator(self, ".login_logo")
        self.username_input = SmartLocator(self, "#user-name")
        self.password_input = SmartLocator(self, "#password")
        self.login_button = SmartLocator(self, "#login-button")
        self.robot_image = SmartLocator(self, ".bot_column")
        self.login_credentials = SmartLocator(self, "#login_credentials")
        self.login_password = SmartLocator(self, ".login_password")
        self.error_message = SmartLocator(self, "//h3[@data-test='error']")
        self.error_button = SmartLocator(self, ".error-button")

    def nav_login(self):
        self.goto(self.config["login_path"])
        self.page.wait_for_url(f"**/{self.config['login_path']}")

    def enter_username(self, username: str):
        expect(self.username_input).to_be_visible()
        self.username_input.fill(username)

    def enter_password(self, password: str):
        expect(self.password_input).to_be_visible()
        self.password_input.fill(password)

    def enter_login_credentials(self, username: str, password: str):
        self.enter_username(username)
        self.enter_password(password)

    def click_login_button(self):
        expect(self.login_button).to_be_visible()
        self.login_button.click()

    def login(self, username: str, password: str):
        self.nav_login()
        self.enter_login_credentials(username, password)
        self.click_login_button()

    def verify_login_page(self):
        soft_expect(self.login_logo).to_be_visible()
        expect(self.username_input).to_be_visible()
        expect(self.password_input).to_be_visible()
        expect(self.login_button).to_be_visible()
        soft_expect(self.robot_image).to_be_visible()
        soft_expect(self.login_credentials).to_be_visible()
        soft_expect(self.login_password).to_be_visible()

        # No error on first load
        self.verify_no_error_message()

        soft_expect(self.username_input).to_have_value("")
        soft_expect(self.password_input).to_have_value("")

    def verify_no_error_message(self):
        expect(self.error_message).not_to_be_visible()
        expect(self.error_button).not_to_be_visible()

    def verify_error_message(self, message: str):
        expect(self.error_button).to_be_visible()
        expect(self.error_message).to_be_visible()
        expect(self.error_message).to_have_text(message)
