from pydantic import BaseModel, ConfigDict, Field, model_validator

from enums.sort_criterion import SortCriterion


class FrozenModel(BaseModel):
    """Read-only record: unknown keys are rejected, fields cannot be reassigned."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class InventoryItem(FrozenModel):
    name: str = Field(..., min_length=1)
    description: str
    price: str = Field(..., min_length=2)
    img: str


class General(FrozenModel):
    currency_symbol: str = Field(..., min_length=1)
    qty_text: str
    desc_text: str
    thank_you_text: str
    order_text: str


class Buttons(FrozenModel):
    add_to_cart_btn: str
    remove_btn: str
    cancel_btn: str
    finish_btn: str
    back_btn: str
    continue_shopping_btn: str
    continue_btn: str


class Headers(FrozenModel):
    products: str
    finish: str
    your_cart: str
    checkout_info: str
    checkout_overview: str


class ErrorMessages(FrozenModel):
    login_credentials_mismatch: str
    login_username_required: str
    first_name_required: str


class CheckoutInfo(FrozenModel):
    first_name: str
    last_name: str
    zip: str
    payment_info_section: str
    shipping_info_section: str
    shipping_info: str


class Summary(FrozenModel):
    item_total_label: str
    tax_label: str
    total_label: str


class CustomerInfo(FrozenModel):
    first_name: str
    last_name: str
    zip: str


class Credentials(FrozenModel):
    valid_checkout_info: CustomerInfo


class SortOptions(FrozenModel):
    az: str
    za: str
    lowhigh: str
    highlow: str

    def labels(self) -> list[str]:
        """Option labels in dropdown order."""
        return [self.az, self.za, self.lowhigh, self.highlow]

    def criterion_for(self, label: str) -> SortCriterion:
        for criterion in SortCriterion:
            if getattr(self, criterion.value) == label:
                return criterion
        raise ValueError(f"Unknown sort option label: '{label}'. Expected one of {self.labels()}")


class Footer(FrozenModel):
    footer_copy_text: str


class Translations(FrozenModel):
    """All locale specific text the page objects assert against."""

    general: General
    buttons: Buttons
    headers: Headers
    error_messages: ErrorMessages
    checkout_info: CheckoutInfo
    summary: Summary
    credentials: Credentials
    inventory: tuple[InventoryItem, ...] = Field(..., min_length=1)
    sort_options: SortOptions
    footer: Footer

    @model_validator(mode="after")
    def check_inventory(self):
        names = [item.name for item in self.inventory]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate inventory item names: {duplicates}")

        symbol = self.general.currency_symbol
        wrong_prices = [item.name for item in self.inventory if not item.price.startswith(symbol)]
        if wrong_prices:
            raise ValueError(f"prices without currency symbol '{symbol}': {wrong_prices}")
        return self

    def find_item(self, name: str) -> InventoryItem:
        for item in self.inventory:
            if item.name == name:
                return item
        raise ValueError(f"Item '{name}' is not in the inventory")

    def item_names(self) -> list[str]:
        return [item.name for item in self.inventory]


class LoginCredential(FrozenModel):
    username: str
    password: str


class SharedGeneral(FrozenModel):
    title_tab: str


class SharedButtons(FrozenModel):
    login_btn: str
    checkout_btn: str


class SharedCredentials(FrozenModel):
    login_credentials: tuple[LoginCredential, ...] = Field(..., min_length=1)
    invalid_username: str
    invalid_password: str

    def for_user(self, username: str) -> LoginCredential:
        for credential in self.login_credentials:
            if credential.username == username:
                return credential
        raise ValueError(f"No credentials for user '{username}'")


class SharedCheckoutInfo(FrozenModel):
    payment_info: str


class SharedFooter(FrozenModel):
    footer_robot_src: str
    pony_express_src: str


class SharedConstants(FrozenModel):
    """Locale independent values."""

    general: SharedGeneral
    buttons: SharedButtons
    credentials: SharedCredentials
    checkout_info: SharedCheckoutInfo
    footer: SharedFooter
