import re

from enums.sort_criterion import SortCriterion
from models.translations import InventoryItem


def parse_price(text: str, currency_symbol: str = "$") -> float:
    """
    Converts a displayed price into a float by stripping the leading
    currency symbol (and an optional line label before it).

    Example:
        >>> parse_price("$29.99")
        29.99
        >>> parse_price("Tax: $2.40")
        2.4
    """
    text = text.strip()
    index = text.find(currency_symbol)

    if index == -1:
        raise ValueError(f"Price '{text}' has no currency symbol '{currency_symbol}'")

    return float(text[index + len(currency_symbol):].strip())


def format_price(value: float, currency_symbol: str = "$") -> str:
    return f"{currency_symbol}{value:.2f}"


def format_summary_line(label: str, value: float, currency_symbol: str = "$") -> str:
    """'Item total:', 33.97 -> 'Item total: $33.97'"""
    return f"{label} {format_price(value, currency_symbol)}"


def summary_line_pattern(label: str, currency_symbol: str = "$") -> re.Pattern:
    """Pattern for a summary line with any two-decimal amount, e.g. 'Tax: $2.40'."""
    return re.compile(rf"^{re.escape(label)} {re.escape(currency_symbol)}\d+\.\d{{2}}$")


def price_pattern(currency_symbol: str = "$") -> re.Pattern:
    return re.compile(rf"^{re.escape(currency_symbol)}\d+\.\d{{2}}$")


def sum_prices(prices: list[str], currency_symbol: str = "$") -> float:
    return sum(parse_price(price, currency_symbol) for price in prices)


def sort_inventory(items, criterion: SortCriterion, currency_symbol: str = "$") -> list[InventoryItem]:
    """
    Returns a new list of inventory items in the order the site shows them
    for the given sort criterion. Equal keys keep their original order.
    """
    criterion = SortCriterion(criterion)
    items = list(items)

    def by_name(item):
        # Exact name breaks ties between case variants
        return item.name.casefold(), item.name

    def by_price(item):
        return parse_price(item.price, currency_symbol)

    if criterion == SortCriterion.NAME_ASC:
        return sorted(items, key=by_name)
    if criterion == SortCriterion.NAME_DESC:
        return sorted(items, key=by_name, reverse=True)
    if criterion == SortCriterion.PRICE_ASC:
        return sorted(items, key=by_price)
    return sorted(items, key=by_price, reverse=True)
