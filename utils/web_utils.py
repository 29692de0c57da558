from playwright.sync_api import Locator


def highlight_element(locator: Locator):
    """
    Highlights an element by adding a 2px solid red border.
    Returns the element's original 'style' attribute so it can be restored later.
    """
    original_style = locator.evaluate("el => el.getAttribute('style')")
    locator.evaluate(
        "el => el.setAttribute('style', (el.getAttribute('style') || '') + '; border: 2px solid red !important;')"
    )
    return original_style


def reset_element_style(locator: Locator, original_style: str):
    """
    Restores an element's style attribute to its original value.
    Args:
        locator: The Playwright Locator for the element.
        original_style: The style string returned from highlight_element().
    """
    if original_style is None:
        locator.evaluate("el => el.removeAttribute('style')")
    else:
        locator.evaluate("(el, style) => el.setAttribute('style', style)", original_style)
