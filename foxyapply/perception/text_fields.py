"""Text field detection inside the wizard"""

import foxyapply.config as config
from foxyapply.browser.scope import xpath
from foxyapply.perception.labels import attr

TEXT_INPUT_LOCATOR = xpath(f"//*[starts-with(@id, '{config.TEXT_INPUT_ID_PREFIX}')]")


def is_empty(element):
    """Inputs and textareas expose their current content as the value attribute"""
    return attr(element, "value") == ""


def is_required(element):
    if attr(element, "aria-required").lower() == "true":
        return True
    if element.attribute("required") is not None:
        return True
    return "required" in attr(element, "class").lower()


def detect_unfilled_required_fields(scope):
    """Auto-generated single-line inputs in ``scope`` that are required and still empty"""
    return [el for el in scope.find_all(TEXT_INPUT_LOCATOR) if is_empty(el) and is_required(el)]
