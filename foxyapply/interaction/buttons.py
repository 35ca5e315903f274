"""Button interactions"""

import foxyapply.config as config
from foxyapply.errors import is_session_lost
from foxyapply.interaction.keyboard import keyboard_activate
from foxyapply.state.detector import find_in_embedded


def click_when_clickable(scope, locator):
    """
    Perform the action behind ``locator``.

    Main document first (direct click); otherwise the first embedded document
    holding it (keyboard activation). Returns False when the control is not
    found or the interaction failed.
    """
    element = scope.find_one(locator, timeout_ms=config.CLICK_TIMEOUT)
    if element is not None:
        try:
            element.click()
        except Exception as e:
            if is_session_lost(e):
                raise
            print(f"  ⚠️ Click failed on {locator.query}: {e}")
            return False
        print(f"  ✓ Clicked {locator.query}")
        return True

    _, element = find_in_embedded(scope, locator)
    if element is None:
        return False
    return keyboard_activate(element, label=locator.query)
