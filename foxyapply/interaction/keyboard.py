"""Keyboard interactions"""

from foxyapply.errors import is_session_lost


def keyboard_activate(element, label="control"):
    """
    Activate a control with the keyboard: scroll it into view, focus, Enter.

    Controls inside an embedded document do not take synthetic clicks
    reliably; a focused Enter does.
    """
    try:
        element.scroll_into_view()
        element.focus()
        element.press("Enter")
    except Exception as e:
        if is_session_lost(e):
            raise
        print(f"  ⚠️ Error activating {label} via keyboard: {e}")
        return False
    print(f"  ✓ Activated {label} via keyboard")
    return True


def type_value(element, value, label="field"):
    """Clear ``element`` and type ``value``. Returns (ok, error_text)."""
    try:
        element.clear_and_type(value)
    except Exception as e:
        if is_session_lost(e):
            raise
        return (False, str(e))
    return (True, "")
