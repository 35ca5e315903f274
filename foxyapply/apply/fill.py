"""Repair pass for required wizard inputs left empty"""

from foxyapply.interaction.keyboard import type_value
from foxyapply.perception.labels import attr, best_label
from foxyapply.perception.text_fields import detect_unfilled_required_fields
from foxyapply.reasoning.resolve_text import resolve_field_value
from foxyapply.state.detector import MODAL_HOST, has_errors, scopes_with_errors
from foxyapply.utils.logging import log_field


def fill_invalids(scope, profile, fallback=None):
    """
    Fill every required, empty auto-generated text input in ``scope``.

    A field that cannot be typed into is logged and skipped. Returns the
    number of fields filled.
    """
    filled = 0
    for element in detect_unfilled_required_fields(scope):
        label = best_label(scope, element)
        input_type = attr(element, "type")
        value = resolve_field_value(label, input_type, profile, fallback)

        ok, error = type_value(element, value, label=label)
        log_field(label, value, ok=ok, error=error)
        if ok:
            filled += 1
    return filled


def handle_inline_errors(scope, profile, fallback=None):
    """
    Repair the fields behind inline validation errors, if any are showing.

    The wizard usually lives in an iframe with its form inside the modal's
    shadow root; each such modal gets a fill pass. When the marker only shows
    in the main document, the main document gets the pass instead.
    The markers clear themselves once the site re-validates.
    """
    if not has_errors(scope):
        return 0

    print("  ⚠️ Inline validation errors detected - filling required fields")

    embedded_with_errors = scopes_with_errors(scope)
    if not embedded_with_errors:
        return fill_invalids(scope, profile, fallback)

    filled = 0
    for embedded in embedded_with_errors:
        host = embedded.find_one(MODAL_HOST)
        if host is None:
            continue
        shadow = host.shadow_scope()
        if shadow is None:
            continue
        filled += fill_invalids(shadow, profile, fallback)
    return filled
