"""Label discovery for wizard inputs"""

import foxyapply.config as config
from foxyapply.browser.scope import css
from foxyapply.errors import is_session_lost

# Walk up to ANCESTOR_LEVELS parents; the first fieldset/div with text wins
_ANCESTOR_TEXT_JS = """(e) => {
    let p = e;
    for (let i = 0; i < %d && p; i++) {
        p = p.parentElement;
        if (!p) break;
        const tag = (p.tagName || "").toLowerCase();
        if (tag === "fieldset" || tag === "div") {
            const txt = (p.innerText || "").trim();
            if (txt) return txt.split("\\n")[0].trim();
        }
    }
    return "";
}"""


def css_escape(value):
    """Escape an id for use inside a double-quoted attribute selector"""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def attr(element, name):
    """Trimmed attribute value, empty string when absent"""
    try:
        value = element.attribute(name)
    except Exception as e:
        if is_session_lost(e):
            raise
        print(f"  ⚠️ Could not read '{name}': {e}")
        return ""
    return (value or "").strip()


def _text_of(scope, selector):
    try:
        node = scope.find_one(css(selector), timeout_ms=config.LABEL_TIMEOUT)
        if node is None:
            return ""
        return (node.text() or "").strip()
    except Exception as e:
        if is_session_lost(e):
            raise
        print(f"  ⚠️ Label lookup failed for {selector}: {e}")
        return ""


def _ancestor_text(element):
    try:
        value = element.evaluate(_ANCESTOR_TEXT_JS % config.ANCESTOR_LEVELS)
    except Exception as e:
        if is_session_lost(e):
            raise
        print(f"  ⚠️ Ancestor label walk failed: {e}")
        return ""
    if not isinstance(value, str):
        return ""
    return value.strip()


def best_label(scope, element):
    """
    Best human-readable label for ``element`` inside ``scope``.

    Strategy order (first non-empty wins):
    1. label[for=<id>]  (short timeout - most inputs have none)
    2. aria-label
    3. placeholder
    4. aria-labelledby ids, texts joined with a space
    5. first line of the nearest fieldset/div ancestor's text

    Returns "" when nothing is found. A lost browser session propagates;
    any other lookup failure counts as an empty strategy.
    """
    input_id = attr(element, "id")
    if input_id:
        text = _text_of(scope, f'label[for="{css_escape(input_id)}"]')
        if text:
            return text

    aria_label = attr(element, "aria-label")
    if aria_label:
        return aria_label

    placeholder = attr(element, "placeholder")
    if placeholder:
        return placeholder

    labelled_by = attr(element, "aria-labelledby")
    if labelled_by:
        parts = []
        for ref in labelled_by.split():
            text = _text_of(scope, f'[id="{css_escape(ref)}"]')
            if text:
                parts.append(text)
        if parts:
            return " ".join(parts)

    return _ancestor_text(element)
