"""State detection logic - NO ACTIONS, only detection"""

import foxyapply.config as config
from foxyapply.browser.scope import css

ERROR_MARKER = css(config.ERROR_ICON_SELECTOR)
MODAL_HOST = css(config.MODAL_HOST_SELECTOR)


def search_roots(embedded):
    """
    An embedded document plus the shadow root of its wizard modal, if any.

    Queries do not cross into a shadow root on their own, so it is searched
    as a root of its own.
    """
    roots = [embedded]
    host = embedded.find_one(MODAL_HOST)
    if host is not None:
        shadow = host.shadow_scope()
        if shadow is not None:
            roots.append(shadow)
    return roots


def find_in_embedded(scope, locator):
    """(embedded_scope, element) for the first iframe document holding ``locator``, else (None, None)"""
    for embedded in scope.embedded_scopes():
        for root in search_roots(embedded):
            element = root.find_one(locator)
            if element is not None:
                return root, element
    return None, None


def is_present(scope, locator, timeout_ms=config.PRESENCE_TIMEOUT):
    """Present in the main document within ``timeout_ms``, or in any embedded document"""
    scope.wait_until_loaded()
    if scope.find_one(locator, timeout_ms=timeout_ms) is not None:
        return True
    _, element = find_in_embedded(scope, locator)
    return element is not None


def has_errors(scope):
    """True while the current wizard step shows inline validation feedback"""
    return is_present(scope, ERROR_MARKER)


def scopes_with_errors(scope):
    """Embedded documents currently holding the inline error marker"""
    return [embedded for embedded in scope.embedded_scopes() if any(
        root.find_one(ERROR_MARKER) is not None for root in search_roots(embedded)
    )]
