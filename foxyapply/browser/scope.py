"""Queryable DOM regions.

The wizard logic never talks to Playwright directly. It asks a ``Scope`` for
matches: the main document, an iframe's document, or a shadow root all look
the same from the outside. ``PageScope`` adds the page-level operations used
by discovery and the campaign (navigation, markup, scrolling).
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from playwright.sync_api import TimeoutError as PlaywrightTimeout

import foxyapply.config as config


@dataclass(frozen=True)
class Locator:
    """How to find one control: ``kind`` is "css" or "xpath"."""

    kind: str
    query: str

    def selector(self):
        if self.kind == "xpath":
            return f"xpath={self.query}"
        return self.query


def css(query):
    return Locator("css", query)


def xpath(query):
    return Locator("xpath", query)


class Element(ABC):
    @abstractmethod
    def attribute(self, name):
        """Attribute value, or None when the attribute is absent"""

    @abstractmethod
    def text(self):
        """Rendered text of the element"""

    @abstractmethod
    def click(self):
        pass

    @abstractmethod
    def focus(self):
        pass

    @abstractmethod
    def press(self, key):
        pass

    @abstractmethod
    def hover(self):
        pass

    @abstractmethod
    def scroll_into_view(self):
        pass

    @abstractmethod
    def clear_and_type(self, text):
        pass

    @abstractmethod
    def evaluate(self, script):
        """Run ``script`` (a JS function taking the element) and return its value"""

    @abstractmethod
    def shadow_scope(self):
        """The element's open shadow root as a Scope, or None"""


class Scope(ABC):
    @abstractmethod
    def find_one(self, locator, timeout_ms=None):
        """First match or None. With ``timeout_ms`` waits up to that long."""

    @abstractmethod
    def find_all(self, locator):
        pass

    @abstractmethod
    def embedded_scopes(self):
        """Documents of the iframes reachable from this scope"""

    def wait_until_loaded(self):
        pass


class PageScope(Scope):
    @property
    @abstractmethod
    def url(self):
        pass

    @abstractmethod
    def navigate(self, url):
        pass

    @abstractmethod
    def html(self):
        pass

    @abstractmethod
    def wheel(self, delta_x, delta_y):
        pass

    @abstractmethod
    def wait_for_network_idle(self):
        pass


# ========================================
# Playwright implementation
# ========================================


class PlaywrightElement(Element):
    def __init__(self, handle):
        self.handle = handle

    def attribute(self, name):
        return self.handle.get_attribute(name)

    def text(self):
        return self.handle.inner_text()

    def click(self):
        self.handle.scroll_into_view_if_needed()
        try:
            self.handle.click()
        except PlaywrightTimeout:
            # Covered by an overlay; a JS click still reaches the handler
            self.handle.evaluate("(e) => e.click()")

    def focus(self):
        self.handle.focus()

    def press(self, key):
        self.handle.press(key)

    def hover(self):
        self.handle.hover()

    def scroll_into_view(self):
        self.handle.scroll_into_view_if_needed()

    def clear_and_type(self, text):
        self.handle.scroll_into_view_if_needed()
        try:
            self.handle.select_text()
        except PlaywrightTimeout:
            self.handle.evaluate('(e) => { try { e.value = ""; } catch (_) {} }')
        self.handle.type(
            text,
            delay=random.randint(config.TIMING["key_delay_min"], config.TIMING["key_delay_max"]),
        )

    def evaluate(self, script):
        return self.handle.evaluate(script)

    def shadow_scope(self):
        root = self.handle.evaluate_handle("(e) => e.shadowRoot").as_element()
        if root is None:
            return None
        return PlaywrightScope(root)


class PlaywrightScope(Scope):
    """Wraps a Page, Frame or ElementHandle (shadow root); all three share the query API"""

    def __init__(self, root):
        self.root = root

    def find_one(self, locator, timeout_ms=None):
        if timeout_ms is None:
            handle = self.root.query_selector(locator.selector())
        else:
            try:
                handle = self.root.wait_for_selector(
                    locator.selector(), state="attached", timeout=timeout_ms
                )
            except PlaywrightTimeout:
                return None
        return PlaywrightElement(handle) if handle else None

    def find_all(self, locator):
        return [PlaywrightElement(h) for h in self.root.query_selector_all(locator.selector())]

    def embedded_scopes(self):
        scopes = []
        for iframe in self.root.query_selector_all("iframe"):
            frame = iframe.content_frame()
            if frame is not None:
                scopes.append(PlaywrightScope(frame))
        return scopes

    def wait_until_loaded(self):
        if hasattr(self.root, "wait_for_load_state"):
            self.root.wait_for_load_state("load")


class PlaywrightPage(PlaywrightScope, PageScope):
    def __init__(self, page):
        super().__init__(page)
        self.page = page

    @property
    def url(self):
        return self.page.url

    def navigate(self, url):
        self.page.goto(url, wait_until="domcontentloaded", timeout=60000)

    def html(self):
        return self.page.content()

    def wheel(self, delta_x, delta_y):
        self.page.mouse.wheel(delta_x, delta_y)

    def wait_for_network_idle(self):
        try:
            self.page.wait_for_load_state("networkidle", timeout=10000)
        except PlaywrightTimeout:
            # The feed keeps long-polling; idle is best effort
            pass
