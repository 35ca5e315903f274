"""In-memory stand-ins for the browser scope types. No browser involved."""

from foxyapply.browser.scope import Element, PageScope, Scope


class FakeElement(Element):
    def __init__(self, name="element", attrs=None, text="", ancestor_text="", shadow=None,
                 fail_type=False, on_click=None, on_type=None, events=None):
        self.name = name
        self.attrs = dict(attrs or {})
        self._text = text
        self.ancestor_text = ancestor_text
        self.shadow = shadow
        self.fail_type = fail_type
        self.on_click = on_click
        self.on_type = on_type
        self.events = events if events is not None else []
        self.clicks = 0
        self.typed = []

    def attribute(self, name):
        return self.attrs.get(name)

    def text(self):
        return self._text

    def click(self):
        self.clicks += 1
        self.events.append(("click", self.name))
        if self.on_click:
            self.on_click()

    def focus(self):
        self.events.append(("focus", self.name))

    def press(self, key):
        self.clicks += 1
        self.events.append(("press", self.name, key))
        if self.on_click:
            self.on_click()

    def hover(self):
        self.events.append(("hover", self.name))

    def scroll_into_view(self):
        self.events.append(("scroll", self.name))

    def clear_and_type(self, text):
        if self.fail_type:
            raise RuntimeError("element is not editable")
        self.attrs["value"] = text
        self.typed.append(text)
        self.events.append(("type", self.name, text))
        if self.on_type:
            self.on_type()

    def evaluate(self, script):
        return self.ancestor_text

    def shadow_scope(self):
        return self.shadow


class FakeScope(Scope):
    """Elements keyed by locator query; the dict may be mutated by click hooks."""

    def __init__(self, elements=None, embedded=None):
        self.elements = {key: list(value) for key, value in (elements or {}).items()}
        self.embedded = list(embedded or [])
        self.lookups = []

    def put(self, query, *elements):
        self.elements[query] = list(elements)

    def remove(self, query):
        self.elements.pop(query, None)

    def find_one(self, locator, timeout_ms=None):
        self.lookups.append((locator.query, timeout_ms))
        matches = self.elements.get(locator.query) or []
        return matches[0] if matches else None

    def find_all(self, locator):
        self.lookups.append((locator.query, None))
        return list(self.elements.get(locator.query) or [])

    def embedded_scopes(self):
        return list(self.embedded)


class FakePage(FakeScope, PageScope):
    def __init__(self, elements=None, embedded=None, html="", on_navigate=None):
        super().__init__(elements, embedded)
        self._url = "about:blank"
        self._html = html
        self.on_navigate = on_navigate
        self.visited = []
        self.wheel_steps = []

    @property
    def url(self):
        return self._url

    def navigate(self, url):
        self._url = url
        self.visited.append(url)
        if self.on_navigate:
            self.on_navigate(self, url)

    def html(self):
        return self._html

    def wheel(self, delta_x, delta_y):
        self.wheel_steps.append((delta_x, delta_y))

    def wait_for_network_idle(self):
        pass


class FakeSession:
    def __init__(self):
        self.applying = False
        self.history = []

    def is_applying(self):
        return self.applying

    def set_applying(self, value):
        self.applying = value
        self.history.append(value)
