"""Browser session management"""

import threading

from playwright.sync_api import sync_playwright

import foxyapply.config as config
from foxyapply.browser.scope import PlaywrightPage, css


class BrowserSession:
    """
    Owns the persistent browser context for one run.

    The "applying" status lives here, next to the context it describes, so
    it ends with the session: close() always clears it.
    """

    def __init__(self, user_data_dir=None, headless=False):
        self.user_data_dir = user_data_dir or config.BROWSER_DATA_DIR
        self.headless = headless
        self._playwright = None
        self._context = None
        self._applying = threading.Event()

    def launch(self):
        """
        Launch persistent browser context and return the page scope.
        Reuses login session across runs.
        """
        if self._context is not None:
            raise RuntimeError("browser already running")

        print("Launching browser...")

        self._playwright = sync_playwright().start()
        self._context = self._playwright.chromium.launch_persistent_context(
            user_data_dir=self.user_data_dir,
            headless=self.headless,
            args=[
                "--disable-blink-features=AutomationControlled",
                "--disable-features=site-per-process",
            ],
            user_agent=config.USER_AGENT,
            ignore_default_args=["--enable-automation"],
        )

        page = self._context.pages[0] if self._context.pages else self._context.new_page()
        return PlaywrightPage(page)

    def close(self):
        self._applying.clear()
        if self._context is None:
            return
        try:
            self._context.close()
        finally:
            self._context = None
            self._playwright.stop()
            self._playwright = None

    def is_running(self):
        return self._context is not None

    def is_applying(self):
        return self._applying.is_set()

    def set_applying(self, value):
        if value:
            self._applying.set()
        else:
            self._applying.clear()


def is_logged_in(page, timeout_ms=15000):
    """Signed-in pages render the account menu caret"""
    return page.find_one(css(config.LOGGED_IN_SELECTOR), timeout_ms=timeout_ms) is not None
