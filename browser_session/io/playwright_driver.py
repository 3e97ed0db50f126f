"""
Playwright-based Driver implementation (sync API).

Conforms to io/driver.py's Driver Protocol:
- start() / stop() / is_started()
- visit(url) / get_current_url() / get_content()
- find(xpath) -> ["(xpath)[1]", "(xpath)[2]", ...]
- click / set_value / check / uncheck / select_option / attach_file
- get_attribute / get_text
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from playwright.sync_api import (
    Browser,
    BrowserContext,
    Locator,
    Page,
    Playwright,
    sync_playwright,
)

from ..core.log import get_logger

log = get_logger(__name__)


class PlaywrightDriver:
    """
    A concrete Driver based on Playwright Chromium.
    - One incognito BrowserContext + one Page per started driver.
    - Addresses are XPath expressions indexed into the match list.
    """

    def __init__(
        self,
        *,
        headless: bool = True,
        slow_mo_ms: int = 0,
        default_timeout_ms: int = 30_000,
    ) -> None:
        self.headless = headless
        self.slow_mo_ms = slow_mo_ms
        self.default_timeout_ms = default_timeout_ms

        self._pw: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    # ---------------- lifecycle ----------------

    def start(self) -> None:
        """Launch Playwright, a Chromium browser and a fresh page once."""
        if self._browser is not None:
            return
        self._pw = sync_playwright().start()
        self._browser = self._pw.chromium.launch(headless=self.headless, slow_mo=self.slow_mo_ms)
        self._context = self._browser.new_context()
        self._context.set_default_timeout(self.default_timeout_ms)
        self._page = self._context.new_page()
        log.debug("playwright chromium started (headless=%s)", self.headless)

    def stop(self) -> None:
        """Close the page/context and stop Playwright."""
        try:
            if self._context is not None:
                self._context.close()
            if self._browser is not None:
                self._browser.close()
        finally:
            if self._pw is not None:
                self._pw.stop()
            self._pw = None
            self._browser = None
            self._context = None
            self._page = None

    def is_started(self) -> bool:
        return self._page is not None

    # ---------------- navigation ----------------

    def visit(self, url: str) -> None:
        self._as_page().goto(url, timeout=self.default_timeout_ms, wait_until="load")

    def get_current_url(self) -> str:
        return self._as_page().url

    def get_content(self) -> str:
        return self._as_page().content()

    # ---------------- queries ----------------

    def find(self, xpath: str) -> list[str]:
        count = self._as_page().locator(f"xpath={xpath}").count()
        return [f"({xpath})[{i}]" for i in range(1, count + 1)]

    def get_attribute(self, xpath: str, name: str) -> Optional[str]:
        return self._locate(xpath).get_attribute(name)

    def get_text(self, xpath: str) -> str:
        text = self._locate(xpath).text_content()
        return " ".join(text.split()) if text else ""

    # ---------------- interactions ----------------

    def click(self, xpath: str) -> None:
        loc = self._locate(xpath)
        loc.scroll_into_view_if_needed()
        loc.click()

    def set_value(self, xpath: str, value: str) -> None:
        self._locate(xpath).fill(value)

    def check(self, xpath: str) -> None:
        """Check a checkbox/radio; no-op if already checked."""
        self._locate(xpath).check()

    def uncheck(self, xpath: str) -> None:
        self._locate(xpath).uncheck()

    def select_option(self, xpath: str, value: str) -> None:
        """A plain string option matches by value or by label."""
        self._locate(xpath).select_option(value)

    def attach_file(self, xpath: str, path: str) -> None:
        """Upload a local file to <input type="file"> via set_input_files()."""
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"attach_file(): file not found: {path}")
        self._locate(xpath).set_input_files(str(p))

    # ---------------- internals ----------------

    def _as_page(self) -> Page:
        if self._page is None:
            raise RuntimeError("Browser not started. Call start() first.")
        return self._page

    def _locate(self, xpath: str) -> Locator:
        return self._as_page().locator(f"xpath={xpath}").first
