"""
Actionable element: semantic finders plus action verbs.

Every verb follows the same two steps:
  1) resolve the locator with the matching finder (find_link / find_button /
     find_field); None -> ElementNotFound(kind, locator), no driver call
  2) make exactly one driver call with the resolved element's address

The *_by_xpath / *_by_content verbs skip step 1 and hand the given (or
synthesized) address straight to the driver. Driver exceptions propagate
unchanged.
"""
# @file purpose: Resolve-then-dispatch action verbs shared by page and node elements.

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from ..core.errors import ElementNotFound
from ..core.log import get_logger
from ..selectors.xpath import xpath_literal
from .element import Element

if TYPE_CHECKING:
    from ..io.driver import Driver
    from .nodes import NodeElement

log = get_logger(__name__)


class ActionableElement(Element):
    # ---------------- finders ----------------

    @abstractmethod
    def find_link(self, locator: str) -> Optional["NodeElement"]:
        """Link (a) by id, title, text or image alt."""

    @abstractmethod
    def find_button(self, locator: str) -> Optional["NodeElement"]:
        """Button (input[type=submit|image|button], button) by id, value or alt."""

    @abstractmethod
    def find_field(self, locator: str) -> Optional["NodeElement"]:
        """Field (input, textarea, select) by id, name or label."""

    # ---------------- helpers ----------------

    @property
    def _driver(self) -> "Driver":
        return self.get_session().driver

    def _require(self, kind: str, locator: str, found: Optional["NodeElement"]) -> "NodeElement":
        if found is None:
            log.info("%s %r not found", kind, locator)
            raise ElementNotFound(kind, locator)
        return found

    def _link(self, locator: str) -> "NodeElement":
        return self._require("link", locator, self.find_link(locator))

    def _button(self, locator: str) -> "NodeElement":
        return self._require("button", locator, self.find_button(locator))

    def _field(self, locator: str) -> "NodeElement":
        return self._require("field", locator, self.find_field(locator))

    # ---------------- links & buttons ----------------

    def click_link(self, locator: str) -> None:
        self._driver.click(self._link(locator).xpath)

    def click_link_by_content(self, content: str) -> None:
        """Click the first anchor whose text contains `content`."""
        self._driver.click(f"//a[contains(., {xpath_literal(content)})]")

    def click_link_by_xpath(self, xpath: str) -> None:
        self._driver.click(xpath)

    def click_button(self, locator: str) -> None:
        self._driver.click(self._button(locator).xpath)

    # ---------------- fields ----------------

    def fill_field(self, locator: str, value: str) -> None:
        self._driver.set_value(self._field(locator).xpath, value)

    def fill_field_by_xpath(self, xpath: str, value: str) -> None:
        self._driver.set_value(xpath, value)

    def check_field(self, locator: str) -> None:
        self._driver.check(self._field(locator).xpath)

    def check_field_by_xpath(self, xpath: str) -> None:
        self._driver.check(xpath)

    def uncheck_field(self, locator: str) -> None:
        self._driver.uncheck(self._field(locator).xpath)

    def uncheck_field_by_xpath(self, xpath: str) -> None:
        self._driver.uncheck(xpath)

    def select_field_option(self, locator: str, value: str) -> None:
        self._driver.select_option(self._field(locator).xpath, value)

    def attach_file_to_field(self, locator: str, path: str) -> None:
        """The driver owns upload semantics; `path` is a local file."""
        self._driver.attach_file(self._field(locator).xpath, path)

    # ---------------- raw reads ----------------

    def get_attr_by_xpath(self, xpath: str, attr: str) -> Optional[str]:
        self._require_address(xpath)
        return self._driver.get_attribute(xpath, attr)

    def get_text_by_xpath(self, xpath: str) -> str:
        self._require_address(xpath)
        return self._driver.get_text(xpath)

    def _require_address(self, xpath: str) -> None:
        if not self._driver.find(xpath):
            log.info("no element at %s", xpath)
            raise ElementNotFound("element", xpath)
