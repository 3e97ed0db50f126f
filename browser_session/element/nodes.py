"""
Concrete actionable elements:
- DocumentElement: the page root (`//html`)
- NodeElement: one resolved node, addressed by the XPath the driver returned
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .actionable import ActionableElement

if TYPE_CHECKING:
    from ..core.session import Session


class _NamedFinders:
    """find_link / find_button / find_field over the priority-ordered named XPaths."""

    def find_link(self, locator: str) -> Optional["NodeElement"]:
        return self._first_match(self.session.selectors_handler.alternatives("link", locator))

    def find_button(self, locator: str) -> Optional["NodeElement"]:
        return self._first_match(self.session.selectors_handler.alternatives("button", locator))

    def find_field(self, locator: str) -> Optional["NodeElement"]:
        return self._first_match(self.session.selectors_handler.alternatives("field", locator))


class DocumentElement(_NamedFinders, ActionableElement):
    """Root of the current page."""

    @property
    def xpath(self) -> str:
        return "//html"

    def _scoped(self, xpath: str) -> str:
        # the whole document is the scope: queries go to the driver as written
        return xpath

    def get_content(self) -> str:
        return self.session.driver.get_content()

    def __repr__(self) -> str:
        return f"<DocumentElement url={self.session.driver.get_current_url()!r}>"


class NodeElement(_NamedFinders, ActionableElement):
    """
    A node in the page, identified by its address.
    The address is not revalidated: if the node has gone away, the next
    driver call fails with whatever the driver raises.
    """

    def __init__(self, xpath: str, session: "Session") -> None:
        super().__init__(session)
        self._xpath = xpath

    @property
    def xpath(self) -> str:
        return self._xpath

    def get_text(self) -> str:
        return self.session.driver.get_text(self._xpath)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.session.driver.get_attribute(self._xpath, name)

    def click(self) -> None:
        self.session.driver.click(self._xpath)

    def set_value(self, value: str) -> None:
        self.session.driver.set_value(self._xpath, value)

    def check(self) -> None:
        self.session.driver.check(self._xpath)

    def uncheck(self) -> None:
        self.session.driver.uncheck(self._xpath)

    def select_option(self, value: str) -> None:
        self.session.driver.select_option(self._xpath, value)

    def attach_file(self, path: str) -> None:
        self.session.driver.attach_file(self._xpath, path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeElement):
            return NotImplemented
        return self._xpath == other._xpath and self.session is other.session

    def __hash__(self) -> int:
        return hash((self._xpath, id(self.session)))

    def __repr__(self) -> str:
        return f"<NodeElement xpath={self._xpath!r}>"
