"""
Base element: a session back-reference plus an XPath scope.
Lookups issued from an element only search beneath its own address.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Optional

from ..core.log import get_logger
from ..selectors.xpath import prepend

if TYPE_CHECKING:
    from ..core.session import Session
    from .nodes import NodeElement

log = get_logger(__name__)


class Element(ABC):
    def __init__(self, session: "Session") -> None:
        self._session = session

    @property
    def session(self) -> "Session":
        return self._session

    def get_session(self) -> "Session":
        return self._session

    @property
    @abstractmethod
    def xpath(self) -> str:
        """Address of this element; scope for every lookup made from it."""

    def _scoped(self, xpath: str) -> str:
        return prepend(xpath, self.xpath)

    def find_all(self, selector_type: str, locator: str) -> list["NodeElement"]:
        """All matches beneath this element, in driver document order."""
        xpath = self._session.selectors_handler.selector_to_xpath(selector_type, locator)
        addresses = self._session.driver.find(self._scoped(xpath))
        return [self._session.node(a) for a in addresses]

    def find(self, selector_type: str, locator: str) -> Optional["NodeElement"]:
        """First match, or None when nothing matches. Absence is not an error."""
        items = self.find_all(selector_type, locator)
        return items[0] if items else None

    def has_selector(self, selector_type: str, locator: str) -> bool:
        return self.find(selector_type, locator) is not None

    def _first_match(self, xpaths: Iterable[str]) -> Optional["NodeElement"]:
        """Try each XPath in order under this scope; the first non-empty result wins."""
        for xpath in xpaths:
            addresses = self._session.driver.find(self._scoped(xpath))
            if addresses:
                log.debug("resolved %s -> %s", xpath, addresses[0])
                return self._session.node(addresses[0])
        return None
