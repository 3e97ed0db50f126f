"""
Session: binds one driver to one selectors handler for the duration of a test.
"""
# @file purpose: Session wiring driver + selectors handler + page element.

from __future__ import annotations

from types import TracebackType
from typing import Optional, Type

from ..element.nodes import DocumentElement, NodeElement
from ..io.driver import Driver
from ..selectors.handler import SelectorsHandler
from .log import get_logger

log = get_logger(__name__)


class Session:
    """
    Owns the driver and the selectors handler for its whole lifetime.
    The driver cannot be swapped after construction; run concurrent
    sessions on separate driver instances.
    """

    def __init__(self, driver: Driver, selectors_handler: Optional[SelectorsHandler] = None) -> None:
        self._driver = driver
        self._selectors_handler = selectors_handler or SelectorsHandler()
        self._page = DocumentElement(self)

    @property
    def driver(self) -> Driver:
        return self._driver

    @property
    def selectors_handler(self) -> SelectorsHandler:
        return self._selectors_handler

    @property
    def page(self) -> DocumentElement:
        return self._page

    # -------- lifecycle --------

    def start(self) -> None:
        if not self._driver.is_started():
            self._driver.start()
            log.debug("session started with %s", type(self._driver).__name__)

    def stop(self) -> None:
        if self._driver.is_started():
            self._driver.stop()
            log.debug("session stopped")

    def is_started(self) -> bool:
        return self._driver.is_started()

    def __enter__(self) -> "Session":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.stop()

    # -------- navigation --------

    def visit(self, url: str) -> None:
        self._driver.visit(url)

    def get_current_url(self) -> str:
        return self._driver.get_current_url()

    def get_page_content(self) -> str:
        return self._driver.get_content()

    # -------- lookup --------

    def node(self, xpath: str) -> NodeElement:
        """Wrap a driver address in an element bound to this session."""
        return NodeElement(xpath, self)

    def find(self, selector_type: str, locator: str) -> Optional[NodeElement]:
        return self._page.find(selector_type, locator)

    def find_all(self, selector_type: str, locator: str) -> list[NodeElement]:
        return self._page.find_all(selector_type, locator)

    def has_selector(self, selector_type: str, locator: str) -> bool:
        return self._page.has_selector(selector_type, locator)
