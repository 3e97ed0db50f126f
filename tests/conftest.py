from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from browser_session.core.session import Session
from browser_session.io.lxml_driver import LxmlDriver

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class RecordingDriver:
    """
    Driver double: queries go to a real LxmlDriver, every other call is
    recorded in `calls` and not executed.
    """

    def __init__(self, html: str = "") -> None:
        self.inner = LxmlDriver(html=html)
        self.calls: list[tuple[Any, ...]] = []
        self.queries: list[str] = []

    def start(self) -> None:
        self.inner.start()

    def stop(self) -> None:
        self.inner.stop()

    def is_started(self) -> bool:
        return self.inner.is_started()

    def visit(self, url: str) -> None:
        self.calls.append(("visit", url))

    def get_current_url(self) -> str:
        return self.inner.get_current_url()

    def get_content(self) -> str:
        return self.inner.get_content()

    def find(self, xpath: str) -> list[str]:
        self.queries.append(xpath)
        return self.inner.find(xpath)

    def get_attribute(self, xpath: str, name: str) -> Optional[str]:
        self.calls.append(("get_attribute", xpath, name))
        return self.inner.get_attribute(xpath, name)

    def get_text(self, xpath: str) -> str:
        self.calls.append(("get_text", xpath))
        return self.inner.get_text(xpath)

    def click(self, xpath: str) -> None:
        self.calls.append(("click", xpath))

    def set_value(self, xpath: str, value: str) -> None:
        self.calls.append(("set_value", xpath, value))

    def check(self, xpath: str) -> None:
        self.calls.append(("check", xpath))

    def uncheck(self, xpath: str) -> None:
        self.calls.append(("uncheck", xpath))

    def select_option(self, xpath: str, value: str) -> None:
        self.calls.append(("select_option", xpath, value))

    def attach_file(self, xpath: str, path: str) -> None:
        self.calls.append(("attach_file", xpath, path))


@pytest.fixture
def recording() -> Callable[[str], tuple[Session, RecordingDriver]]:
    def make(html: str) -> tuple[Session, RecordingDriver]:
        driver = RecordingDriver(html)
        return Session(driver), driver

    return make


@pytest.fixture
def lxml_session() -> Callable[[str], Session]:
    def make(html: str) -> Session:
        return Session(LxmlDriver(html=html))

    return make


@pytest.fixture
def form_page() -> Session:
    session = Session(LxmlDriver())
    session.start()
    session.visit(str(FIXTURES / "form.html"))
    return session
