"""
Browser driver protocol (abstraction).

This Protocol defines the browser control surface the session and element
layer rely on. It allows plugging different backends (the in-process lxml
driver, Playwright, future CDP-based drivers) without changing elements.

Notes:
- Every element operation takes an XPath address as its primary key.
- `find()` returns addresses in document order; each one must be usable as
  the address of a later call on the same driver.
- Calls are synchronous and blocking. Timeouts/retries, if any, belong to
  the implementation.
- Failures (invalid address, transport loss) are raised as-is; the session
  layer does not wrap them.
"""

from __future__ import annotations

from typing import Optional, Protocol


class Driver(Protocol):
    # -------- lifecycle --------
    def start(self) -> None: ...
    def stop(self) -> None: ...
    def is_started(self) -> bool: ...

    # -------- navigation --------
    def visit(self, url: str) -> None: ...
    def get_current_url(self) -> str: ...
    def get_content(self) -> str: ...

    # -------- queries --------
    def find(self, xpath: str) -> list[str]: ...
    def get_attribute(self, xpath: str, name: str) -> Optional[str]: ...
    def get_text(self, xpath: str) -> str: ...

    # -------- interactions --------
    def click(self, xpath: str) -> None: ...
    def set_value(self, xpath: str, value: str) -> None: ...
    def check(self, xpath: str) -> None: ...
    def uncheck(self, xpath: str) -> None: ...
    def select_option(self, xpath: str, value: str) -> None: ...
    def attach_file(self, xpath: str, path: str) -> None: ...
