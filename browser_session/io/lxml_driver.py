"""
In-process Driver implementation over lxml.html.

Conforms to io/driver.py's Driver Protocol. No browser and no JavaScript:
the page is a parsed lxml tree and every interaction edits that tree.

- Pages come from local paths, file:// URLs or set_content(html).
- Addresses returned by find() are absolute tree paths (`/html/body/a[2]`).
- click() follows local links and toggles checkboxes/radios.
- Form writes go to the `value` / `checked` / `selected` attributes, so
  get_attribute() and get_content() observe them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import urldefrag, urljoin, urlparse
from urllib.request import url2pathname

import lxml.html
from lxml import etree

from ..core.errors import DriverError
from ..core.log import get_logger

log = get_logger(__name__)

_BLANK = "about:blank"
_EMPTY_DOC = "<html><head></head><body></body></html>"


class LxmlDriver:
    """
    A concrete Driver backed by an lxml.html document tree.
    Construct with `html=` to start on an inline page.
    """

    def __init__(self, *, html: Optional[str] = None, url: str = _BLANK) -> None:
        self._started = False
        self._tree: Optional[etree._ElementTree] = None
        self._url = url
        if html is not None:
            self.set_content(html, url=url)

    # ---------------- lifecycle ----------------

    def start(self) -> None:
        self._started = True

    def stop(self) -> None:
        self._started = False
        self._tree = None
        self._url = _BLANK

    def is_started(self) -> bool:
        return self._started

    # ---------------- navigation ----------------

    def set_content(self, html: str, *, url: str = _BLANK) -> None:
        """Replace the current page with `html`."""
        doc = lxml.html.document_fromstring(html if html.strip() else _EMPTY_DOC)
        self._tree = doc.getroottree()
        self._url = url

    def visit(self, url: str) -> None:
        path = self._local_path(url)
        if not path.is_file():
            raise DriverError(f"visit(): page not found: {url}")
        self.set_content(path.read_text(encoding="utf-8"), url=path.resolve().as_uri())
        log.debug("visited %s", self._url)

    def get_current_url(self) -> str:
        return self._url

    def get_content(self) -> str:
        if self._tree is None:
            return ""
        return etree.tostring(self._tree, encoding="unicode", method="html")

    # ---------------- queries ----------------

    def find(self, xpath: str) -> list[str]:
        tree = self._require_tree()
        try:
            found = tree.xpath(xpath)
        except etree.XPathError as e:
            raise DriverError(f"invalid xpath: {e}", xpath=xpath) from e
        if not isinstance(found, list):
            return []
        return [tree.getpath(n) for n in found if isinstance(n, etree._Element) and isinstance(n.tag, str)]

    def get_attribute(self, xpath: str, name: str) -> Optional[str]:
        return self._node(xpath).get(name)

    def get_text(self, xpath: str) -> str:
        return " ".join(self._node(xpath).text_content().split())

    # ---------------- interactions ----------------

    def click(self, xpath: str) -> None:
        node = self._node(xpath)
        if node.tag == "input" and self._input_type(node) in ("checkbox", "radio"):
            if self._input_type(node) == "checkbox" and node.get("checked") is not None:
                self._set_checked(node, False)
            else:
                self._set_checked(node, True)
        elif node.tag == "a" and node.get("href"):
            self._follow(node.get("href"))
        else:
            log.debug("click on <%s> has no in-process effect", node.tag)

    def set_value(self, xpath: str, value: str) -> None:
        node = self._node(xpath)
        if node.tag == "select":
            self._select(node, value, xpath)
            return
        if node.tag == "textarea":
            node.value = value
            return
        if node.tag != "input":
            raise DriverError(f"<{node.tag}> is not a form field", xpath=xpath)
        kind = self._input_type(node)
        if kind in ("checkbox", "radio"):
            raise DriverError(f"cannot set value of {kind} input, use check/uncheck", xpath=xpath)
        if kind == "file":
            raise DriverError("cannot set value of file input, use attach_file", xpath=xpath)
        node.value = value

    def check(self, xpath: str) -> None:
        self._set_checked(self._checkable(xpath), True)

    def uncheck(self, xpath: str) -> None:
        self._set_checked(self._checkable(xpath), False)

    def select_option(self, xpath: str, value: str) -> None:
        node = self._node(xpath)
        if node.tag != "select":
            raise DriverError(f"<{node.tag}> is not a select", xpath=xpath)
        self._select(node, value, xpath)

    def attach_file(self, xpath: str, path: str) -> None:
        node = self._node(xpath)
        if node.tag != "input" or self._input_type(node) != "file":
            raise DriverError("element is not a file input", xpath=xpath)
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"attach_file(): file not found: {path}")
        node.set("value", str(p))

    # ---------------- internals ----------------

    def _require_tree(self) -> etree._ElementTree:
        if self._tree is None:
            raise DriverError("no page loaded. Call visit() or set_content() first.")
        return self._tree

    def _node(self, xpath: str) -> lxml.html.HtmlElement:
        tree = self._require_tree()
        addresses = self.find(xpath)
        if not addresses:
            raise DriverError("element not found", xpath=xpath)
        return tree.xpath(addresses[0])[0]

    def _checkable(self, xpath: str) -> lxml.html.HtmlElement:
        node = self._node(xpath)
        if node.tag != "input" or self._input_type(node) not in ("checkbox", "radio"):
            raise DriverError("element is not a checkbox or radio", xpath=xpath)
        return node

    @staticmethod
    def _input_type(node: lxml.html.HtmlElement) -> str:
        return (node.get("type") or "text").lower()

    def _set_checked(self, node: lxml.html.HtmlElement, checked: bool) -> None:
        if checked and self._input_type(node) == "radio" and node.get("name"):
            for other in node.getroottree().xpath(
                "//input[@type = 'radio'][@name = $name]", name=node.get("name")
            ):
                other.attrib.pop("checked", None)
        if checked:
            node.set("checked", "checked")
        else:
            node.attrib.pop("checked", None)

    def _select(self, node: lxml.html.HtmlElement, value: str, xpath: str) -> None:
        options = node.xpath(".//option")
        matches = [o for o in options if self._option_value(o) == value]
        if not matches:
            matches = [o for o in options if " ".join(o.text_content().split()) == value]
        if not matches:
            raise DriverError(f"option {value!r} not found", xpath=xpath)
        if node.get("multiple") is None:
            for o in options:
                o.attrib.pop("selected", None)
        matches[0].set("selected", "selected")

    @staticmethod
    def _option_value(option: lxml.html.HtmlElement) -> str:
        value = option.get("value")
        return value if value is not None else " ".join(option.text_content().split())

    def _follow(self, href: str) -> None:
        target, _fragment = urldefrag(urljoin(self._url, href))
        if urlparse(target).scheme != "file":
            log.debug("not following non-local link %s", target)
            return
        if target == urldefrag(self._url)[0]:
            return
        self.visit(target)

    @staticmethod
    def _local_path(url: str) -> Path:
        parsed = urlparse(url)
        if parsed.scheme == "file":
            return Path(url2pathname(parsed.path))
        if parsed.scheme and len(parsed.scheme) > 1:
            raise DriverError(f"visit(): unsupported url scheme {parsed.scheme!r}: {url}")
        return Path(url)
