"""
Built-in translators, registered on import:
- xpath: identity
- css: cssselect (optional; missing engine -> TranslatorUnavailable)
- id / content: simple attribute and text matches
- link / button / field: named semantic selectors (see named.py)
"""
# @file purpose: Register the built-in selector translators.

from __future__ import annotations

from functools import lru_cache
from typing import Any

from ..core.errors import InvalidSelector, TranslatorUnavailable
from .named import named_xpath
from .registry import translator
from .xpath import xpath_literal


@translator("xpath")
def xpath_to_xpath(locator: str) -> str:
    return locator


@lru_cache(maxsize=1)
def _css_translator() -> Any:
    try:
        from cssselect import GenericTranslator
    except ImportError as e:
        raise TranslatorUnavailable("css", f"cssselect is not installed ({e})") from e
    return GenericTranslator()


@translator("css")
def css_to_xpath(locator: str) -> str:
    """``h3 > span`` -> ``descendant-or-self::h3/span``"""
    engine = _css_translator()
    from cssselect import SelectorError

    try:
        return engine.css_to_xpath(locator)
    except SelectorError as e:
        raise InvalidSelector("css", locator, str(e)) from e


@translator("id")
def id_to_xpath(locator: str) -> str:
    return f".//*[./@id = {xpath_literal(locator)}]"


@translator("content")
def content_to_xpath(locator: str) -> str:
    return f".//*[contains(normalize-space(string(.)), {xpath_literal(locator)})]"


@translator("link")
def link_to_xpath(locator: str) -> str:
    return named_xpath("link", locator)


@translator("button")
def button_to_xpath(locator: str) -> str:
    return named_xpath("button", locator)


@translator("field")
def field_to_xpath(locator: str) -> str:
    return named_xpath("field", locator)
