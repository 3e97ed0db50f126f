"""
Selector translator registry:
- translators are keyed by selector type tag ("css", "xpath", "link", ...)
- each translator is a pure function: locator -> XPath string
- translate() is the single lookup point and raises on unknown tags
"""
# @file purpose: Provide translator registry and translate().

from __future__ import annotations

from typing import Callable, Dict

from ..core.errors import UnsupportedSelectorType

TranslatorFn = Callable[[str], str]

_REGISTRY: Dict[str, TranslatorFn] = {}


def translator(selector_type: str) -> Callable[[TranslatorFn], TranslatorFn]:
    """
    Decorator registering a translator for ``selector_type``.

        @translator("id")
        def id_to_xpath(locator: str) -> str: ...
    """

    def deco(fn: TranslatorFn) -> TranslatorFn:
        _REGISTRY[selector_type] = fn
        return fn

    return deco


def register(selector_type: str, fn: TranslatorFn) -> None:
    """Non-decorator registration, handy for dynamic wiring or tests."""
    _REGISTRY[selector_type] = fn


def get_translator(selector_type: str) -> TranslatorFn:
    try:
        return _REGISTRY[selector_type]
    except KeyError as e:
        raise UnsupportedSelectorType(selector_type, _REGISTRY) from e


def list_translators() -> Dict[str, TranslatorFn]:
    """Shallow copy for debugging/display."""
    return dict(_REGISTRY)


def translate(selector_type: str, locator: str) -> str:
    return get_translator(selector_type)(locator)


# tests only: reset the registry
def _reset_registry_for_tests() -> None:
    _REGISTRY.clear()
