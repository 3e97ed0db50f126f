"""
Selectors handler: the one place that knows which selector types exist.
Session and elements hand it (type, locator) and get XPath back.
"""

from __future__ import annotations

from . import builtin  # noqa: F401  (registers built-in translators)
from . import registry
from .named import NAMED_KINDS, alternatives


class SelectorsHandler:
    def supports(self, selector_type: str) -> bool:
        return selector_type in registry.list_translators()

    def selector_to_xpath(self, selector_type: str, locator: str) -> str:
        """Translate a selector to XPath; raises UnsupportedSelectorType on unknown tags."""
        return registry.translate(selector_type, locator)

    to_xpath = selector_to_xpath

    def alternatives(self, selector_type: str, locator: str) -> list[str]:
        """
        Priority-ordered XPath expressions for a selector.
        Named kinds yield one expression per matching rule; every other type
        yields its single translation.
        """
        if selector_type in NAMED_KINDS and self.supports(selector_type):
            return alternatives(selector_type, locator)
        return [self.selector_to_xpath(selector_type, locator)]
