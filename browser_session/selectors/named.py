"""
Named semantic selectors: link, button, field.

Each kind is a list of XPath templates in priority order. ``alternatives()``
returns them filled in with the quoted locator; finders walk that list and
stop at the first one that matches, so an id match always beats a textual
match. ``named_xpath()`` joins the same templates into one union expression.

Matching is case-sensitive throughout.
"""
# @file purpose: Build priority-ordered XPath alternatives for named selectors.

from __future__ import annotations

from typing import Dict, List

from ..core.errors import UnsupportedSelectorType
from .xpath import xpath_literal

_TEXT = "normalize-space(string(.))"

_BUTTON_TYPES = "./@type = 'submit' or ./@type = 'image' or ./@type = 'button'"
_FIELD_KINDS = "self::input or self::textarea or self::select"
_FIELD_TYPES = (
    "not(./@type = 'submit' or ./@type = 'image' or ./@type = 'button' or ./@type = 'hidden')"
)
_FIELD = f".//*[{_FIELD_KINDS}][{_FIELD_TYPES}]"

# %(locator)s is substituted with an already-quoted XPath literal
_TEMPLATES: Dict[str, List[str]] = {
    "link": [
        ".//a[./@id = %(locator)s]",
        f".//a[contains({_TEXT}, %(locator)s)]",
        ".//a[contains(./@title, %(locator)s)]",
        ".//a[.//img[contains(./@alt, %(locator)s)]]",
    ],
    "button": [
        f".//input[{_BUTTON_TYPES}][./@id = %(locator)s] | .//button[./@id = %(locator)s]",
        f".//input[{_BUTTON_TYPES}][contains(./@value, %(locator)s)]"
        " | .//button[contains(./@value, %(locator)s)]",
        ".//input[./@type = 'image'][contains(./@alt, %(locator)s)]",
        f".//button[contains({_TEXT}, %(locator)s)]",
        f".//input[{_BUTTON_TYPES}][contains(./@title, %(locator)s)]"
        " | .//button[contains(./@title, %(locator)s)]",
    ],
    "field": [
        _FIELD + "[./@id = %(locator)s]",
        _FIELD + "[./@name = %(locator)s]",
        _FIELD + f"[./@id = //label[contains({_TEXT}, %(locator)s)]/@for]",
        f".//label[contains({_TEXT}, %(locator)s)]//*[{_FIELD_KINDS}][{_FIELD_TYPES}]",
        _FIELD + "[./@placeholder = %(locator)s]",
    ],
}

NAMED_KINDS = tuple(_TEMPLATES)


def alternatives(kind: str, locator: str) -> list[str]:
    """Priority-ordered XPath expressions for ``kind`` matching ``locator``."""
    try:
        templates = _TEMPLATES[kind]
    except KeyError as e:
        raise UnsupportedSelectorType(kind, NAMED_KINDS) from e
    lit = xpath_literal(locator)
    return [t % {"locator": lit} for t in templates]


def named_xpath(kind: str, locator: str) -> str:
    return " | ".join(alternatives(kind, locator))
