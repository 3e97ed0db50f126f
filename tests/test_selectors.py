import sys
from collections.abc import Iterator

import pytest

from browser_session.core.errors import InvalidSelector, TranslatorUnavailable, UnsupportedSelectorType
from browser_session.selectors import registry
from browser_session.selectors.builtin import _css_translator
from browser_session.selectors.handler import SelectorsHandler
from browser_session.selectors.named import alternatives, named_xpath


@pytest.fixture
def handler() -> SelectorsHandler:
    return SelectorsHandler()


@pytest.fixture
def restore_registry() -> Iterator[None]:
    saved = registry.list_translators()
    yield
    registry._reset_registry_for_tests()
    for tag, fn in saved.items():
        registry.register(tag, fn)


def css_or_skip(handler: SelectorsHandler, locator: str) -> str:
    try:
        return handler.selector_to_xpath("css", locator)
    except TranslatorUnavailable as e:
        pytest.skip(str(e))


def test_css_translation(handler: SelectorsHandler) -> None:
    assert css_or_skip(handler, "h3") == "descendant-or-self::h3"
    assert css_or_skip(handler, "h3 > span") == "descendant-or-self::h3/span"


def test_invalid_css_raises_invalid_selector(handler: SelectorsHandler) -> None:
    css_or_skip(handler, "h3")
    with pytest.raises(InvalidSelector) as ei:
        handler.selector_to_xpath("css", "h3 >")
    assert ei.value.locator == "h3 >"


@pytest.fixture
def fresh_css_engine() -> Iterator[None]:
    _css_translator.cache_clear()
    yield
    _css_translator.cache_clear()


def test_css_without_cssselect_is_unavailable(
    handler: SelectorsHandler, fresh_css_engine: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setitem(sys.modules, "cssselect", None)
    with pytest.raises(TranslatorUnavailable) as ei:
        handler.selector_to_xpath("css", "h3")
    assert ei.value.translator == "css"
    assert "cssselect" in ei.value.reason
    # other types keep working
    assert handler.selector_to_xpath("id", "x") == ".//*[./@id = 'x']"


def test_unsupported_type_names_known_tags(handler: SelectorsHandler) -> None:
    with pytest.raises(UnsupportedSelectorType) as ei:
        handler.selector_to_xpath("sizzle", "div")
    assert ei.value.selector_type == "sizzle"
    assert "xpath" in ei.value.known


@pytest.mark.parametrize(
    "tag, locator",
    [("xpath", "//a"), ("id", "main"), ("content", "Hello"), ("link", "Go"), ("button", "Save"), ("field", "Email")],
)
def test_translation_is_deterministic(handler: SelectorsHandler, tag: str, locator: str) -> None:
    assert handler.to_xpath(tag, locator) == handler.to_xpath(tag, locator)


def test_simple_translators(handler: SelectorsHandler) -> None:
    assert handler.selector_to_xpath("xpath", "//div[@id='x']") == "//div[@id='x']"
    assert handler.selector_to_xpath("id", "main") == ".//*[./@id = 'main']"
    assert handler.selector_to_xpath("content", "it's") == """.//*[contains(normalize-space(string(.)), "it's")]"""


def test_named_union_keeps_priority_order() -> None:
    alts = alternatives("field", "Email")
    assert alts[0].endswith("[./@id = 'Email']")
    assert alts[1].endswith("[./@name = 'Email']")
    assert named_xpath("field", "Email") == " | ".join(alts)


def test_named_unknown_kind() -> None:
    with pytest.raises(UnsupportedSelectorType):
        alternatives("checkbox", "x")


def test_handler_alternatives(handler: SelectorsHandler) -> None:
    assert handler.alternatives("id", "main") == [".//*[./@id = 'main']"]
    assert handler.alternatives("link", "Go") == alternatives("link", "Go")


def test_register_custom_translator(handler: SelectorsHandler, restore_registry: None) -> None:
    @registry.translator("name")
    def name_to_xpath(locator: str) -> str:
        return f".//*[@name = '{locator}']"

    assert handler.supports("name")
    assert handler.selector_to_xpath("name", "q") == ".//*[@name = 'q']"


def test_reset_registry_drops_everything(handler: SelectorsHandler, restore_registry: None) -> None:
    registry._reset_registry_for_tests()
    with pytest.raises(UnsupportedSelectorType):
        handler.selector_to_xpath("xpath", "//a")
