from pathlib import Path

import pytest

from browser_session.core.errors import DriverError
from browser_session.io.lxml_driver import LxmlDriver

FIXTURES = Path(__file__).resolve().parent / "fixtures"

FORM = """
<input id="t" type="text">
<textarea id="ta">old</textarea>
<input id="c" type="checkbox">
<input id="r1" type="radio" name="size" checked>
<input id="r2" type="radio" name="size">
<select id="s"><option value="1" selected>One</option><option value="2">Two</option></select>
<select id="m" multiple><option value="a" selected>A</option><option value="b">B</option></select>
<input id="f" type="file">
"""


@pytest.fixture
def driver() -> LxmlDriver:
    return LxmlDriver(html=FORM)


def test_find_returns_absolute_paths(driver: LxmlDriver) -> None:
    assert driver.find("//input[@type='radio']") == ["/html/body/input[3]", "/html/body/input[4]"]
    assert driver.find("//video") == []
    assert driver.find("count(//input)") == []


def test_set_value_on_inputs_and_textarea(driver: LxmlDriver) -> None:
    driver.set_value("//input[@id='t']", "hello")
    driver.set_value("//textarea", "new text")
    assert driver.get_attribute("//input[@id='t']", "value") == "hello"
    assert driver.get_text("//textarea") == "new text"


def test_set_value_rejects_checkbox_file_and_non_fields(driver: LxmlDriver) -> None:
    for xpath in ("//input[@id='c']", "//input[@id='f']", "//body"):
        with pytest.raises(DriverError):
            driver.set_value(xpath, "x")


def test_checkbox_check_uncheck_and_click_toggle(driver: LxmlDriver) -> None:
    driver.check("//input[@id='c']")
    assert driver.get_attribute("//input[@id='c']", "checked") == "checked"
    driver.uncheck("//input[@id='c']")
    assert driver.get_attribute("//input[@id='c']", "checked") is None
    driver.click("//input[@id='c']")
    assert driver.get_attribute("//input[@id='c']", "checked") == "checked"


def test_radio_check_clears_group(driver: LxmlDriver) -> None:
    driver.check("//input[@id='r2']")
    assert driver.get_attribute("//input[@id='r1']", "checked") is None
    assert driver.get_attribute("//input[@id='r2']", "checked") == "checked"


def test_check_requires_checkable(driver: LxmlDriver) -> None:
    with pytest.raises(DriverError):
        driver.check("//input[@id='t']")


def test_select_option_by_value_and_label(driver: LxmlDriver) -> None:
    driver.select_option("//select[@id='s']", "Two")
    assert driver.get_attribute("//option[@value='1']", "selected") is None
    assert driver.get_attribute("//option[@value='2']", "selected") == "selected"
    driver.set_value("//select[@id='s']", "1")
    assert driver.get_attribute("//option[@value='1']", "selected") == "selected"


def test_multiple_select_keeps_previous(driver: LxmlDriver) -> None:
    driver.select_option("//select[@id='m']", "b")
    assert driver.get_attribute("//option[@value='a']", "selected") is not None
    assert driver.get_attribute("//option[@value='b']", "selected") == "selected"


def test_select_option_missing_value(driver: LxmlDriver) -> None:
    with pytest.raises(DriverError):
        driver.select_option("//select[@id='s']", "Three")
    with pytest.raises(DriverError):
        driver.select_option("//input[@id='t']", "1")


def test_attach_file(driver: LxmlDriver, tmp_path: Path) -> None:
    cv = tmp_path / "cv.pdf"
    with pytest.raises(FileNotFoundError):
        driver.attach_file("//input[@id='f']", str(cv))
    cv.write_bytes(b"%PDF")
    driver.attach_file("//input[@id='f']", str(cv))
    assert driver.get_attribute("//input[@id='f']", "value") == str(cv)
    with pytest.raises(DriverError):
        driver.attach_file("//input[@id='t']", str(cv))


def test_invalid_address_and_invalid_xpath(driver: LxmlDriver) -> None:
    with pytest.raises(DriverError) as ei:
        driver.click("//h1")
    assert ei.value.xpath == "//h1"
    with pytest.raises(DriverError):
        driver.find("//[")


def test_requires_loaded_page() -> None:
    with pytest.raises(DriverError):
        LxmlDriver().find("//a")


def test_visit_and_follow_local_link() -> None:
    driver = LxmlDriver()
    driver.visit(str(FIXTURES / "form.html"))
    driver.click("//a[text()='Next page']")
    assert driver.get_current_url().endswith("next.html")
    assert driver.get_text("//h1") == "Second page"


def test_fragment_link_stays_on_page() -> None:
    driver = LxmlDriver()
    driver.visit((FIXTURES / "form.html").as_uri())
    driver.click("//a[@id='home']")
    assert driver.get_current_url().endswith("form.html")


def test_visit_errors(tmp_path: Path) -> None:
    driver = LxmlDriver()
    with pytest.raises(DriverError):
        driver.visit("https://example.com/")
    with pytest.raises(DriverError):
        driver.visit(str(tmp_path / "missing.html"))


def test_stop_unloads_page() -> None:
    driver = LxmlDriver(html="<p>x</p>")
    driver.start()
    assert driver.is_started()
    driver.stop()
    assert not driver.is_started()
    assert driver.get_content() == ""
    assert driver.get_current_url() == "about:blank"
