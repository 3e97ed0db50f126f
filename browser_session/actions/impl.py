"""
Script steps bound to a Session:
- visit
- click_link / click_button
- fill_field / check_field / uncheck_field / select_field_option / attach_file_to_field
- get_text / get_attr

Each step:
  1) Expects a Session + validated params (Pydantic v2)
  2) Delegates to one page verb
  3) Returns ActionResult, or raises ActionExecutionError on failure
"""

# @file purpose: Implement and register script steps.
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from browser_session.core.errors import ActionExecutionError, ElementNotFound
from browser_session.core.registry import step
from browser_session.core.result import ActionResult
from browser_session.core.session import Session

from .params import (
    AttachParams,
    AttrParams,
    FillParams,
    LocatorParams,
    SelectParams,
    VisitParams,
    XpathParams,
)


@contextmanager
def _failing_as(name: str, message: str, selector: str | None = None, **details: Any) -> Iterator[None]:
    try:
        yield
    except ElementNotFound as e:
        # 元素缺失单独处理：kind 放进 details，cause 保留原异常（runner 据此不重试）
        raise ActionExecutionError(
            action=name,
            message=str(e),
            selector=selector,
            details={"kind": e.kind, **details},
            cause=e,
        ) from e
    except Exception as e:  # noqa: BLE001
        raise ActionExecutionError(
            action=name,
            message=message,
            selector=selector,
            details=details,
            cause=e,
        ) from e


@step("visit", params_model=VisitParams)
def visit(session: Session, params: VisitParams) -> ActionResult:
    with _failing_as("visit", "failed to open url", url=params.url):
        session.visit(params.url)
    return ActionResult.success(step="visit", url=session.get_current_url())


@step("click_link", params_model=LocatorParams)
def click_link(session: Session, params: LocatorParams) -> ActionResult:
    with _failing_as("click_link", "failed to click link", params.locator):
        session.page.click_link(params.locator)
    return ActionResult.success(step="click_link", selector=params.locator)


@step("click_button", params_model=LocatorParams)
def click_button(session: Session, params: LocatorParams) -> ActionResult:
    with _failing_as("click_button", "failed to click button", params.locator):
        session.page.click_button(params.locator)
    return ActionResult.success(step="click_button", selector=params.locator)


@step("fill_field", params_model=FillParams)
def fill_field(session: Session, params: FillParams) -> ActionResult:
    with _failing_as("fill_field", "failed to fill field", params.locator):
        session.page.fill_field(params.locator, params.value)
    return ActionResult.success(step="fill_field", selector=params.locator, length=len(params.value))


@step("check_field", params_model=LocatorParams)
def check_field(session: Session, params: LocatorParams) -> ActionResult:
    with _failing_as("check_field", "failed to check field", params.locator):
        session.page.check_field(params.locator)
    return ActionResult.success(step="check_field", selector=params.locator)


@step("uncheck_field", params_model=LocatorParams)
def uncheck_field(session: Session, params: LocatorParams) -> ActionResult:
    with _failing_as("uncheck_field", "failed to uncheck field", params.locator):
        session.page.uncheck_field(params.locator)
    return ActionResult.success(step="uncheck_field", selector=params.locator)


@step("select_field_option", params_model=SelectParams)
def select_field_option(session: Session, params: SelectParams) -> ActionResult:
    with _failing_as("select_field_option", "failed to select option", params.locator, value=params.value):
        session.page.select_field_option(params.locator, params.value)
    return ActionResult.success(step="select_field_option", selector=params.locator, value=params.value)


@step("attach_file_to_field", params_model=AttachParams)
def attach_file_to_field(session: Session, params: AttachParams) -> ActionResult:
    with _failing_as("attach_file_to_field", "failed to attach file", params.locator, path=params.path):
        session.page.attach_file_to_field(params.locator, params.path)
    return ActionResult.success(step="attach_file_to_field", selector=params.locator, file=params.path)


@step("get_text", params_model=XpathParams)
def get_text(session: Session, params: XpathParams) -> ActionResult:
    with _failing_as("get_text", "failed to read text", params.xpath):
        txt = session.page.get_text_by_xpath(params.xpath)
    return ActionResult(
        ok=True,
        extracted_content=txt,
        meta={"step": "get_text", "selector": params.xpath, "empty": not txt},
    )


@step("get_attr", params_model=AttrParams)
def get_attr(session: Session, params: AttrParams) -> ActionResult:
    with _failing_as("get_attr", "failed to read attribute", params.xpath, attr=params.attr):
        value = session.page.get_attr_by_xpath(params.xpath, params.attr)
    return ActionResult(
        ok=True,
        extracted_content=value,
        meta={"step": "get_attr", "selector": params.xpath, "attr": params.attr},
    )
