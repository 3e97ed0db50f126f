"""
定义项目级异常类型，统一错误语义与捕获边界。
- BrowserSessionError: 所有自定义异常的基类
- ElementNotFound: 动作需要的元素没有找到（查找器返回空）
- UnsupportedSelectorType: 选择器类型没有注册对应的翻译器
- TranslatorUnavailable: 可选的翻译引擎无法加载（如 cssselect 未安装）
- InvalidSelector: 翻译引擎拒绝了该定位串
- DriverError: 进程内驱动错误（地址无效、元素类型不符）
- ActionExecutionError: 脚本步骤执行期错误，封装底层原因
"""
# @file purpose: Define error taxonomy for browser-session.

from typing import Any, Iterable, Optional


class BrowserSessionError(Exception):
    """Base class for all custom errors in browser-session."""


class ElementNotFound(BrowserSessionError):
    """Raised by an action verb once a lookup that must succeed came back empty."""

    def __init__(self, kind: str, locator: str) -> None:
        super().__init__(f'{kind} matching locator "{locator}" not found')
        self.kind: str = kind
        self.locator: str = locator


class UnsupportedSelectorType(BrowserSessionError):
    """Raised for a selector tag with no registered translator."""

    def __init__(self, selector_type: str, known: Iterable[str] = ()) -> None:
        self.selector_type: str = selector_type
        self.known: list[str] = sorted(known)
        msg = f"unsupported selector type: {selector_type!r}"
        if self.known:
            msg += f" (known: {', '.join(self.known)})"
        super().__init__(msg)


class TranslatorUnavailable(BrowserSessionError):
    """
    Raised when the engine behind a translator cannot be loaded.
    Callers that depend on it should skip rather than fail.
    """

    def __init__(self, translator: str, reason: str) -> None:
        super().__init__(f"translator {translator!r} unavailable: {reason}")
        self.translator: str = translator
        self.reason: str = reason


class InvalidSelector(BrowserSessionError):
    """Raised when a translator cannot parse the given locator."""

    def __init__(self, selector_type: str, locator: str, reason: str = "") -> None:
        msg = f"invalid {selector_type} selector {locator!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.selector_type: str = selector_type
        self.locator: str = locator


class DriverError(BrowserSessionError):
    """Driver-level failure raised by the bundled drivers."""

    def __init__(self, message: str, *, xpath: Optional[str] = None) -> None:
        super().__init__(message)
        self.xpath: Optional[str] = xpath

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} | xpath={self.xpath}" if self.xpath else base


class ActionExecutionError(BrowserSessionError):
    """
    Raised when a script step fails to execute.
    步骤执行期错误（元素缺失、驱动异常等）。
    统一封装上下文，便于 CLI/runner 打印一致的信息与诊断。
    """

    def __init__(
        self,
        action: str,
        message: str,
        *,
        selector: str | None = None,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.action: str = action
        self.selector: str | None = selector
        self.details: dict[str, Any] = details or {}
        self.cause: BaseException | None = cause

    def __str__(self) -> str:
        parts = [f"[{self.action}] {super().__str__()}"]
        if self.selector:
            parts.append(f"selector={self.selector}")
        if self.details:
            kv = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            parts.append(f"details={{ {kv} }}")
        if self.cause is not None:
            parts.append(f"cause={self.cause}")
        return " | ".join(parts)
