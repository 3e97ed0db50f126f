"""
结构化的步骤返回值，用于向上层（runner/CLI）汇报执行结果。
"""
# @file purpose: Define ActionResult model for step outputs.

from __future__ import annotations

from typing import Any, Optional
from pydantic import BaseModel, Field


class ActionResult(BaseModel):
    """
    统一的步骤返回值：
    - ok: 是否成功
    - extracted_content: get_text / get_attr 读到的文本，其他步骤为 None
    - meta: 其它诊断信息（locator/URL/value 等），便于日志与回放
    """

    ok: bool = True
    extracted_content: Optional[str] = None
    meta: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def success(cls, **meta: Any) -> "ActionResult":
        return cls(ok=True, meta=meta)

    @classmethod
    def failure(cls, **meta: Any) -> "ActionResult":
        return cls(ok=False, meta=meta)
