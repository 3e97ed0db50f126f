"""
入参模型: 定义脚本步骤的 Pydantic v2 参数约束。
在脚本 → 驱动 的边界先做强校验, 拦截坏数据, 统一错误结构。
包含:
- VisitParams { url: NonEmptyStr }
- LocatorParams { locator: NonEmptyStr }
- FillParams { locator, value: TextLimited<=4000 }
- SelectParams { locator, value }
- AttachParams { locator, path }
- XpathParams { xpath } / AttrParams { xpath, attr }
"""
# @file purpose: Define parameter schemas for script steps using Pydantic v2.

from typing import Annotated

from pydantic import BaseModel, Field

# 辅助约束类型
NonEmptyStr = Annotated[str, Field(min_length=1)]
TextLimited = Annotated[str, Field(max_length=4000)]


class VisitParams(BaseModel):
    """Parameters for visit."""

    url: NonEmptyStr


class LocatorParams(BaseModel):
    """Link/button/field locator: id, name, label, text, ..."""

    locator: NonEmptyStr


class FillParams(BaseModel):
    locator: NonEmptyStr
    value: TextLimited


class SelectParams(BaseModel):
    locator: NonEmptyStr
    value: str


class AttachParams(BaseModel):
    locator: NonEmptyStr
    path: NonEmptyStr = Field(..., description="Local file path")


class XpathParams(BaseModel):
    xpath: NonEmptyStr


class AttrParams(BaseModel):
    xpath: NonEmptyStr
    attr: NonEmptyStr
