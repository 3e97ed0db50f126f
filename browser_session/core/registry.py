"""
步骤注册表与元数据:
- 以 name 作为键注册步骤函数
- 绑定 params_model (Pydantic v2) 用于参数校验
- 提供 validate_spec() 在执行前做强校验
"""
# @file purpose: Provide step registry, metadata, and spec validation.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel, TypeAdapter

from .action import StepSpec

# 步骤函数的标准签名: fn(session, params) -> ActionResult
StepFn = Callable[..., Any]


@dataclass(frozen=True)
class StepMeta:
    """步骤元信息：名称 + 绑定的入参模型（可选）"""

    name: str
    params_model: Optional[Type[BaseModel]] = None


_REGISTRY: Dict[str, StepFn] = {}
_META: Dict[str, StepMeta] = {}


def step(name: str, *, params_model: Optional[Type[BaseModel]] = None) -> Callable[[StepFn], StepFn]:
    """
    装饰器：注册步骤函数及其参数模型。
        @step("click_link", params_model=LocatorParams)
        def click_link(session, params): ...
    """

    def deco(fn: StepFn) -> StepFn:
        _REGISTRY[name] = fn
        _META[name] = StepMeta(name=name, params_model=params_model)
        return fn

    return deco


def get_step(name: str) -> StepFn:
    try:
        return _REGISTRY[name]
    except KeyError as e:
        raise KeyError(f"Step not registered: {name}") from e


def get_meta(name: str) -> StepMeta:
    try:
        return _META[name]
    except KeyError as e:
        raise KeyError(f"Step not registered (no metadata): {name}") from e


def list_steps() -> Dict[str, StepMeta]:
    return dict(_META)


def validate_spec(spec: StepSpec) -> Tuple[StepMeta, Optional[BaseModel]]:
    """
    Validate a StepSpec before execution:
    1) the step is registered (KeyError otherwise)
    2) args validate against the bound params_model (ValidationError otherwise)
    3) returns (StepMeta, parsed params | None)
    """
    meta = get_meta(spec.name)

    if meta.params_model is None:
        return meta, None

    params_obj = TypeAdapter(meta.params_model).validate_python(spec.args)
    return meta, params_obj
