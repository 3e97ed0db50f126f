"""
定义脚本步骤的数据契约。
- StepSpec: JSON 脚本中的一个步骤（name + args）
"""
# @file purpose: Define script step data contract.

from typing import Any

from pydantic import BaseModel, Field


class StepSpec(BaseModel):
    name: str = Field(..., description="Registered step name.")
    args: dict[str, Any] = Field(
        default_factory=dict, description="Parameters validated by the step's params model."
    )
