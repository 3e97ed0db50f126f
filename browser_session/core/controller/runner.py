# browser_session/core/controller/runner.py
"""
Minimal sequential runner for StepSpec[].

Responsibilities:
- Validate each spec via the step registry
- Execute steps against one Session, with optional caller-side retries
  (driver failures only; a missing element fails at once)
- Return per-step outcomes for CLI rendering
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from .. import registry
from ..action import StepSpec
from ..errors import ActionExecutionError, ElementNotFound
from ..log import get_logger
from ..session import Session

log = get_logger(__name__)


@dataclass
class StepOutcome:
    """UI-friendly outcome used by the CLI."""

    index: int
    name: str
    ok: bool
    detail: str = "-"
    attempts: int = 1
    extracted: str | None = None
    meta: dict[str, Any] | None = None


class Runner:
    def __init__(self, *, retries: int = 0, backoff_s: float = 0.5, stop_on_failure: bool = False) -> None:
        self.retries = max(0, retries)
        self.backoff_s = backoff_s
        self.stop_on_failure = stop_on_failure

    def run(self, session: Session, specs: list[StepSpec]) -> list[StepOutcome]:
        outcomes: list[StepOutcome] = []

        for i, spec in enumerate(specs, start=1):
            name = spec.name

            # 1) validate params
            try:
                _meta, params = registry.validate_spec(spec)
            except (ValidationError, KeyError) as e:
                outcomes.append(StepOutcome(index=i, name=name, ok=False, detail=f"invalid spec: {e}"))
                if self.stop_on_failure:
                    break
                continue

            # 2) execute with retries
            outcome = self._execute(session, i, name, params)
            outcomes.append(outcome)
            if not outcome.ok and self.stop_on_failure:
                break

        return outcomes

    def _execute(self, session: Session, index: int, name: str, params: Any) -> StepOutcome:
        fn = registry.get_step(name)
        attempt = 0
        while True:
            attempt += 1
            try:
                res = fn(session, params)
            except ActionExecutionError as e:
                # 元素缺失不重试：第一次失败就上报
                if attempt > self.retries or isinstance(e.cause, ElementNotFound):
                    log.info("step %d (%s) failed: %s", index, name, e)
                    return StepOutcome(index=index, name=name, ok=False, detail=str(e), attempts=attempt)
                log.debug("step %d (%s) attempt %d failed, retrying", index, name, attempt)
                time.sleep(self.backoff_s * attempt)
                continue

            detail = "-"
            text = res.extracted_content
            if text:
                detail = (text[:120] + "…") if len(text) > 120 else text
            elif "url" in res.meta:
                detail = str(res.meta["url"])
            elif "selector" in res.meta:
                detail = f'selector="{res.meta["selector"]}"'

            return StepOutcome(
                index=index,
                name=name,
                ok=res.ok,
                detail=detail,
                attempts=attempt,
                extracted=text,
                meta=res.meta,
            )
