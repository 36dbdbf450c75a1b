from __future__ import annotations

from typing import Set

from domain.exceptions import ValidationError
from domain.plan import BootstrapPlan
from domain.steps.tool import CheckToolStep
from domain.version import parse_version


class PlanValidator:
    def validate(self, plan: BootstrapPlan) -> None:
        if not plan.steps:
            raise ValidationError(f"Plan has no steps: {plan.meta.id}")

        seen: Set[str] = set()
        for index, step in enumerate(plan.steps):
            if not step.id or not step.id.strip():
                raise ValidationError(f"Step #{index + 1} has an empty id")
            if not step.name or not step.name.strip():
                raise ValidationError(f"Step '{step.id}' has an empty name")
            if step.id in seen:
                raise ValidationError(f"Duplicate step id: {step.id}")
            seen.add(step.id)

            # 実行途中で失敗しないよう、最低バージョンは事前に検証する
            if isinstance(step, CheckToolStep) and step.min_version is not None:
                if parse_version(step.min_version) is None:
                    raise ValidationError(
                        f"Step '{step.id}' has an invalid min_version: {step.min_version}"
                    )
