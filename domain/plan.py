"""
Bootstrap plan domain model
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from domain.steps.base import Step


@dataclass(frozen=True)
class PlanMeta:
    id: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class BootstrapPlan:
    """
    Named, ordered list of steps. Order is execution order.
    """
    meta: PlanMeta
    steps: List[Step] = field(default_factory=list)

    def step_ids(self) -> List[str]:
        return [s.id for s in self.steps]
