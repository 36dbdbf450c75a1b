from __future__ import annotations

from typing import Callable, Dict, List

from application.plans.installer import build_installer_plan
from application.plans.nextjs import build_nextjs_plan
from application.plans.options import PlanOptions
from application.plans.rtk_query import build_rtk_query_plan
from domain.plan import BootstrapPlan

DEFAULT_PLAN = "nextjs"

_BUILDERS: Dict[str, Callable[[PlanOptions], BootstrapPlan]] = {
    "nextjs": build_nextjs_plan,
    "installer": build_installer_plan,
    "rtk-query": build_rtk_query_plan,
}


def builtin_plan_names() -> List[str]:
    return list(_BUILDERS)


def is_builtin_plan(name: str) -> bool:
    return name in _BUILDERS


def get_builtin_plan(name: str, options: PlanOptions) -> BootstrapPlan:
    builder = _BUILDERS.get(name)
    if builder is None:
        raise KeyError(f"Unknown built-in plan: {name}")
    return builder(options)


__all__ = [
    "DEFAULT_PLAN",
    "PlanOptions",
    "builtin_plan_names",
    "get_builtin_plan",
    "is_builtin_plan",
]
