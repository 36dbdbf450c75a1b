from __future__ import annotations

from application.plans.options import PlanOptions
from application.plans.prerequisites import check_node, check_npm, npm_build, npm_dev, npm_install
from domain.plan import BootstrapPlan, PlanMeta


def build_installer_plan(options: PlanOptions) -> BootstrapPlan:
    return BootstrapPlan(
        meta=PlanMeta(
            id="installer",
            name="Next.js installer",
            description="Check Node.js and npm, install dependencies, build and start the dev server.",
        ),
        steps=[
            check_node(None),
            check_npm(),
            npm_install(),
            npm_build(),
            npm_dev(),
        ],
    )
