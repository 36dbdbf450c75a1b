"""Full bootstrap of a Next.js project."""
from __future__ import annotations

from application.plans import templates
from application.plans.options import PlanOptions
from application.plans.prerequisites import (
    check_docker,
    check_git,
    check_node,
    check_npm,
    npm_build,
    npm_dev,
    npm_install,
)
from domain.plan import BootstrapPlan, PlanMeta
from domain.steps import (
    CommandStep,
    EnvKey,
    GitCommitStep,
    GitInitStep,
    GitTagStep,
    PromptEnvStep,
    Severity,
    WriteFileStep,
)

ENV_KEYS = [
    EnvKey("NEXT_PUBLIC_API_URL", label="API base URL", default="http://localhost:3000/api"),
    EnvKey("NEXT_PUBLIC_SITE_NAME", label="Site name"),
]


def build_nextjs_plan(options: PlanOptions) -> BootstrapPlan:
    env_keys = [
        EnvKey(k.key, label=k.label, default=k.default or options.project_name) for k in ENV_KEYS
    ]
    steps = [
        check_node(options.min_node_version),
        check_npm(),
        check_git(),
        check_docker(),
        GitInitStep(id="git-init", name="Initialize Git repository"),
        npm_install(),
        CommandStep(
            id="npm-update",
            name="Update dependencies",
            program="npm",
            args=["update"],
            severity=Severity.ADVISORY,
        ),
        CommandStep(
            id="npm-audit",
            name="Audit dependencies",
            program="npm",
            args=["audit"],
            severity=Severity.ADVISORY,
        ),
        PromptEnvStep(
            id="env-local",
            name="Configure .env.local",
            path=".env.local",
            keys=env_keys,
        ),
        WriteFileStep(
            id="ci-workflow",
            name="Write CI workflow",
            path=".github/workflows/ci.yml",
            template=templates.CI_WORKFLOW,
        ),
        WriteFileStep(
            id="dockerfile",
            name="Write Dockerfile",
            path="Dockerfile",
            template=templates.DOCKERFILE,
        ),
        WriteFileStep(
            id="readme",
            name="Write README",
            path="README.md",
            template=templates.README,
        ),
        WriteFileStep(
            id="gitignore",
            name="Write .gitignore",
            path=".gitignore",
            template=templates.GITIGNORE,
            overwrite=False,
        ),
        CommandStep(
            id="npm-test",
            name="Run tests",
            program="npm",
            args=["test"],
            severity=Severity.ADVISORY,
        ),
        npm_build(),
        GitCommitStep(
            id="git-commit",
            name="Commit initial project",
            message="Initial commit",
            severity=Severity.ADVISORY,
        ),
        GitTagStep(
            id="git-tag",
            name="Tag initial version",
            tag="v0.1.0",
            severity=Severity.ADVISORY,
        ),
        npm_dev(),
    ]
    return BootstrapPlan(
        meta=PlanMeta(
            id="nextjs",
            name="Next.js bootstrap",
            description="Check prerequisites, install, configure, generate CI/Docker/README, build and serve.",
        ),
        steps=steps,
    )
