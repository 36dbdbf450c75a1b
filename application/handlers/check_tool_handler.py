from __future__ import annotations

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.tool import CheckToolStep
from domain.version import format_version, meets_minimum, parse_version


class CheckToolStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, CheckToolStep)

    def handle(self, step: CheckToolStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        result = deps.runner.run(step.tool, list(step.version_args), cwd=ctx.project_dir)

        if result.not_found:
            return StepOutcome.failure(self._not_installed_message(step))

        if not result.ok:
            return StepOutcome.failure(
                f"{step.label} is installed but '{step.tool} {' '.join(step.version_args)}' "
                f"exited with status {result.exit_code}"
            )

        output = result.stdout.strip() or result.stderr.strip()
        detected = parse_version(output)
        deps.logger.debug(
            "tool.detected",
            step_id=step.id,
            tool=step.tool,
            version=format_version(detected) if detected else None,
        )

        if step.min_version is None:
            return StepOutcome.success(format_version(detected) if detected else output or None)

        if detected is None:
            return StepOutcome.failure(
                f"Could not determine the {step.label} version from: {output!r}"
            )

        if not meets_minimum(output, step.min_version):
            return StepOutcome.failure(
                f"{step.label} {format_version(detected)} is below the required "
                f"minimum version {step.min_version}. Please upgrade {step.label}"
                + (f" ({step.install_url})" if step.install_url else "")
                + " and try again."
            )

        return StepOutcome.success(format_version(detected))

    def _not_installed_message(self, step: CheckToolStep) -> str:
        hint = f" ({step.install_url})" if step.install_url else ""
        return (
            f"{step.label} is not installed. "
            f"Please install {step.label}{hint} and try again."
        )
