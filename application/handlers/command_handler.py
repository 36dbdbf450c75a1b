from __future__ import annotations

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.command import CommandStep


class CommandStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, CommandStep)

    def handle(self, step: CommandStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        deps.logger.debug("command.run", step_id=step.id, command=step.command_line)

        result = deps.runner.run(
            step.program,
            list(step.args),
            cwd=ctx.project_dir,
            capture=not step.stream_output,
        )

        if result.not_found:
            return StepOutcome.failure(f"{step.program} is not installed")

        if not result.ok:
            message = f"'{step.command_line}' exited with status {result.exit_code}"
            reason = result.last_line("stderr") or result.last_line("stdout")
            if reason:
                message = f"{message}: {reason}"
            return StepOutcome.failure(message)

        return StepOutcome.success(result.last_line() or None)
