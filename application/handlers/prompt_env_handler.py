from __future__ import annotations

from typing import Dict

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.ports.prompt import PromptInputError
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.env import PromptEnvStep


class PromptEnvStepHandler(StepHandler):
    """
    オペレーターに値を入力してもらい .env.local に書き込む。
    入力が得られるまでブロックする（非対話モードは無し）。
    """

    def supports(self, step) -> bool:
        return isinstance(step, PromptEnvStep)

    def handle(self, step: PromptEnvStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        target = ctx.resolve(step.path)

        try:
            current = deps.env_files.read(target)
        except OSError as exc:
            return StepOutcome.failure(f"Could not read {step.path}: {exc}")

        collected: Dict[str, str] = {}
        try:
            for env_key in step.keys:
                suggestion = current.get(env_key.key) or env_key.default
                collected[env_key.key] = deps.prompt.ask(env_key.prompt, default=suggestion)
        except PromptInputError as exc:
            return StepOutcome.failure(f"No input for {step.path}: {exc}")

        try:
            deps.env_files.update(target, collected)
        except OSError as exc:
            return StepOutcome.failure(f"Could not write {step.path}: {exc}")

        ctx.env.update(collected)
        deps.logger.debug("env.saved", step_id=step.id, path=str(target), keys=list(collected))
        return StepOutcome.success(f"saved {', '.join(collected)} to {step.path}")
