# application/executor/sequencer.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import time
import uuid

from application.executor.handler_registry import HandlerRegistry
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.base import Step


@dataclass(frozen=True)
class ExecutionResult:
    ok: bool
    failed_step_id: Optional[str] = None
    error_message: Optional[str] = None
    executed: List[str] = field(default_factory=list)
    # advisory steps that failed without stopping the run
    warnings: List[str] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


class BootstrapSequencer:
    """
    Runs steps strictly in order.

    Each executed step gets exactly one run log record and one status line.
    A failed fatal step ends the run; a failed advisory step is recorded as a
    warning and the run continues. Nothing is rolled back.
    """

    def __init__(self, registry: HandlerRegistry):
        self._registry = registry

    def execute(self, steps: List[Step], ctx: RunContext, deps: ExecutionDeps) -> ExecutionResult:
        if not ctx.run_id:
            ctx.run_id = uuid.uuid4().hex

        deps = deps.with_logger(deps.logger.bind(run_id=ctx.run_id))
        deps.logger.debug("run.start", project_dir=str(ctx.project_dir), steps=len(steps))

        warnings: List[str] = []

        for step in steps:
            if not step.enabled:
                deps.logger.debug("step.skipped", step_id=step.id, reason="disabled")
                continue

            outcome = self._execute_step(step, ctx, deps)
            ctx.executed.append(step.id)

            if outcome.ok:
                self._record_success(step, outcome, deps)
                continue

            if step.is_fatal:
                deps.run_log.append(f"[FATAL] {step.name}: {outcome.error_message}")
                deps.logger.error(
                    "step.failed",
                    step_id=step.id,
                    message=f"Error: {outcome.error_message}",
                )
                return ExecutionResult(
                    ok=False,
                    failed_step_id=step.id,
                    error_message=outcome.error_message,
                    executed=list(ctx.executed),
                    warnings=warnings,
                )

            warnings.append(step.id)
            deps.run_log.append(f"[WARN] {step.name}: {outcome.error_message}")
            deps.logger.warning(
                "step.warning",
                step_id=step.id,
                message=f"Warning: {step.name} failed: {outcome.error_message}",
            )

        deps.logger.debug("run.end", executed=len(ctx.executed), warnings=len(warnings))
        return ExecutionResult(ok=True, executed=list(ctx.executed), warnings=warnings)

    def _execute_step(self, step: Step, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        handler = self._registry.get_handler(step)

        deps.logger.info(
            "step.start",
            step_id=step.id,
            step_type=type(step).__name__,
            message=f"{step.name}...",
        )
        t0 = time.perf_counter()

        outcome: StepOutcome = handler.handle(step, ctx, deps)

        if outcome is None:
            raise RuntimeError(
                f"Handler returned None: handler={type(handler).__name__}, step={step.id} ({type(step).__name__})"
            )

        deps.logger.debug(
            "step.end",
            step_id=step.id,
            ok=outcome.ok,
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )
        return outcome

    def _record_success(self, step: Step, outcome: StepOutcome, deps: ExecutionDeps) -> None:
        record = f"[OK] {step.name}"
        if outcome.detail:
            record = f"{record}: {outcome.detail}"
        deps.run_log.append(record)
        deps.logger.success("step.ok", step_id=step.id, message=record)
