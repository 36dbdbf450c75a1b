from __future__ import annotations

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from application.services.template_renderer import (
    RenderSources,
    TemplateRenderError,
    TemplateRenderer,
)
from domain.run import RunContext
from domain.steps.files import EnsureDirsStep, WriteFileStep


class EnsureDirsStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, EnsureDirsStep)

    def handle(self, step: EnsureDirsStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        try:
            for directory in step.directories:
                ctx.resolve(directory).mkdir(parents=True, exist_ok=True)
            for name in step.files:
                path = ctx.resolve(name)
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch(exist_ok=True)
        except OSError as exc:
            return StepOutcome.failure(str(exc))

        return StepOutcome.success(
            f"{len(step.directories)} directories, {len(step.files)} files"
        )


class WriteFileStepHandler(StepHandler):
    def __init__(self, renderer: TemplateRenderer):
        self._renderer = renderer

    def supports(self, step) -> bool:
        return isinstance(step, WriteFileStep)

    def handle(self, step: WriteFileStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        target = ctx.resolve(step.path)

        if target.exists() and not step.overwrite:
            return StepOutcome.success(f"kept existing {step.path}")

        try:
            content = self._renderer.render(
                step.template,
                RenderSources(project=ctx.project, env=ctx.env),
            )
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except (TemplateRenderError, OSError) as exc:
            deps.logger.error("file.write_failed", step_id=step.id, path=str(target), error=str(exc))
            return StepOutcome.failure(f"Could not write {step.path}: {exc}")

        deps.logger.debug("file.written", step_id=step.id, path=str(target), size=len(content))
        return StepOutcome.success(f"wrote {step.path}")
