from __future__ import annotations

from typing import List

from application.handlers.base import StepHandler
from domain.steps.base import Step


class HandlerRegistry:
    def __init__(self, handlers: List[StepHandler]):
        self._handlers = handlers

    def get_handler(self, step: Step) -> StepHandler:
        for h in self._handlers:
            if h.supports(step):
                return h
        raise RuntimeError(f"No handler found for step: {type(step).__name__} ({step.id})")

    @classmethod
    def default(cls) -> "HandlerRegistry":
        from application.handlers.check_tool_handler import CheckToolStepHandler
        from application.handlers.command_handler import CommandStepHandler
        from application.handlers.files_handler import EnsureDirsStepHandler, WriteFileStepHandler
        from application.handlers.git_handler import GitCommitStepHandler, GitInitStepHandler, GitTagStepHandler
        from application.handlers.prompt_env_handler import PromptEnvStepHandler
        from application.services.template_renderer import TemplateRenderer

        return cls([
            CheckToolStepHandler(),
            CommandStepHandler(),
            GitInitStepHandler(),
            GitCommitStepHandler(),
            GitTagStepHandler(),
            EnsureDirsStepHandler(),
            WriteFileStepHandler(TemplateRenderer()),
            PromptEnvStepHandler(),
        ])
