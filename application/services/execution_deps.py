# application/services/execution_deps.py
from __future__ import annotations

from dataclasses import dataclass, replace

from application.ports.command_runner import CommandRunnerPort
from application.ports.env_file import EnvFilePort
from application.ports.logger import LoggerPort
from application.ports.prompt import PromptPort
from application.ports.run_log import RunLogPort


@dataclass(frozen=True)
class ExecutionDeps:
    runner: CommandRunnerPort
    prompt: PromptPort
    env_files: EnvFilePort
    run_log: RunLogPort
    logger: LoggerPort

    def with_logger(self, logger: LoggerPort) -> "ExecutionDeps":
        return replace(self, logger=logger)
