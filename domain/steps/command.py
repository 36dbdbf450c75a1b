from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from domain.steps.base import Step


@dataclass(frozen=True)
class CommandStep(Step):
    program: str = ""
    args: List[str] = field(default_factory=list)
    # long-running commands (dev server) write straight to the terminal
    stream_output: bool = False

    @property
    def command_line(self) -> str:
        return " ".join([self.program, *self.args])
