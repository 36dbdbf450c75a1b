# application/ports/command_runner.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

# Same status a POSIX shell reports for an unknown command.
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


@dataclass(frozen=True)
class CommandResult:
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def not_found(self) -> bool:
        return self.exit_code == EXIT_NOT_FOUND

    def last_line(self, stream: str = "stdout") -> str:
        text = self.stdout if stream == "stdout" else self.stderr
        lines = [line for line in text.splitlines() if line.strip()]
        return lines[-1].strip() if lines else ""


class CommandRunnerPort(ABC):
    @abstractmethod
    def run(
        self,
        name: str,
        args: List[str],
        cwd: Optional[Path] = None,
        capture: bool = True,
    ) -> CommandResult:
        """
        Run an external program and wait for it to exit.
        A missing executable is reported as EXIT_NOT_FOUND and one that
        cannot be started as EXIT_NOT_EXECUTABLE; neither is raised.
        """
        ...
