from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from application.ports.command_runner import (
    EXIT_NOT_EXECUTABLE,
    EXIT_NOT_FOUND,
    CommandResult,
    CommandRunnerPort,
)


class SubprocessCommandRunner(CommandRunnerPort):
    """
    Runs programs with subprocess, no shell, no timeout.
    capture=False lets the child write straight to the terminal (npm run dev).
    Output is decoded as UTF-8; undecodable bytes become U+FFFD.
    """

    def run(
        self,
        name: str,
        args: List[str],
        cwd: Optional[Path] = None,
        capture: bool = True,
    ) -> CommandResult:
        # npm is npm.cmd on Windows; which() resolves PATHEXT
        executable = shutil.which(name)
        if executable is None:
            return CommandResult(exit_code=EXIT_NOT_FOUND, stderr=f"{name}: command not found")

        try:
            completed = subprocess.run(
                [executable, *args],
                cwd=str(cwd) if cwd is not None else None,
                capture_output=capture,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError:
            return CommandResult(exit_code=EXIT_NOT_FOUND, stderr=f"{name}: command not found")
        except OSError as exc:
            return CommandResult(exit_code=EXIT_NOT_EXECUTABLE, stderr=f"{name}: {exc}")

        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
