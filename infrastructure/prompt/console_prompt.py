from __future__ import annotations

from typing import Callable

from application.ports.prompt import PromptInputError, PromptPort


class ConsolePrompt(PromptPort):
    """Blocks on stdin until a non-empty answer (or the default) is given."""

    def __init__(self, reader: Callable[[str], str] = input):
        self._reader = reader

    def ask(self, label: str, default: str = "") -> str:
        question = f"{label} [{default}]: " if default else f"{label}: "
        while True:
            try:
                answer = self._reader(question).strip()
            except EOFError as exc:
                raise PromptInputError(f"input closed while asking for {label}") from exc
            if answer:
                return answer
            if default:
                return default
