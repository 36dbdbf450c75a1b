from __future__ import annotations

from abc import ABC, abstractmethod


class PromptInputError(Exception):
    """No more operator input is available (closed stdin)."""


class PromptPort(ABC):
    @abstractmethod
    def ask(self, label: str, default: str = "") -> str:
        ...
