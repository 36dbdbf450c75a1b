from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from domain.steps.base import Step


@dataclass(frozen=True)
class EnvKey:
    key: str
    label: str = ""
    default: str = ""

    @property
    def prompt(self) -> str:
        return self.label or self.key


@dataclass(frozen=True)
class PromptEnvStep(Step):
    path: str = ".env.local"
    keys: List[EnvKey] = field(default_factory=list)
