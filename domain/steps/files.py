from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from domain.steps.base import Step


@dataclass(frozen=True)
class EnsureDirsStep(Step):
    directories: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class WriteFileStep(Step):
    path: str = ""
    template: str = ""
    overwrite: bool = True
