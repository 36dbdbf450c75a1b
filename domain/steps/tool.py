from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from domain.steps.base import Step


@dataclass(frozen=True)
class CheckToolStep(Step):
    """Presence check for an executable, optionally gated on a minimum version."""

    tool: str = ""
    display_name: str = ""
    install_url: str = ""
    version_args: List[str] = field(default_factory=lambda: ["--version"])
    min_version: Optional[str] = None

    @property
    def label(self) -> str:
        return self.display_name or self.tool
