from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    FATAL = "fatal"
    ADVISORY = "advisory"


@dataclass(frozen=True)
class Step:
    id: str
    name: str
    severity: Severity = field(default=Severity.FATAL, kw_only=True)
    enabled: bool = field(default=True, kw_only=True)

    def __post_init__(self) -> None:
        # "fatal" のような文字列も Severity に揃える（不正値は ValueError）
        object.__setattr__(self, "severity", Severity(self.severity))

    @property
    def is_fatal(self) -> bool:
        return self.severity is Severity.FATAL
