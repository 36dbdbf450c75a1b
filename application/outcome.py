from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class StepOutcome:
    ok: bool
    error_message: Optional[str] = None
    # short human-readable result, e.g. detected version or "already initialized"
    detail: Optional[str] = None

    @classmethod
    def success(cls, detail: Optional[str] = None) -> "StepOutcome":
        return cls(ok=True, detail=detail)

    @classmethod
    def failure(cls, error_message: str) -> "StepOutcome":
        return cls(ok=False, error_message=error_message)
