from __future__ import annotations

from dataclasses import dataclass

from domain.steps.base import Step


@dataclass(frozen=True)
class GitInitStep(Step):
    pass


@dataclass(frozen=True)
class GitCommitStep(Step):
    """Stage everything and record the first commit; no-op once HEAD exists."""
    message: str = "Initial commit"


@dataclass(frozen=True)
class GitTagStep(Step):
    tag: str = "v0.1.0"
