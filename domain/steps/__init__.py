from domain.steps.base import Step, Severity
from domain.steps.command import CommandStep
from domain.steps.env import EnvKey, PromptEnvStep
from domain.steps.files import EnsureDirsStep, WriteFileStep
from domain.steps.git import GitCommitStep, GitInitStep, GitTagStep
from domain.steps.tool import CheckToolStep

__all__ = [
    "Step",
    "Severity",
    "CheckToolStep",
    "CommandStep",
    "EnvKey",
    "PromptEnvStep",
    "EnsureDirsStep",
    "WriteFileStep",
    "GitInitStep",
    "GitCommitStep",
    "GitTagStep",
]
