from __future__ import annotations

from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from domain.steps.git import GitCommitStep, GitInitStep, GitTagStep

HEAD_CHECK = ["rev-parse", "--verify", "--quiet", "HEAD"]


def _has_commits(ctx: RunContext, deps: ExecutionDeps) -> bool:
    return deps.runner.run("git", list(HEAD_CHECK), cwd=ctx.project_dir).ok


def _git_failure(command: str, result) -> StepOutcome:
    reason = result.last_line("stderr") or result.last_line("stdout")
    return StepOutcome.failure(
        f"'{command}' exited with status {result.exit_code}" + (f": {reason}" if reason else "")
    )


class GitInitStepHandler(StepHandler):
    """
    git init は既に .git があれば何もしない（再実行しても安全）
    """

    def supports(self, step) -> bool:
        return isinstance(step, GitInitStep)

    def handle(self, step: GitInitStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        if (ctx.project_dir / ".git").exists():
            deps.logger.debug("git.init_skipped", step_id=step.id, reason="exists")
            return StepOutcome.success("already initialized")

        result = deps.runner.run("git", ["init"], cwd=ctx.project_dir)
        if result.not_found:
            return StepOutcome.failure("git is not installed")
        if not result.ok:
            return _git_failure("git init", result)
        return StepOutcome.success("initialized")


class GitCommitStepHandler(StepHandler):
    """
    HEAD が無いときだけ全ファイルをステージして最初のコミットを作る
    """

    def supports(self, step) -> bool:
        return isinstance(step, GitCommitStep)

    def handle(self, step: GitCommitStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        if _has_commits(ctx, deps):
            deps.logger.debug("git.commit_skipped", step_id=step.id, reason="head_exists")
            return StepOutcome.success("already committed")

        staged = deps.runner.run("git", ["add", "-A"], cwd=ctx.project_dir)
        if staged.not_found:
            return StepOutcome.failure("git is not installed")
        if not staged.ok:
            return _git_failure("git add -A", staged)

        committed = deps.runner.run("git", ["commit", "-m", step.message], cwd=ctx.project_dir)
        if not committed.ok:
            return _git_failure("git commit", committed)
        return StepOutcome.success(f"committed '{step.message}'")


class GitTagStepHandler(StepHandler):
    def supports(self, step) -> bool:
        return isinstance(step, GitTagStep)

    def handle(self, step: GitTagStep, ctx: RunContext, deps: ExecutionDeps) -> StepOutcome:
        listed = deps.runner.run("git", ["tag", "--list", step.tag], cwd=ctx.project_dir)
        if not listed.ok:
            return StepOutcome.failure(
                f"'git tag --list {step.tag}' exited with status {listed.exit_code}"
            )

        if listed.stdout.strip():
            status = "already tagged"
        else:
            if not _has_commits(ctx, deps):
                return StepOutcome.failure(f"no commits to tag with {step.tag}; commit first")
            created = deps.runner.run("git", ["tag", step.tag], cwd=ctx.project_dir)
            if not created.ok:
                return _git_failure(f"git tag {step.tag}", created)
            status = "tagged"

        described = deps.runner.run("git", ["describe", "--tags"], cwd=ctx.project_dir)
        if described.ok and described.last_line():
            return StepOutcome.success(f"{status} {described.last_line()}")
        return StepOutcome.success(f"{status} {step.tag}")
