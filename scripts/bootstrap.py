#!/usr/bin/env python3
"""
Front-end project bootstrap

Usage:
  frontend-bootstrap
  frontend-bootstrap --plan installer
  frontend-bootstrap --plan plans/custom.yaml --project-dir ./web
  frontend-bootstrap --list-plans

With no flags the full Next.js plan runs against the current directory.
Exit status: 0 on success (advisory failures allowed), 1 on a fatal
failure or an invalid plan, 130 when interrupted.
"""
from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import List, Optional

from application.executor.handler_registry import HandlerRegistry
from application.executor.sequencer import BootstrapSequencer
from application.plans import builtin_plan_names, get_builtin_plan, is_builtin_plan
from application.plans.options import PlanOptions
from application.ports.command_runner import CommandRunnerPort
from application.ports.prompt import PromptPort
from application.services.execution_deps import ExecutionDeps
from application.services.plan_validator import PlanValidator
from domain.exceptions import ValidationError
from domain.plan import BootstrapPlan
from domain.run import RunContext
from domain.steps.command import CommandStep
from infrastructure.config.settings import Settings, load_settings
from infrastructure.env.dotenv_env_file import DotEnvFile
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.plan.base_loader import PlanLoadError
from infrastructure.plan.file_finder import PlanFileFinder
from infrastructure.plan.loader_registry import PlanLoaderRegistry
from infrastructure.process.subprocess_runner import SubprocessCommandRunner
from infrastructure.prompt.console_prompt import ConsolePrompt
from infrastructure.run_log.file_run_log import FileRunLog

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

PLANS_DIR_NAME = "plans"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frontend-bootstrap",
        description="Scaffold and bootstrap a Next.js front-end project.",
    )
    parser.add_argument("--plan", help="Built-in plan name or path to a YAML/JSON plan file")
    parser.add_argument("--project-dir", default=".", help="Project directory (default: current directory)")
    parser.add_argument("--project-name", help="Project name used in templates (default: directory name)")
    parser.add_argument("--log-file", help="Run log path (default: <project-dir>/bootstrap.log)")
    parser.add_argument("--skip-dev", action="store_true", help="Do not start the development server")
    parser.add_argument("--list-plans", action="store_true", help="List built-in plans and exit")
    return parser


def resolve_plan(plan_ref: str, options: PlanOptions, project_dir: Path) -> BootstrapPlan:
    if is_builtin_plan(plan_ref):
        return get_builtin_plan(plan_ref, options)

    path = Path(plan_ref)
    if not path.suffix:
        found = PlanFileFinder(project_dir / PLANS_DIR_NAME).find_by_id(plan_ref)
        if found is None:
            raise PlanLoadError(
                f"Unknown plan '{plan_ref}'. Built-in plans: {', '.join(builtin_plan_names())}"
            )
        path = found

    loader = PlanLoaderRegistry().get_loader(path)
    return loader.load_from_file(str(path))


def disable_streaming_steps(plan: BootstrapPlan) -> BootstrapPlan:
    steps = [
        dataclasses.replace(s, enabled=False)
        if isinstance(s, CommandStep) and s.stream_output
        else s
        for s in plan.steps
    ]
    return dataclasses.replace(plan, steps=steps)


def build_deps(
    log_path: Path,
    runner: Optional[CommandRunnerPort] = None,
    prompt: Optional[PromptPort] = None,
) -> ExecutionDeps:
    return ExecutionDeps(
        runner=runner or SubprocessCommandRunner(),
        prompt=prompt or ConsolePrompt(),
        env_files=DotEnvFile(),
        run_log=FileRunLog(log_path),
        logger=ConsoleLogger(),
    )


def run(
    argv: Optional[List[str]] = None,
    runner: Optional[CommandRunnerPort] = None,
    prompt: Optional[PromptPort] = None,
    settings: Optional[Settings] = None,
) -> int:
    args = build_parser().parse_args(argv)
    project_dir = Path(args.project_dir).resolve()

    if settings is None:
        settings = load_settings(dotenv_path=Path.cwd() / ".env")
    setup_console_logging(level=settings.log_level)
    logger = ConsoleLogger()

    if args.list_plans:
        for name in builtin_plan_names():
            plan = get_builtin_plan(name, PlanOptions())
            print(f"{name:12} {plan.meta.description}")
        return EXIT_OK

    options = PlanOptions(
        project_name=args.project_name or project_dir.name,
        min_node_version=settings.min_node_version,
    )

    try:
        plan = resolve_plan(args.plan or settings.plan, options, project_dir)
        PlanValidator().validate(plan)
    except (PlanLoadError, ValidationError) as exc:
        logger.error("plan.invalid", message=f"Error: {exc}")
        return EXIT_FAILURE

    if args.skip_dev:
        plan = disable_streaming_steps(plan)

    try:
        project_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("project_dir.unusable", message=f"Error: {exc}")
        return EXIT_FAILURE

    log_path = Path(args.log_file) if args.log_file else settings.log_path(project_dir)
    deps = build_deps(log_path, runner=runner, prompt=prompt)
    ctx = RunContext(project_dir=project_dir, project=options.project_values())

    logger.info("run.plan", message=f"Running plan '{plan.meta.id}' in {project_dir}")
    sequencer = BootstrapSequencer(HandlerRegistry.default())
    try:
        result = sequencer.execute(plan.steps, ctx, deps)
    except KeyboardInterrupt:
        logger.error("run.interrupted", run_id=ctx.run_id, message="Interrupted.")
        return EXIT_INTERRUPTED

    if result.ok:
        summary = f"{plan.meta.name} completed successfully"
        if result.warnings:
            summary += f" with {len(result.warnings)} warning(s): {', '.join(result.warnings)}"
        logger.success("run.completed", run_id=ctx.run_id, message=summary)
    else:
        logger.error(
            "run.failed",
            run_id=ctx.run_id,
            message=f"{plan.meta.name} stopped at '{result.failed_step_id}'. See {log_path}",
        )
    return result.exit_code


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
