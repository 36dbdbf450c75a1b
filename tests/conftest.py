from __future__ import annotations

from pathlib import Path

import pytest

from application.services.execution_deps import ExecutionDeps
from domain.run import RunContext
from fakes import FakeCommandRunner, RecordingLogger, ScriptedPrompt
from infrastructure.env.dotenv_env_file import DotEnvFile
from infrastructure.run_log.in_memory_run_log import InMemoryRunLog


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "web"
    path.mkdir()
    return path


@pytest.fixture
def runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture
def prompt() -> ScriptedPrompt:
    return ScriptedPrompt()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def run_log() -> InMemoryRunLog:
    return InMemoryRunLog()


@pytest.fixture
def deps(runner, prompt, logger, run_log) -> ExecutionDeps:
    return ExecutionDeps(
        runner=runner,
        prompt=prompt,
        env_files=DotEnvFile(),
        run_log=run_log,
        logger=logger,
    )


@pytest.fixture
def ctx(project_dir: Path) -> RunContext:
    return RunContext(project_dir=project_dir, project={"name": "web", "node_version": "20"})
