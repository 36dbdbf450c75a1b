from __future__ import annotations

from pathlib import Path

import pytest

from application.ports.command_runner import CommandResult
from domain.run_log import RunLogEntry
from fakes import FakeCommandRunner, ScriptedPrompt
from infrastructure.config.settings import Settings
from scripts import bootstrap

GENERATED = [".env.local", ".github/workflows/ci.yml", "Dockerfile", "README.md", ".gitignore"]


def run_cli(project_dir: Path, *extra: str, runner=None, prompt=None, settings=None) -> int:
    return bootstrap.run(
        ["--project-dir", str(project_dir), *extra],
        runner=runner or FakeCommandRunner(),
        prompt=prompt or ScriptedPrompt(["https://api.example.com", ""]),
        settings=settings or Settings(),
    )


def log_messages(project_dir: Path) -> list[str]:
    lines = (project_dir / "bootstrap.log").read_text(encoding="utf-8").splitlines()
    return [RunLogEntry.parse(line).message for line in lines]


def test_missing_npm_halts_before_any_file_is_written(project_dir: Path) -> None:
    runner = FakeCommandRunner(missing=("npm",))

    code = run_cli(project_dir, runner=runner)

    assert code == 1
    messages = log_messages(project_dir)
    assert messages == [
        "[OK] Check Node.js: 20.11.1",
        "[FATAL] Check npm: npm is not installed. Please install npm (https://www.npmjs.com/get-npm) and try again.",
    ]
    assert sum("not installed" in m for m in messages) == 1
    assert [p.name for p in project_dir.iterdir()] == ["bootstrap.log"]
    assert runner.calls == [("node", "--version"), ("npm", "--version")]


def test_full_sequence_generates_files(project_dir: Path, capsys) -> None:
    runner = FakeCommandRunner()

    code = run_cli(project_dir, runner=runner)

    assert code == 0
    for name in GENERATED:
        path = project_dir / name
        assert path.is_file(), name
        assert path.stat().st_size > 0, name
    assert "# web" in (project_dir / "README.md").read_text(encoding="utf-8")
    assert "NEXT_PUBLIC_API_URL='https://api.example.com'" in (project_dir / ".env.local").read_text(encoding="utf-8")
    assert (project_dir / ".git").is_dir()
    assert runner.called("npm", "run", "build")
    assert runner.called("npm", "run", "dev")
    assert runner.calls.index(("git", "commit", "-m", "Initial commit")) < runner.calls.index(("git", "tag", "v0.1.0"))
    assert ".env*.local" in (project_dir / ".gitignore").read_text(encoding="utf-8")

    messages = log_messages(project_dir)
    assert len(messages) == 18
    assert "[OK] Commit initial project: committed 'Initial commit'" in messages
    assert "[OK] Tag initial version: tagged v0.1.0" in messages
    assert all(m.startswith("[OK] ") for m in messages)
    assert "completed successfully" in capsys.readouterr().out


def test_rerun_reports_already_initialized(project_dir: Path) -> None:
    (project_dir / ".git").mkdir()

    code = run_cli(project_dir)

    assert code == 0
    assert "[OK] Initialize Git repository: already initialized" in log_messages(project_dir)


def test_running_twice_is_safe(project_dir: Path) -> None:
    runner = FakeCommandRunner()

    assert run_cli(project_dir, runner=runner) == 0
    assert run_cli(project_dir, runner=runner) == 0

    assert runner.calls.count(("git", "init")) == 1
    messages = log_messages(project_dir)
    assert len(messages) == 36
    assert messages.count("[OK] Initialize Git repository: already initialized") == 1


def test_advisory_failures_keep_exit_code_zero(project_dir: Path) -> None:
    runner = FakeCommandRunner(
        missing=("docker",),
        results={
            ("npm", "audit"): CommandResult(exit_code=1, stdout="3 high severity vulnerabilities\n"),
            ("npm", "test"): CommandResult(exit_code=1, stderr="1 failing\n"),
        },
    )

    code = run_cli(project_dir, runner=runner)

    assert code == 0
    warnings = [m for m in log_messages(project_dir) if m.startswith("[WARN]")]
    assert warnings == [
        "[WARN] Check Docker: Docker is not installed. Please install Docker (https://docs.docker.com/get-docker/) and try again.",
        "[WARN] Audit dependencies: 'npm audit' exited with status 1: 3 high severity vulnerabilities",
        "[WARN] Run tests: 'npm test' exited with status 1: 1 failing",
    ]
    assert runner.called("npm", "run", "build")


def test_old_node_stops_the_run(project_dir: Path) -> None:
    runner = FakeCommandRunner(versions={"node": "v16.20.2"})

    code = run_cli(project_dir, runner=runner)

    assert code == 1
    assert runner.calls == [("node", "--version")]
    assert log_messages(project_dir)[0].startswith("[FATAL] Check Node.js: Node.js 16.20.2 is below")


def test_failed_build_stops_before_tag_and_dev(project_dir: Path) -> None:
    runner = FakeCommandRunner(results={("npm", "run", "build"): CommandResult(exit_code=1)})

    code = run_cli(project_dir, runner=runner)

    assert code == 1
    assert not runner.called("git", "tag", "--list", "v0.1.0")
    assert not runner.called("npm", "run", "dev")
    assert log_messages(project_dir)[-1] == "[FATAL] Build the Next.js project: 'npm run build' exited with status 1"


def test_skip_dev_disables_dev_server(project_dir: Path) -> None:
    runner = FakeCommandRunner()

    code = run_cli(project_dir, "--skip-dev", runner=runner)

    assert code == 0
    assert not runner.called("npm", "run", "dev")
    assert len(log_messages(project_dir)) == 17


def test_installer_plan(project_dir: Path) -> None:
    runner = FakeCommandRunner()

    code = run_cli(project_dir, "--plan", "installer", runner=runner)

    assert code == 0
    assert runner.calls == [
        ("node", "--version"),
        ("npm", "--version"),
        ("npm", "install"),
        ("npm", "run", "build"),
        ("npm", "run", "dev"),
    ]


def test_rtk_query_plan_scaffolds_files(project_dir: Path) -> None:
    code = run_cli(project_dir, "--plan", "rtk-query")

    assert code == 0
    api = (project_dir / "src/app/api.js").read_text(encoding="utf-8")
    assert "query: (postId) => `posts/${postId}`," in api
    assert (project_dir / "pages/posts/[postId].js").is_file()
    assert (project_dir / "pages/_app.js").is_file()


def test_plan_file_by_path_and_by_id(project_dir: Path) -> None:
    plans = project_dir / "plans"
    plans.mkdir()
    (plans / "tiny.yaml").write_text(
        "steps:\n"
        "  - id: git\n"
        "    type: git_init\n"
        "  - id: notes\n"
        "    type: write_file\n"
        "    path: NOTES.md\n"
        "    template: 'Notes for ${project.name}'\n",
        encoding="utf-8",
    )

    assert run_cli(project_dir, "--plan", str(plans / "tiny.yaml")) == 0
    assert run_cli(project_dir, "--plan", "tiny") == 0

    assert (project_dir / "NOTES.md").read_text(encoding="utf-8") == "Notes for web"
    assert log_messages(project_dir)[-2:] == ["[OK] git: already initialized", "[OK] notes: wrote NOTES.md"]


@pytest.mark.parametrize("plan_ref", ["angular", "plans/missing.yaml"])
def test_unknown_plan_exits_one(project_dir: Path, plan_ref: str, capsys) -> None:
    code = run_cli(project_dir, "--plan", plan_ref)

    assert code == 1
    assert not (project_dir / "bootstrap.log").exists()
    assert "Error:" in capsys.readouterr().out


def test_invalid_plan_exits_one(project_dir: Path) -> None:
    path = project_dir / "dupes.yaml"
    path.write_text(
        "steps:\n  - {id: a, type: git_init}\n  - {id: a, type: git_init}\n",
        encoding="utf-8",
    )

    assert run_cli(project_dir, "--plan", str(path)) == 1


def test_bad_min_version_exits_one_before_any_step(project_dir: Path, capsys) -> None:
    path = project_dir / "node.yaml"
    path.write_text(
        "steps:\n  - {id: check-node, type: check_tool, tool: node, min_version: latest}\n",
        encoding="utf-8",
    )
    runner = FakeCommandRunner()

    code = run_cli(project_dir, "--plan", str(path), runner=runner)

    assert code == 1
    assert runner.calls == []
    assert not (project_dir / "bootstrap.log").exists()
    assert "Invalid min_version 'latest'" in capsys.readouterr().out


def test_custom_log_file(project_dir: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"

    code = run_cli(project_dir, "--plan", "installer", "--log-file", str(log_file))

    assert code == 0
    assert len(log_file.read_text(encoding="utf-8").splitlines()) == 5
    assert not (project_dir / "bootstrap.log").exists()


def test_list_plans(project_dir: Path, capsys) -> None:
    code = run_cli(project_dir, "--list-plans")

    out = capsys.readouterr().out
    assert code == 0
    for name in ("nextjs", "installer", "rtk-query"):
        assert name in out


def test_interrupt_exits_130(project_dir: Path) -> None:
    class InterruptingRunner(FakeCommandRunner):
        def run(self, name, args, cwd=None, capture=True):
            if args == ["install"]:
                raise KeyboardInterrupt
            return super().run(name, args, cwd=cwd, capture=capture)

    assert run_cli(project_dir, runner=InterruptingRunner()) == 130


def test_main_exits_with_run_status(monkeypatch) -> None:
    monkeypatch.setattr(bootstrap, "run", lambda: 1)

    with pytest.raises(SystemExit) as excinfo:
        bootstrap.main()

    assert excinfo.value.code == 1
