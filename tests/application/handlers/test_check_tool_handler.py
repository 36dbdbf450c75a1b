from application.handlers.check_tool_handler import CheckToolStepHandler
from application.ports.command_runner import CommandResult
from domain.steps import CheckToolStep


def node_step(min_version="18.17.0"):
    return CheckToolStep(
        id="check-node",
        name="Check Node.js",
        tool="node",
        display_name="Node.js",
        install_url="https://nodejs.org/",
        min_version=min_version,
    )


def test_present_tool_reports_version(ctx, deps, runner):
    outcome = CheckToolStepHandler().handle(node_step(), ctx, deps)

    assert outcome.ok is True
    assert outcome.detail == "20.11.1"
    assert runner.calls == [("node", "--version")]


def test_missing_tool_is_not_installed(ctx, deps, runner):
    runner.missing.add("node")

    outcome = CheckToolStepHandler().handle(node_step(), ctx, deps)

    assert outcome.ok is False
    assert outcome.error_message == (
        "Node.js is not installed. Please install Node.js (https://nodejs.org/) and try again."
    )


def test_version_below_minimum_fails(ctx, deps, runner):
    runner.versions["node"] = "v16.20.2"

    outcome = CheckToolStepHandler().handle(node_step(), ctx, deps)

    assert outcome.ok is False
    assert "16.20.2 is below the required minimum version 18.17.0" in outcome.error_message


def test_unparseable_version_fails_the_gate(ctx, deps, runner):
    runner.versions["node"] = "weird build"

    outcome = CheckToolStepHandler().handle(node_step(), ctx, deps)

    assert outcome.ok is False
    assert "Could not determine the Node.js version" in outcome.error_message


def test_presence_only_check_accepts_any_output(ctx, deps, runner):
    runner.versions["docker"] = "podman-docker shim"
    step = CheckToolStep(id="check-docker", name="Check Docker", tool="docker", display_name="Docker")

    outcome = CheckToolStepHandler().handle(step, ctx, deps)

    assert outcome.ok is True
    assert outcome.detail == "podman-docker shim"


def test_non_zero_exit_fails(ctx, deps, runner):
    runner.results[("npm", "--version")] = CommandResult(exit_code=1, stderr="broken install")
    step = CheckToolStep(id="check-npm", name="Check npm", tool="npm")

    outcome = CheckToolStepHandler().handle(step, ctx, deps)

    assert outcome.ok is False
    assert "exited with status 1" in outcome.error_message
