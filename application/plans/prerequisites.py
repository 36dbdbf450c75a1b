from __future__ import annotations

from typing import Optional

from domain.steps import CheckToolStep, CommandStep, Severity


def check_node(min_version: Optional[str]) -> CheckToolStep:
    return CheckToolStep(
        id="check-node",
        name="Check Node.js",
        tool="node",
        display_name="Node.js",
        install_url="https://nodejs.org/",
        min_version=min_version,
    )


def check_npm() -> CheckToolStep:
    return CheckToolStep(
        id="check-npm",
        name="Check npm",
        tool="npm",
        display_name="npm",
        install_url="https://www.npmjs.com/get-npm",
    )


def check_git() -> CheckToolStep:
    return CheckToolStep(
        id="check-git",
        name="Check Git",
        tool="git",
        display_name="Git",
        install_url="https://git-scm.com/downloads",
    )


def check_docker() -> CheckToolStep:
    return CheckToolStep(
        id="check-docker",
        name="Check Docker",
        tool="docker",
        display_name="Docker",
        install_url="https://docs.docker.com/get-docker/",
        severity=Severity.ADVISORY,
    )


def npm_install(*packages: str) -> CommandStep:
    if packages:
        return CommandStep(
            id="npm-install-packages",
            name=f"Install {' '.join(packages)}",
            program="npm",
            args=["install", *packages],
        )
    return CommandStep(
        id="npm-install",
        name="Install dependencies",
        program="npm",
        args=["install"],
    )


def npm_build() -> CommandStep:
    return CommandStep(
        id="npm-build",
        name="Build the Next.js project",
        program="npm",
        args=["run", "build"],
    )


def npm_dev() -> CommandStep:
    return CommandStep(
        id="npm-dev",
        name="Start the development server",
        program="npm",
        args=["run", "dev"],
        stream_output=True,
    )
