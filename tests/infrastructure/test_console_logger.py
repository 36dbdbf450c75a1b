from __future__ import annotations

import pytest
from loguru import logger as loguru_logger

from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging


@pytest.fixture
def captured():
    messages = []
    handler_id = loguru_logger.add(
        lambda msg: messages.append(msg.record),
        level="DEBUG",
        format="{message}",
    )
    yield messages
    loguru_logger.remove(handler_id)


def test_console_logger_emits_type_field(captured) -> None:
    logger = ConsoleLogger()

    logger.info("step.start", step_id="s1", message="Check npm...")

    record = captured[-1]
    assert record["message"] == "Check npm..."
    assert record["level"].name == "INFO"
    assert record["extra"]["type"] == "step.start"
    assert record["extra"]["step_id"] == "s1"


def test_bound_fields_are_attached(captured) -> None:
    logger = ConsoleLogger().bind(run_id="r1")

    logger.success("step.ok", message="[OK] Check npm")
    logger.warning("step.warning", message="Warning")
    logger.error("step.failed", message="Error")

    assert [r["level"].name for r in captured] == ["SUCCESS", "WARNING", "ERROR"]
    assert all(r["extra"]["run_id"] == "r1" for r in captured)


def test_event_without_message_prints_fields(captured) -> None:
    ConsoleLogger().debug("tool.detected", tool="node", version="20.11.1")

    assert captured[-1]["message"] == "tool.detected tool=node version=20.11.1"


def test_message_with_braces_is_printed_verbatim(captured) -> None:
    ConsoleLogger().error("step.failed", message="Error: unexpected token {")

    assert captured[-1]["message"] == "Error: unexpected token {"


def test_setup_console_logging_prints_status_lines(capsys) -> None:
    setup_console_logging(level="INFO", colorize=False)

    ConsoleLogger().info("step.start", message="Installing dependencies...")
    ConsoleLogger().debug("step.end", message="hidden")

    out = capsys.readouterr().out
    assert "Installing dependencies..." in out
    assert "hidden" not in out
