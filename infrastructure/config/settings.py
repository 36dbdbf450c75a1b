"""Tool settings from the environment (and a .env next to the invocation)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from application.plans import DEFAULT_PLAN
from application.plans.options import DEFAULT_MIN_NODE_VERSION

DEFAULT_LOG_FILE_NAME = "bootstrap.log"


@dataclass(frozen=True)
class Settings:
    plan: str = DEFAULT_PLAN
    log_file: Optional[str] = None
    log_level: str = "INFO"
    min_node_version: str = DEFAULT_MIN_NODE_VERSION

    def log_path(self, project_dir: Path) -> Path:
        if self.log_file:
            return Path(self.log_file)
        return project_dir / DEFAULT_LOG_FILE_NAME


def load_settings(environ: Optional[Mapping[str, str]] = None, dotenv_path: Optional[Path] = None) -> Settings:
    if environ is None:
        # .env は既存の環境変数を上書きしない
        if dotenv_path is not None and dotenv_path.exists():
            load_dotenv(dotenv_path, override=False)
        environ = os.environ

    return Settings(
        plan=environ.get("BOOTSTRAP_PLAN") or DEFAULT_PLAN,
        log_file=environ.get("BOOTSTRAP_LOG_FILE") or None,
        log_level=(environ.get("BOOTSTRAP_LOG_LEVEL") or "INFO").upper(),
        min_node_version=environ.get("BOOTSTRAP_MIN_NODE_VERSION") or DEFAULT_MIN_NODE_VERSION,
    )
