from __future__ import annotations

from pathlib import Path
from typing import Dict

from dotenv import dotenv_values, set_key

from application.ports.env_file import EnvFilePort


class DotEnvFile(EnvFilePort):
    """
    .env.local を python-dotenv で読み書きする。
    既存のキーやコメント行はそのまま残す。
    """

    def read(self, path: Path) -> Dict[str, str]:
        if not path.exists():
            return {}
        return {k: v for k, v in dotenv_values(path).items() if v is not None}

    def update(self, path: Path, values: Dict[str, str]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
        for key, value in values.items():
            set_key(str(path), key, value, quote_mode="always")
