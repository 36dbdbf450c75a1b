from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List

from application.ports.run_log import RunLogPort
from domain.run_log import RunLogEntry


class FileRunLog(RunLogPort):
    """
    Append-only, human-readable run log.
    One line per record: "<YYYY-MM-DD HH:MM:SS> - <message>".
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, message: str) -> RunLogEntry:
        entry = RunLogEntry(timestamp=datetime.now(), message=message.replace("\n", " "))
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as f:
            f.write(entry.render() + "\n")
        return entry

    def entries(self) -> List[RunLogEntry]:
        if not self._path.exists():
            return []
        with self._path.open("r", encoding="utf-8") as f:
            return [RunLogEntry.parse(line) for line in f if line.strip()]
