from __future__ import annotations

from datetime import datetime
from typing import List

from application.ports.run_log import RunLogPort
from domain.run_log import RunLogEntry


class InMemoryRunLog(RunLogPort):
    def __init__(self) -> None:
        self._entries: List[RunLogEntry] = []

    def append(self, message: str) -> RunLogEntry:
        entry = RunLogEntry(timestamp=datetime.now(), message=message)
        self._entries.append(entry)
        return entry

    def entries(self) -> List[RunLogEntry]:
        return list(self._entries)

    def messages(self) -> List[str]:
        return [e.message for e in self._entries]
