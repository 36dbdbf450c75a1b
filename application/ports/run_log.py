from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from domain.run_log import RunLogEntry


class RunLogPort(ABC):
    @abstractmethod
    def append(self, message: str) -> RunLogEntry:
        ...

    @abstractmethod
    def entries(self) -> List[RunLogEntry]:
        ...
