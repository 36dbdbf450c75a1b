from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict


class EnvFilePort(ABC):
    @abstractmethod
    def read(self, path: Path) -> Dict[str, str]:
        ...

    @abstractmethod
    def update(self, path: Path, values: Dict[str, str]) -> None:
        """Set the given keys, keeping every other line of the file."""
        ...
