from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SEPARATOR = " - "

_LINE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) - (.*)$")


@dataclass(frozen=True)
class RunLogEntry:
    timestamp: datetime
    message: str

    def render(self) -> str:
        return f"{self.timestamp.strftime(TIMESTAMP_FORMAT)}{SEPARATOR}{self.message}"

    @classmethod
    def parse(cls, line: str) -> "RunLogEntry":
        m = _LINE_RE.match(line.rstrip("\n"))
        if m is None:
            raise ValueError(f"Malformed run log line: {line!r}")
        return cls(
            timestamp=datetime.strptime(m.group(1), TIMESTAMP_FORMAT),
            message=m.group(2),
        )
