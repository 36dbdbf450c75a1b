from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List


@dataclass
class RunContext:
    project_dir: Path = field(default_factory=Path.cwd)
    run_id: str = ""

    # template values: name, node_version, ...
    project: Dict[str, Any] = field(default_factory=dict)
    # values collected from the operator by prompt steps
    env: Dict[str, str] = field(default_factory=dict)
    executed: List[str] = field(default_factory=list)

    def resolve(self, relative: str) -> Path:
        return self.project_dir / relative
