from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from infrastructure.plan.base_loader import PlanLoaderBase


class JsonPlanLoader(PlanLoaderBase):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
