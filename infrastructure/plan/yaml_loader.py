from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from infrastructure.plan.base_loader import PlanLoaderBase


class YamlPlanLoader(PlanLoaderBase):
    """YAMLファイルからPlanをロード"""

    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as handle:
            try:
                return yaml.safe_load(handle)
            except yaml.YAMLError as exc:
                raise ValueError(str(exc)) from exc
