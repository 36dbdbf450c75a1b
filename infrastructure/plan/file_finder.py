"""Find plan files by ID."""
from pathlib import Path
from typing import Optional


class PlanFileFinder:
    """Search plan files under the given base directory."""

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    def find_by_id(self, plan_id: str) -> Optional[Path]:
        """
        Find a plan file by plan ID.

        Args:
            plan_id: Plan ID (e.g., "nextjs-monorepo")

        Returns:
            The Path if found, otherwise None.
        """
        if not self.base_dir.is_dir():
            return None

        priority = [".json", ".yaml", ".yml"]
        candidates: list[Path] = []

        for ext in priority:
            filename = f"{plan_id}{ext}"
            for file_path in self.base_dir.rglob(filename):
                if file_path.is_file():
                    candidates.append(file_path)

        if not candidates:
            return None

        candidates.sort(key=lambda path: (priority.index(path.suffix), str(path)))
        return candidates[0]
