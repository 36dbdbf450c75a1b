from __future__ import annotations

from pathlib import Path

from infrastructure.plan.file_finder import PlanFileFinder


def test_file_finder_prefers_json(tmp_path: Path) -> None:
    base_dir = tmp_path / "plans"
    base_dir.mkdir()
    (base_dir / "sample.yaml").write_text("meta: {}", encoding="utf-8")
    (base_dir / "sample.json").write_text("{}", encoding="utf-8")

    found = PlanFileFinder(base_dir).find_by_id("sample")

    assert found is not None
    assert found.suffix == ".json"


def test_file_finder_searches_subdirectories(tmp_path: Path) -> None:
    nested = tmp_path / "plans" / "team"
    nested.mkdir(parents=True)
    (nested / "sample.yml").write_text("meta: {}", encoding="utf-8")

    found = PlanFileFinder(tmp_path / "plans").find_by_id("sample")

    assert found == nested / "sample.yml"


def test_file_finder_without_directory(tmp_path: Path) -> None:
    assert PlanFileFinder(tmp_path / "missing").find_by_id("sample") is None
