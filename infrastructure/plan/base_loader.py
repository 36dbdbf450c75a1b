"""
Plan file (YAML/JSON) -> BootstrapPlan
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from domain.plan import BootstrapPlan, PlanMeta
from domain.steps import (
    CheckToolStep,
    CommandStep,
    EnsureDirsStep,
    EnvKey,
    GitCommitStep,
    GitInitStep,
    GitTagStep,
    PromptEnvStep,
    Severity,
    Step,
    WriteFileStep,
)
from domain.version import parse_version


class PlanLoadError(Exception):
    pass


class PlanLoaderBase(ABC):
    """ファイル形式ごとの差分は _load_file だけ"""

    def load_from_file(self, path: str) -> BootstrapPlan:
        p = Path(path)
        if not p.exists():
            raise PlanLoadError(f"Plan file not found: {path}")

        try:
            data = self._load_file(p)
        except (OSError, ValueError) as exc:
            raise PlanLoadError(f"Plan file could not be parsed: {path}: {exc}") from exc

        if data is None:
            raise PlanLoadError(f"Plan file is empty: {path}")

        if not isinstance(data, dict):
            raise PlanLoadError(f"Plan file is invalid: {path}")

        return self.load_from_dict(data, base_dir=p.parent, default_id=p.stem)

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...

    def load_from_dict(
        self,
        data: Dict[str, Any],
        base_dir: Optional[Path] = None,
        default_id: str = "custom",
    ) -> BootstrapPlan:
        self._base_dir = base_dir or Path.cwd()
        meta = self._load_meta(data.get("meta") or {}, default_id)
        steps = self._load_steps(data.get("steps") or [])
        return BootstrapPlan(meta=meta, steps=steps)

    def _load_meta(self, data: Dict[str, Any], default_id: str) -> PlanMeta:
        plan_id = str(data.get("id") or default_id)
        return PlanMeta(
            id=plan_id,
            name=data.get("name", plan_id),
            description=data.get("description", ""),
        )

    def _load_steps(self, steps_data: List[Dict[str, Any]]) -> List[Step]:
        if not isinstance(steps_data, list):
            raise PlanLoadError("'steps' must be a list")
        return [self._load_step(step_data) for step_data in steps_data]

    def _load_step(self, data: Dict[str, Any]) -> Step:
        """ステップをtype別にロード"""
        if not isinstance(data, dict):
            raise PlanLoadError(f"Step must be a mapping: {data!r}")

        step_type = str(data.get("type", "")).lower()
        step_id = str(data.get("id", ""))

        common_kwargs = {
            "id": step_id,
            "name": data.get("name") or step_id,
            "severity": self._load_severity(data.get("severity", "fatal"), step_id),
            "enabled": bool(data.get("enabled", True)),
        }

        loaders: Dict[str, Callable[[Dict[str, Any], Dict[str, Any]], Step]] = {
            "check_tool": self._load_check_tool_step,
            "command": self._load_command_step,
            "git_init": self._load_git_init_step,
            "git_commit": self._load_git_commit_step,
            "git_tag": self._load_git_tag_step,
            "ensure_dirs": self._load_ensure_dirs_step,
            "write_file": self._load_write_file_step,
            "prompt_env": self._load_prompt_env_step,
        }
        loader = loaders.get(step_type)
        if loader is None:
            raise PlanLoadError(f"Unknown step type '{step_type}' for step '{step_id}'")
        return loader(data, common_kwargs)

    def _load_severity(self, value: Any, step_id: str) -> Severity:
        try:
            return Severity(str(value).lower())
        except ValueError as exc:
            raise PlanLoadError(f"Invalid severity '{value}' for step '{step_id}'") from exc

    def _load_check_tool_step(self, data: Dict[str, Any], common: Dict[str, Any]) -> CheckToolStep:
        # YAML は 18.17 を float として読むので文字列に戻す
        min_version = data.get("min_version")
        if min_version is not None:
            min_version = str(min_version)
            if parse_version(min_version) is None:
                raise PlanLoadError(
                    f"Invalid min_version '{min_version}' for step '{common['id']}'"
                )
        return CheckToolStep(
            tool=data.get("tool", ""),
            display_name=data.get("display_name", ""),
            install_url=data.get("install_url", ""),
            version_args=[str(a) for a in data.get("version_args", ["--version"])],
            min_version=min_version,
            **common,
        )

    def _load_command_step(self, data: Dict[str, Any], common: Dict[str, Any]) -> CommandStep:
        program = data.get("program", "")
        if not program:
            raise PlanLoadError(f"Command step '{common['id']}' has no program")
        return CommandStep(
            program=program,
            args=[str(a) for a in data.get("args", [])],
            stream_output=bool(data.get("stream_output", False)),
            **common,
        )

    def _load_git_init_step(self, data: Dict[str, Any], common: Dict[str, Any]) -> GitInitStep:
        return GitInitStep(**common)

    def _load_git_commit_step(self, data: Dict[str, Any], common: Dict[str, Any]) -> GitCommitStep:
        return GitCommitStep(message=str(data.get("message", "Initial commit")), **common)

    def _load_git_tag_step(self, data: Dict[str, Any], common: Dict[str, Any]) -> GitTagStep:
        return GitTagStep(tag=str(data.get("tag", "v0.1.0")), **common)

    def _load_ensure_dirs_step(self, data: Dict[str, Any], common: Dict[str, Any]) -> EnsureDirsStep:
        return EnsureDirsStep(
            directories=list(data.get("directories", [])),
            files=list(data.get("files", [])),
            **common,
        )

    def _load_write_file_step(self, data: Dict[str, Any], common: Dict[str, Any]) -> WriteFileStep:
        path = data.get("path", "")
        if not path:
            raise PlanLoadError(f"write_file step '{common['id']}' has no path")

        template = data.get("template")
        template_file = data.get("template_file")
        if template is None and template_file:
            source = self._base_dir / template_file
            try:
                template = source.read_text(encoding="utf-8")
            except OSError as exc:
                raise PlanLoadError(f"Template file not readable: {source}: {exc}") from exc
        if template is None:
            raise PlanLoadError(f"write_file step '{common['id']}' needs template or template_file")

        return WriteFileStep(
            path=path,
            template=template,
            overwrite=bool(data.get("overwrite", True)),
            **common,
        )

    def _load_prompt_env_step(self, data: Dict[str, Any], common: Dict[str, Any]) -> PromptEnvStep:
        keys: List[EnvKey] = []
        for item in data.get("keys", []):
            if isinstance(item, str):
                keys.append(EnvKey(key=item))
                continue
            keys.append(
                EnvKey(
                    key=item.get("key", ""),
                    label=item.get("label", ""),
                    default=str(item.get("default", "")),
                )
            )
        return PromptEnvStep(
            path=data.get("path", ".env.local"),
            keys=keys,
            **common,
        )
