from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


class TemplateRenderError(Exception):
    pass


@dataclass(frozen=True)
class RenderSources:
    project: Dict[str, Any] = field(default_factory=dict)
    env: Dict[str, Any] = field(default_factory=dict)


class TemplateRenderer:
    """
    ${project.xxx}, ${env.xxx} を展開する。
    - ドット参照対応: ${project.scripts.build}
    - \\${...} はエスケープ扱いでそのまま ${...} を出力（JS のテンプレートリテラル用）
    - ${{ ... }} は GitHub Actions の式なので展開しない
    """

    def render(self, template: str, src: RenderSources) -> str:
        if template is None:
            return ""
        if "${" not in template:
            return template

        out = []
        i = 0
        while i < len(template):
            start = template.find("${", i)
            if start < 0:
                out.append(template[i:])
                break

            # \${ -> ${
            if start > 0 and template[start - 1] == "\\":
                out.append(template[i : start - 1])
                out.append("${")
                i = start + 2
                continue

            # ${{ ... }} -> untouched
            if template.startswith("${{", start):
                end = template.find("}}", start + 3)
                if end < 0:
                    raise TemplateRenderError(f"unclosed expression at offset {start}")
                out.append(template[i : end + 2])
                i = end + 2
                continue

            out.append(template[i:start])
            end = template.find("}", start + 2)
            if end < 0:
                raise TemplateRenderError(f"unclosed template at offset {start}")
            expr = template[start + 2 : end].strip()
            value = self._eval(expr, src)
            out.append("" if value is None else str(value))
            i = end + 1

        return "".join(out)

    def _eval(self, expr: str, src: RenderSources) -> Any:
        root_name, rest = self._split_root(expr)

        root = {
            "project": src.project,
            "env": src.env,
        }.get(root_name)

        if root is None:
            raise TemplateRenderError(f"unknown root: {root_name}")

        if rest == "":
            raise TemplateRenderError(f"missing key after root: {expr}")

        return self._resolve_path(root, rest)

    def _split_root(self, expr: str) -> Tuple[str, str]:
        if "." in expr:
            a, b = expr.split(".", 1)
            return a, b
        return expr, ""

    def _resolve_path(self, obj: Any, path: str) -> Any:
        cur = obj
        for part in path.split("."):
            if isinstance(cur, dict):
                cur = cur.get(part, "")
            elif hasattr(cur, part):
                cur = getattr(cur, part)
            else:
                return ""
        return cur
