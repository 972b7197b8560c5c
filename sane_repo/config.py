"""Entry point the enforcement engine loads: workspace -> settings -> rules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from sane_repo.host import SimpleHost, WorkspaceContext
from sane_repo.models import SaneRepoSettings, Workspace
from sane_repo.rules import RuleDescriptor, RuleKind, RuleSetCompiler
from sane_repo.rules.models import thaw
from sane_repo.settings import SettingsRepository
from sane_repo.templates import Content, TemplateContext, TemplateGenerator
from sane_repo.workspaces import WorkspaceService

DEFAULT_TEMPLATE_ROOT = Path(__file__).resolve().parent / "resources"


@dataclass
class SaneRepoConfig:
    workspace: Workspace
    settings: SaneRepoSettings
    rules: list[RuleDescriptor]
    templates: TemplateGenerator

    def workspace_context(self, host: Optional[SimpleHost] = None) -> WorkspaceContext:
        return WorkspaceContext(self.workspace.root, host=host or self.templates.host)

    def file_rules(self) -> dict[str, RuleDescriptor]:
        return {
            rule.options["file"]: rule
            for rule in self.rules
            if rule.kind == RuleKind.FILE_CONTENTS
        }

    async def render_file(self, filename: str, context: Optional[TemplateContext] = None) -> str:
        rules = self.file_rules()
        if filename not in rules:
            raise KeyError(filename)
        content: Content = rules[filename].options["content"]
        return await self.templates.render(
            content, context or TemplateContext(self.workspace_context())
        )

    async def materialize(self, context: Optional[TemplateContext] = None) -> dict[str, str]:
        """Render every file-contents rule; the first template error aborts."""
        context = context or TemplateContext(self.workspace_context())
        rendered: dict[str, str] = {}
        for filename in self.file_rules():
            rendered[filename] = await self.render_file(filename, context)
        return rendered

    def as_dict(self) -> dict[str, Any]:
        return {
            "workspace": {"root": str(self.workspace.root), "name": self.workspace.name},
            "settings": self.settings.as_dict(),
            "rules": [rule_to_dict(rule) for rule in self.rules],
        }


def rule_to_dict(rule: RuleDescriptor) -> dict[str, Any]:
    options = {key: thaw(value) for key, value in rule.options.items() if key != "content"}
    content = rule.options.get("content")
    if content is not None:
        options["templateFile"] = str(content.template_file)
        options["generated"] = content.generated
    return {"kind": rule.kind.value, **rule.scope.as_dict(), "options": options}


def load_config(
    start_dir: Path,
    template_root: Optional[Path] = None,
    host: Optional[SimpleHost] = None,
) -> SaneRepoConfig:
    host = host or SimpleHost()
    workspace = WorkspaceService(host).load_workspace(start_dir)
    settings = SettingsRepository(workspace.root).load()
    templates = TemplateGenerator(template_root or DEFAULT_TEMPLATE_ROOT, host=host)
    rules = RuleSetCompiler(templates).compile(workspace.root, workspace.name, settings)
    return SaneRepoConfig(
        workspace=workspace, settings=settings, rules=rules, templates=templates
    )
