from collections import Counter
from pathlib import Path

from rich.table import Column, Table

from sane_repo.config import SaneRepoConfig
from sane_repo.rules.models import PackageScope, RuleDescriptor, RuleKind
from sane_repo.tui.enums import RULE_KIND_STYLE, UIStyle
from sane_repo.utils import compact_home_path


def describe_scope(scope: PackageScope) -> str:
    parts: list[str] = []
    if scope.include_packages is not None:
        parts.append("only " + ", ".join(scope.include_packages))
    else:
        parts.append("all packages")
    if scope.exclude_packages:
        parts.append("except " + ", ".join(scope.exclude_packages))
    if scope.include_workspace_root:
        parts.append("+ workspace root")
    return " ".join(parts)


def describe_options(rule: RuleDescriptor) -> str:
    if rule.kind == RuleKind.FILE_CONTENTS:
        content = rule.options["content"]
        mode = "generated" if content.generated else "static"
        return f"{rule.options['file']} ({mode})"
    if rule.kind == RuleKind.PACKAGE_SCRIPT:
        return ", ".join(rule.options["scripts"])
    if rule.kind == RuleKind.PACKAGE_ENTRY:
        entries = rule.options["entries"]
        return f"type={entries.get('type', '')} " + ", ".join(entries)
    if rule.kind == RuleKind.REQUIRE_DEPENDENCY:
        counts = [f"{key}={len(value)}" for key, value in rule.options.items()]
        return "  ".join(counts)
    if rule.kind == RuleKind.STANDARD_TSCONFIG:
        return f"extends {rule.options['template'].get('extends', '')}"
    return ""


class RulesTable:
    @staticmethod
    def summary_block(config: SaneRepoConfig):
        counts = Counter(rule.kind.value for rule in config.rules)
        chips = [f"{key}={value}" for key, value in sorted(counts.items())]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Workspace", config.workspace.name)
        table.add_row("Root", compact_home_path(config.workspace.root))
        table.add_row("Rules", str(len(config.rules)))
        table.add_row("Kinds", "  ".join(chips))
        return table

    @staticmethod
    def rules_table(rules: list[RuleDescriptor]) -> Table:
        table = Table(
            Column(header="#", width=3, justify="right"),
            Column(header="Kind", width=26),
            Column(header="Scope", overflow="fold", max_width=40),
            Column(header="Options", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for index, rule in enumerate(rules, start=1):
            style = RULE_KIND_STYLE.get(rule.kind, UIStyle.WHITE.value)
            table.add_row(
                str(index),
                f"[{style}]{rule.kind.value}[/{style}]",
                describe_scope(rule.scope),
                describe_options(rule),
            )
        return table


class SettingsTable:
    @staticmethod
    def overview_table(config: SaneRepoConfig, settings_path: Path, present: bool) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Workspace", config.workspace.name)
        table.add_row("Root", compact_home_path(config.workspace.root))
        source = compact_home_path(settings_path) if present else "(defaults, no settings file)"
        table.add_row("Settings", source)
        table.add_row("esmOnly", ", ".join(config.settings.esm_only) or "-")
        table.add_row("cjsOnly", ", ".join(config.settings.cjs_only) or "-")
        return table


class PackagesTable:
    @staticmethod
    def packages_table(root: Path, package_dirs: list[Path]) -> Table:
        table = Table(
            Column(header="Package dir", width=28),
            Column(header="Path", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for package_dir in package_dirs:
            try:
                relative = str(package_dir.relative_to(root))
            except ValueError:
                relative = compact_home_path(package_dir)
            table.add_row(package_dir.name, relative)
        return table
