from pathlib import Path

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.syntax import Syntax

from sane_repo.config import SaneRepoConfig
from sane_repo.tui.enums import UIStyle
from sane_repo.tui.tables import PackagesTable, RulesTable, SettingsTable
from sane_repo.utils import compact_home_path


_SYNTAX_BY_SUFFIX = {
    ".cjs": "javascript",
    ".js": "javascript",
    ".mjs": "javascript",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class SaneRepoConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _panel(self, title: str, body: RenderableType, style: UIStyle) -> None:
        self.console.print(Panel(body, title=title, border_style=style.value, padding=(0, 1)))

    def render_rules(self, config: SaneRepoConfig) -> None:
        self._panel("rule overview", RulesTable.summary_block(config), UIStyle.BLUE)
        if not config.rules:
            self._panel("rules", "No rules compiled.", UIStyle.DIM)
            return
        self._panel("rules", RulesTable.rules_table(config.rules), UIStyle.CYAN)

    def render_settings(self, config: SaneRepoConfig, settings_path: Path, present: bool) -> None:
        self._panel(
            "sanerepo settings",
            SettingsTable.overview_table(config, settings_path, present),
            UIStyle.BLUE,
        )

    def render_packages(self, root: Path, package_dirs: list[Path]) -> None:
        if not package_dirs:
            self._panel(
                "packages",
                f"No workspace packages found under {compact_home_path(root)}.",
                UIStyle.YELLOW,
            )
            return
        self._panel("packages", PackagesTable.packages_table(root, package_dirs), UIStyle.CYAN)

    def render_file(self, filename: str, content: str, raw: bool = False) -> None:
        if raw:
            self.console.out(content, end="", highlight=False)
            return
        lexer = _SYNTAX_BY_SUFFIX.get(Path(filename).suffix, "text")
        self._panel(filename, Syntax(content, lexer, word_wrap=True), UIStyle.MAGENTA)
