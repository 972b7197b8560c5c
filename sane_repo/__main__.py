import asyncio
import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click
import yaml
from rich.console import Console

from sane_repo.config import SaneRepoConfig, load_config
from sane_repo.errors import SaneRepoError
from sane_repo.settings import SettingsRepository
from sane_repo.tui import SaneRepoConsoleUI
from sane_repo.utils import compact_home_paths_in_text


FORMAT_VALUES = ["table", "json", "yaml"]


def _start_dir(obj: Dict[str, Any]) -> Path:
    cwd: Optional[Path] = obj.get("cwd")
    return cwd if cwd is not None else Path.cwd()


def _load(obj: Dict[str, Any]) -> SaneRepoConfig:
    try:
        return load_config(_start_dir(obj), template_root=obj.get("template_root"))
    except SaneRepoError as exc:
        raise click.ClickException(f"Fatal: {compact_home_paths_in_text(str(exc))}")


def _run(fn: Callable[[], Any]) -> Any:
    try:
        return asyncio.run(fn())
    except SaneRepoError as exc:
        raise click.ClickException(f"Fatal: {compact_home_paths_in_text(str(exc))}")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory to start the workspace search from.",
)
@click.option(
    "--template-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding files/ and templates/ (defaults to the bundled set).",
)
@click.pass_context
def cli(ctx: click.Context, cwd: Optional[Path], template_root: Optional[Path]) -> None:
    """Monorepo convention rules for sane workspaces."""
    ctx.obj = {"cwd": cwd, "template_root": template_root}


@cli.command(help="Compile and print the rule list for the workspace.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMAT_VALUES, case_sensitive=False),
    default="table",
    show_default=True,
)
@click.pass_obj
def rules(obj: Dict[str, Any], output_format: str) -> None:
    config = _load(obj)
    _run(config.materialize)

    normalized = output_format.lower()
    if normalized == "json":
        click.echo(json.dumps(config.as_dict(), indent=2))
        return
    if normalized == "yaml":
        click.echo(yaml.safe_dump(config.as_dict(), sort_keys=False), nl=False)
        return
    SaneRepoConsoleUI(Console()).render_rules(config)


@cli.command(help="Show the workspace root and package partitions.")
@click.pass_obj
def settings(obj: Dict[str, Any]) -> None:
    config = _load(obj)
    repository = SettingsRepository(config.workspace.root)
    SaneRepoConsoleUI(Console()).render_settings(
        config, repository.settings_path, repository.exists()
    )


@cli.command(help="Render the expected contents of a managed file.")
@click.argument("filename")
@click.option("--raw", is_flag=True, help="Print the content without decoration.")
@click.pass_obj
def render(obj: Dict[str, Any], filename: str, raw: bool) -> None:
    config = _load(obj)
    managed = config.file_rules()
    if filename not in managed:
        raise click.ClickException(
            f"Not a managed file: {filename} (choose from: {', '.join(managed)})"
        )
    content = _run(lambda: config.render_file(filename))
    SaneRepoConsoleUI(Console()).render_file(filename, content, raw=raw)


@cli.command(help="List workspace package directories.")
@click.pass_obj
def packages(obj: Dict[str, Any]) -> None:
    config = _load(obj)
    context = config.workspace_context()
    package_dirs = _run(context.get_workspace_package_dirs)
    SaneRepoConsoleUI(Console()).render_packages(config.workspace.root, package_dirs)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
