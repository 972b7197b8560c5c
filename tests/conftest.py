import sys
import json
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def make_workspace(tmp_path: Path, write_json) -> Callable[..., Path]:
    """Build a pnpm workspace with one package.json per listed package."""

    def _make(
        packages: Iterable[str] = ("pkgA", "pkgB"),
        name: Optional[str] = "sane-root",
        settings: Optional[Any] = None,
        location: str = "workspace",
    ) -> Path:
        root = tmp_path / location
        root.mkdir(parents=True, exist_ok=True)
        manifest: dict[str, Any] = {"private": True}
        if name is not None:
            manifest["name"] = name
        write_json(root / "package.json", manifest)
        (root / "pnpm-workspace.yaml").write_text(
            'packages:\n  - "packages/*"\n', encoding="utf-8"
        )
        for package in packages:
            write_json(root / "packages" / package / "package.json", {"name": package})
        if settings is not None:
            write_json(root / ".sanerepo.json", settings)
        return root

    return _make


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Minimal template tree with a single root file and the jest template."""
    root = tmp_path / "template-root"
    (root / "files").mkdir(parents=True)
    (root / "templates").mkdir(parents=True)
    (root / "files" / ".prettierrc").write_text('{"printWidth": 100}\n', encoding="utf-8")
    (root / "templates" / "jest.config.cjs").write_text(
        'module.exports = { projects: ["INSERT_PROJECT_DIRS"] };\n', encoding="utf-8"
    )
    return root


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
